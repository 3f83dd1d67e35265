"""Integer/text conversion and per-character string mapping."""

from __future__ import annotations

import re
from collections.abc import Callable, MutableSequence
from typing import Any, Optional

_NUMBER = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped and a single optional sign is honoured.
    Parsing stops at the first non-digit; text with no digits gives 0.
    """
    match = _NUMBER.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, not {type(n).__name__}")
    return str(n)


def strmapi(text: Optional[str], func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character.

    ``None`` yields an empty string.
    """
    if text is None:
        return ""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(
    text: Optional[MutableSequence[Any]], func: Callable[[int, Any], Any]
) -> None:
    """Call ``func(index, item)`` on each item of a mutable sequence.

    When ``func`` returns something other than ``None`` the item is
    replaced in place with that value. ``None`` is accepted and ignored.
    """
    if text is None:
        return
    for index, item in enumerate(text):
        replacement = func(index, item)
        if replacement is not None:
            text[index] = replacement