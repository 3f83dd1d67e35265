"""String searching, copying, joining, splitting and trimming."""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional, Union

CharLike = Union[str, int]


def _char(c: CharLike) -> str:
    """Turn a character or an integer code into a one-character string.

    Integer codes are reduced to their low byte, as a C ``char`` would be.
    """
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, not bool")
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected a character or an integer code, not {type(c).__name__}")


def _non_negative(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def split(text: str, sep: CharLike) -> list[str]:
    """Split ``text`` on a single separator character, dropping empty words."""
    separator = _char(sep)
    if separator == "\0":
        return [text] if text else []
    return [word for word in text.split(separator) if word]


def strchr(text: str, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``text``, or None.

    Searching for ``"\\0"`` finds the terminator, at ``len(text)``.
    """
    ch = _char(c)
    if ch == "\0" and ch not in text:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``text``, or None.

    Searching for ``"\\0"`` finds the terminator, at ``len(text)``.
    """
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strjoin(first: str, second: str) -> str:
    """Return the concatenation of two strings."""
    if not isinstance(first, str) or not isinstance(second, str):
        raise TypeError("strjoin expects two strings")
    return first + second


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy at most ``size - 1`` characters of ``src``.

    Returns the copied text and the full length of ``src``, the length
    that would have been needed. A size of 0 copies nothing.
    """
    _non_negative("size", size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    The result never exceeds ``size - 1`` characters. Returns the new text
    and the length it tried to create: ``len(dst) + len(src)``, or
    ``size + len(src)`` when ``dst`` already fills the buffer.
    """
    _non_negative("size", size)
    if size <= len(dst):
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the first differing character codes, a
    missing character counting as 0, or 0 when the prefixes match.
    """
    _non_negative("n", n)
    for x, y in zip_longest(first[:n], second[:n], fillvalue="\0"):
        if x != y or x == "\0":
            return ord(x) - ord(y)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` within the first ``length`` characters of ``haystack``.

    Returns its index, 0 for an empty needle, or None when not found.
    """
    _non_negative("length", length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strtrim(text: str, charset: str) -> str:
    """Remove characters of ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``text`` from ``start``.

    A start at or past the end yields an empty string.
    """
    _non_negative("start", start)
    _non_negative("length", length)
    if start >= len(text):
        return ""
    return text[start : start + length]