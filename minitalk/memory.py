"""Byte-buffer helpers: fill, allocate, search, compare and copy."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Optional

_SIZE_MAX = sys.maxsize


def _count(name: str, n: int, *buffers: Sequence[int]) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"{name} must be an integer, not {type(n).__name__}")
    if n < 0:
        raise ValueError(f"{name} must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"{name}={n} exceeds buffer length {len(buf)}")
    return n


def bzero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Allocate ``count * size`` zeroed bytes.

    A zero count or size gives an empty buffer. A product that cannot be
    addressed raises OverflowError.
    """
    _count("count", count)
    _count("size", size)
    if count == 0 or size == 0:
        return bytearray()
    if _SIZE_MAX // count < size:
        raise OverflowError(f"{count} * {size} bytes cannot be allocated")
    return bytearray(count * size)


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with the low byte of ``value``."""
    _count("n", n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def memchr(buf: Sequence[int], value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` among the first ``n``.

    ``value`` is reduced to its low byte. Returns None when absent.
    """
    _count("n", n, buf)
    target = value & 0xFF
    for index, byte in enumerate(buf[:n]):
        if byte == target:
            return index
    return None


def memcmp(first: Sequence[int], second: Sequence[int], n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns the difference of the first differing bytes, or 0.
    """
    _count("n", n, first, second)
    for x, y in zip(first[:n], second[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dst: bytearray, src: Sequence[int], n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` into the start of ``dst``."""
    _count("n", n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes within ``buf`` from offset ``src`` to offset ``dst``.

    The regions may overlap; the result is as if the source bytes were
    first copied aside.
    """
    _count("n", n)
    for name, offset in (("dst", dst), ("src", src)):
        _count(name, offset)
        if offset + n > len(buf):
            raise ValueError(f"{name}={offset} with n={n} exceeds buffer length {len(buf)}")
    buf[dst : dst + n] = buf[src : src + n]
    return buf