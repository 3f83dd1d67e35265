"""The one-bit-per-signal wire format shared by client and server.

Each byte is sent most significant bit first; a 1 bit is SIGUSR1 and a
0 bit is SIGUSR2.
"""

from __future__ import annotations

import signal
from collections.abc import Iterator
from typing import Optional, Union

ONE_SIGNAL = signal.SIGUSR1
ZERO_SIGNAL = signal.SIGUSR2
BITS_PER_BYTE = 8


def encode_byte(value: int) -> list[int]:
    """Return the eight bits of ``value``, most significant first."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, not {type(value).__name__}")
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value}")
    return [(value >> bit) & 1 for bit in reversed(range(BITS_PER_BYTE))]


def encode_text(data: Union[str, bytes]) -> Iterator[int]:
    """Yield the bits of every byte of ``data``; text is encoded as UTF-8."""
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    for byte in raw:
        yield from encode_byte(byte)


class BitDecoder:
    """Collects bits into bytes, most significant bit first."""

    def __init__(self) -> None:
        self.current = 0
        self.count = 0

    def feed(self, bit: Union[int, bool]) -> Optional[int]:
        """Add one bit; return the completed byte after the eighth, else None."""
        if bit not in (0, 1):
            raise ValueError(f"a bit must be 0 or 1, got {bit!r}")
        self.current = (self.current << 1) | int(bit)
        self.count += 1
        if self.count < BITS_PER_BYTE:
            return None
        byte = self.current
        self.current = 0
        self.count = 0
        return byte

    def feed_signal(self, signum: int) -> Optional[int]:
        """Add the bit a signal stands for: SIGUSR1 is 1, anything else 0."""
        return self.feed(1 if signum == ONE_SIGNAL else 0)