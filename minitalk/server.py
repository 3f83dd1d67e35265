"""Receive bytes from clients as signals and print them."""

from __future__ import annotations

import codecs
import os
import signal
import sys
from types import FrameType
from typing import Optional, Sequence, TextIO

from minitalk.output import put_char, put_endl, put_nbr, put_str
from minitalk.protocol import ONE_SIGNAL, ZERO_SIGNAL, BitDecoder


class Server:
    """Decodes incoming signals and writes each completed character."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = sys.stdout if stream is None else stream
        self.decoder = BitDecoder()
        self._text = codecs.getincrementaldecoder("utf-8")(errors="replace")

    def handle(self, signum: int, frame: Optional[FrameType] = None) -> None:
        """Take one signal; a NUL byte is written as a newline."""
        byte = self.decoder.feed_signal(signum)
        if byte is None:
            return
        if byte == 0:
            put_str(self._text.decode(b"", final=True), self.stream)
            self._text.reset()
            put_char("\n", self.stream)
        else:
            put_str(self._text.decode(bytes([byte])), self.stream)
        self.stream.flush()

    def install(self) -> None:
        """Route SIGUSR1 and SIGUSR2 to :meth:`handle`."""
        signal.signal(ONE_SIGNAL, self.handle)
        signal.signal(ZERO_SIGNAL, self.handle)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print this process's id, then receive messages until interrupted."""
    server = Server()
    put_nbr(os.getpid())
    put_endl("")
    sys.stdout.flush()
    server.install()
    try:
        while True:
            signal.pause()
    except KeyboardInterrupt:
        return 0


if __name__ == "__main__":
    sys.exit(main())