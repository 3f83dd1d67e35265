"""Send a string to a server process one bit per signal."""

from __future__ import annotations

import os
import sys
import time
from collections.abc import Callable
from typing import Optional, Sequence, Union

from minitalk.convert import atoi
from minitalk.protocol import ONE_SIGNAL, ZERO_SIGNAL, encode_byte

DEFAULT_DELAY = 0.001


def send_text(
    pid: int,
    data: Union[str, bytes],
    delay: float = DEFAULT_DELAY,
    kill: Optional[Callable[[int, int], None]] = None,
) -> None:
    """Signal every bit of ``data`` to ``pid``, pausing ``delay`` seconds between signals."""
    send = os.kill if kill is None else kill
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    for byte in raw:
        for bit in encode_byte(byte):
            send(pid, ONE_SIGNAL if bit else ZERO_SIGNAL)
            time.sleep(delay)
        time.sleep(delay)
        time.sleep(delay)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the client: ``client PID MESSAGE``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        return 1
    pid = atoi(args[0])
    send_text(pid, os.fsencode(args[1]))
    return 0


if __name__ == "__main__":
    sys.exit(main())