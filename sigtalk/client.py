"""The sending end: delivers a message to a server process as signals."""

from __future__ import annotations

import operator
import os
import sys
import time
from typing import Sequence

from sigtalk.protocol import encode_message
from sigtalk.textutils import atoi

__all__ = ["DEFAULT_DELAY", "send_message", "main"]

DEFAULT_DELAY = 100e-6


def send_message(pid: int, message: str | bytes, delay: float = DEFAULT_DELAY) -> int:
    """Send ``message`` to process ``pid``, pausing ``delay`` seconds after each bit.

    Returns the number of signals sent. Raises ValueError for a pid that does
    not name a single process and OSError when a signal cannot be delivered.
    """
    pid = operator.index(pid)
    if pid <= 0:
        raise ValueError(f"invalid process id: {pid}")
    sent = 0
    for sig in encode_message(message):
        os.kill(pid, sig)
        time.sleep(delay)
        sent += 1
    return sent


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry: ``client <pid> <message>``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        return 1
    pid = atoi(args[0])
    try:
        send_message(pid, os.fsencode(args[1]))
    except (ValueError, OSError) as exc:
        print(f"client: {exc}", file=sys.stderr)
        return 1
    return 0