"""The receiving end: turns incoming signals back into bytes on a stream."""

from __future__ import annotations

import os
import signal
import sys
from types import FrameType
from typing import BinaryIO, Sequence

from sigtalk.printf import printf
from sigtalk.protocol import CharDecoder, Signal

__all__ = ["Server", "main"]


class Server:
    """Decode user signals and write each completed byte to a binary stream."""

    def __init__(self, stream: BinaryIO | None = None) -> None:
        self.stream = sys.stdout.buffer if stream is None else stream
        self.decoder = CharDecoder()

    def handle(self, signum: int, frame: FrameType | None = None) -> None:
        """Signal handler: add one bit, writing the byte once it is complete."""
        byte = self.decoder.feed(signum)
        if byte is not None:
            self.stream.write(bytes((byte,)))
            self.stream.flush()

    def install(self) -> None:
        """Make this server the handler of both message signals."""
        for sig in Signal:
            signal.signal(sig, self.handle)

    def serve_forever(self) -> None:
        """Install the handlers and wait for signals without end."""
        self.install()
        while True:
            signal.pause()


def main(argv: Sequence[str] | None = None) -> int:
    """Print the process id and receive messages until interrupted."""
    printf("SERVER PID=%d\n", os.getpid())
    server = Server()
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        return 0
    return 0