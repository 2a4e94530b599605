"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

import operator
import os
from dataclasses import dataclass
from typing import AnyStr, Generic, Iterator, Protocol

__all__ = ["BUFFER_SIZE", "MAX_FD", "LineReader", "get_next_line"]

BUFFER_SIZE = 42
MAX_FD = 1024


class _Readable(Protocol[AnyStr]):
    def read(self, size: int, /) -> AnyStr: ...


def _newline(text: AnyStr) -> AnyStr:
    return "\n" if isinstance(text, str) else b"\n"  # type: ignore[return-value]


class LineReader(Generic[AnyStr]):
    """Return successive lines of a stream, each with its trailing newline.

    The stream is read ``buffer_size`` units at a time; whatever follows the
    returned line is kept for the next call. The last line of a stream that
    does not end in a newline is returned without one. Works with binary and
    text streams alike.
    """

    def __init__(self, stream: _Readable[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        size = operator.index(buffer_size)
        if size <= 0:
            raise ValueError(f"buffer_size must be positive, got {size}")
        self._stream = stream
        self.buffer_size = size
        self._pending: AnyStr | None = None

    @property
    def pending(self) -> AnyStr | None:
        """Data already read but not yet returned, or None."""
        return self._pending

    def _read_chunk(self) -> AnyStr | None:
        try:
            chunk = self._stream.read(self.buffer_size)
        except OSError:
            self._pending = None
            raise
        return chunk or None

    def readline(self) -> AnyStr | None:
        """Return the next line, or None once the stream has nothing more."""
        pending = self._pending
        while pending is None or _newline(pending) not in pending:
            chunk = self._read_chunk()
            if chunk is None:
                break
            pending = chunk if pending is None else pending + chunk

        if not pending:
            self._pending = None
            return None

        cut = pending.find(_newline(pending))
        if cut < 0:
            self._pending = None
            return pending
        self._pending = pending[cut + 1:] or None
        return pending[:cut + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.readline()) is not None:
            yield line


@dataclass(frozen=True)
class _FdStream:
    fd: int

    def read(self, size: int) -> bytes:
        return os.read(self.fd, size)


_readers: dict[int, LineReader[bytes]] = {}


def get_next_line(fd: int) -> bytes | None:
    """Return the next line read from the file descriptor ``fd``, or None at the end.

    Each descriptor keeps its own leftover data between calls, so several
    descriptors may be read in turns. A read error discards that leftover
    and is raised.
    """
    fd = operator.index(fd)
    if not 0 <= fd < MAX_FD:
        raise ValueError(f"file descriptor must be in 0..{MAX_FD - 1}, got {fd}")

    reader = _readers.get(fd)
    if reader is None:
        reader = LineReader(_FdStream(fd))
        _readers[fd] = reader

    try:
        line = reader.readline()
    except OSError:
        _readers.pop(fd, None)
        raise

    if line is None:
        _readers.pop(fd, None)
    return line