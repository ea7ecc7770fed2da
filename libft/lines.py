"""Line-by-line reading from a stream through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

BUFFER_SIZE = 10


def _find_newline(data) -> int:
    """Return the index of the first newline in ``data``, or -1."""
    newline = b"\n" if isinstance(data, (bytes, bytearray)) else "\n"
    return data.find(newline)


class LineReader(Generic[AnyStr]):
    """Read lines from a text or binary stream, ``buffer_size`` units at a time.

    Each line keeps its trailing newline; the last line of a stream that does
    not end with a newline is returned as it is. Data read past the end of a
    line is kept for the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._stash: Optional[AnyStr] = None

    def _fill(self) -> None:
        while True:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                return
            self._stash = chunk if self._stash is None else self._stash + chunk
            if _find_newline(chunk) >= 0:
                return

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or ``None`` once the stream is exhausted.

        A failing read discards any buffered data and the error propagates.
        """
        try:
            self._fill()
        except (OSError, ValueError):
            self._stash = None
            raise
        stash = self._stash
        if not stash:
            self._stash = None
            return None
        index = _find_newline(stash)
        if index < 0:
            self._stash = None
            return stash
        self._stash = stash[index + 1 :] or None
        return stash[: index + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


def read_lines(stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield the lines of ``stream`` one after another."""
    yield from LineReader(stream, buffer_size)