"""Line-by-line reading from a stream through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

BUFFER_SIZE = 7


class LineReader(Generic[AnyStr]):
    """Read lines from ``stream``, requesting ``buffer_size`` units per read.

    Each line keeps its trailing newline; the final line may lack one.
    Text and binary streams are both accepted.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None

    def read_line(self) -> AnyStr | None:
        """The next line, or None once the stream is exhausted."""
        pending = self._pending
        try:
            while True:
                if pending is not None:
                    newline = b"\n" if isinstance(pending, (bytes, bytearray)) else "\n"
                    index = pending.find(newline)  # type: ignore[arg-type]
                    if index >= 0:
                        self._pending = pending[index + 1:]
                        return pending[:index + 1]
                chunk = self._stream.read(self._buffer_size)
                if not chunk:
                    break
                pending = chunk if pending is None else pending + chunk
        except OSError:
            self._pending = None
            raise
        if not pending:
            self._pending = None
            return None
        self._pending = pending[:0]
        return pending

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line