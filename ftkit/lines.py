"""Read a stream one line at a time through a fixed-size read buffer."""

from typing import IO, AnyStr, Generic, Iterator, Optional

DEFAULT_BUFFER_SIZE = 10000


class LineReader(Generic[AnyStr]):
    """Split the data of a text or binary stream into lines.

    The stream is read in chunks of ``buffer_size`` until a chunk holds a
    newline or the stream ends. A returned line loses its newline, except
    when that newline is the last character of the data buffered so far,
    in which case it is kept. Data after the line is held for the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None
        self._nl: Optional[AnyStr] = None

    def _fill(self) -> Optional[AnyStr]:
        data = self._pending
        self._pending = None
        try:
            while True:
                chunk = self._stream.read(self._buffer_size)
                if not chunk:
                    break
                if self._nl is None:
                    # The first chunk tells whether the stream is binary or text.
                    self._nl = b"\n" if isinstance(chunk, (bytes, bytearray)) else "\n"  # type: ignore[assignment]
                data = chunk if data is None else data + chunk
                if self._nl in chunk:
                    break
        except OSError:
            self._pending = None
            raise
        return data

    def next_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted."""
        data = self._fill()
        if data is None or self._nl is None:
            return None
        cut = data.find(self._nl)
        if cut < 0 or cut + 1 == len(data):
            return data
        self._pending = data[cut + 1:]
        return data[:cut]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.next_line()) is not None:
            yield line