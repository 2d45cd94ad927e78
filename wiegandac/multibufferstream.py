"""A readable byte stream over several separate buffers read in sequence."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Union

BufferLike = Union[bytes, bytearray, memoryview, str]

END_OF_STREAM = -1


def _as_bytes(buffer: BufferLike) -> bytes:
    if isinstance(buffer, str):
        return buffer.encode("utf-8")
    return bytes(buffer)


class MultiBufferStream:
    """Reads the given buffers one after another as a single stream.

    ``read`` and ``peek`` return the next byte as an int, or ``-1`` once the
    stream is exhausted.
    """

    def __init__(self, buffers: Iterable[BufferLike]) -> None:
        self._buffers = [data for data in map(_as_bytes, buffers) if data]
        self._total_size = sum(len(data) for data in self._buffers)
        self._index = 0
        self._pos = 0
        self._total_read = 0

    def available(self) -> int:
        """Return the number of bytes not yet read."""
        return self._total_size - self._total_read

    def read(self) -> int:
        """Return the next byte and advance, or -1 at the end."""
        if self._total_read >= self._total_size:
            return END_OF_STREAM
        current = self._buffers[self._index]
        value = current[self._pos]
        self._pos += 1
        self._total_read += 1
        if self._pos >= len(current):
            self._index += 1
            self._pos = 0
        return value

    def peek(self) -> int:
        """Return the next byte without advancing, or -1 at the end."""
        if self._index >= len(self._buffers):
            return END_OF_STREAM
        return self._buffers[self._index][self._pos]

    def size(self) -> int:
        """Return the total number of bytes across all buffers."""
        return self._total_size

    def reset(self) -> None:
        """Rewind to the start of the first buffer."""
        self._index = 0
        self._pos = 0
        self._total_read = 0