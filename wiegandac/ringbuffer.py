"""Fixed-capacity character ring buffer that overwrites its oldest entries."""

from __future__ import annotations

from collections.abc import Iterator

MAX_CAPACITY = 255


class RingBuffer:
    """Holds the most recent ``capacity`` characters put into it."""

    def __init__(self, capacity: int) -> None:
        if not 0 < capacity <= MAX_CAPACITY:
            raise ValueError(
                f"capacity must be between 1 and {MAX_CAPACITY}, got {capacity}"
            )
        self._capacity = capacity
        self._slots: list[str] = [""] * capacity
        self._start = 0
        self._size = 0

    def capacity(self) -> int:
        """Return the maximum number of characters held."""
        return self._capacity

    def reset(self) -> None:
        """Discard all content."""
        self._start = 0
        self._size = 0

    def put(self, char: str) -> None:
        """Append one character, dropping the oldest one when full."""
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        write_index = (self._start + self._size) % self._capacity
        self._slots[write_index] = char
        if self._size < self._capacity:
            self._size += 1
        else:
            self._start = (self._start + 1) % self._capacity

    def read(self, pos: int) -> str:
        """Return the character at ``pos``, counted from the oldest one."""
        if not 0 <= pos < self._size:
            raise IndexError(f"position {pos} out of range for size {self._size}")
        return self._slots[(self._start + pos) % self._capacity]

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[str]:
        for offset in range(self._size):
            yield self._slots[(self._start + offset) % self._capacity]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return "".join(self) == other
        if isinstance(other, RingBuffer):
            return "".join(self) == "".join(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "".join(self)

    def __repr__(self) -> str:
        return f"RingBuffer(capacity={self._capacity}, content={str(self)!r})"