"""Collects keypad input and checks it against the access code."""

from __future__ import annotations

from collections.abc import Callable

from wiegandac.ringbuffer import RingBuffer

INPUT_CAPACITY = 36
ACCESS_CODE = "1234"


class AccessControl:
    """Keeps the most recent keypad input and decides whether it grants access."""

    def __init__(self, on_success: Callable[[], None] | None = None) -> None:
        self.on_success = on_success
        self._buffer = RingBuffer(INPUT_CAPACITY)

    def add_input(self, value: str | int) -> None:
        """Add a key.

        A string is taken as the character itself; an integer is a key
        number and is stored as the character that many places after ``'0'``.
        """
        if isinstance(value, str):
            self._buffer.put(value)
        else:
            self._buffer.put(chr((ord("0") + int(value)) & 0xFF))

    def reset_input(self) -> None:
        """Forget everything typed so far."""
        self._buffer.reset()

    def check(self) -> bool:
        """Return whether the current input is the access code."""
        return self._buffer == ACCESS_CODE

    def data(self) -> str:
        """Return the current input as a string."""
        return str(self._buffer)