"""Serial-style logger that writes values back to back to a text stream."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, TextIO

HR1 = "=======================================\n"
HR2 = "-----\n"


@dataclass(frozen=True)
class HexValue:
    """An integer to be printed in upper-case hexadecimal."""

    value: int

    def __str__(self) -> str:
        value = self.value
        if value < 0:
            value &= 0xFFFFFFFF
        return format(value, "X")


def hex_value(value: int) -> HexValue:
    """Mark ``value`` to be printed in hexadecimal."""
    return HexValue(int(value))


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return f"{value:.2f}"
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("latin-1")
    return str(value)


class Logger:
    """Writes its arguments without separators, like a serial console."""

    def __init__(self, stream: TextIO | None = None, enabled: bool = True) -> None:
        self._stream = stream
        self.enabled = enabled

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def _write(self, text: str) -> None:
        if self.enabled:
            self.stream.write(text)

    def print(self, *args: Any) -> None:
        """Write every argument, one after another."""
        for arg in args:
            self._write(_render(arg))

    def println(self, *args: Any) -> None:
        """Write every argument followed by a newline."""
        self.print(*args)
        self._write("\n")

    def hr1(self) -> None:
        """Write a heavy horizontal rule."""
        self._write(HR1)

    def hr2(self) -> None:
        """Write a light horizontal rule."""
        self._write(HR2)