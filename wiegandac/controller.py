"""Keypad loop: reads Wiegand codes and decides on access."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Callable, Iterable
from enum import Enum

from wiegandac.accesscontrol import AccessControl
from wiegandac.logger import Logger, hex_value
from wiegandac.webserver import Webserver

WIEGAND_GPIO_D0 = 18
WIEGAND_GPIO_D1 = 19
WLAN_ON_GPIO_PIN = 34
RELAIS_GPIO_PIN = 32
RELAIS_ON_TIME_MS = 250
MAX_ACCESS_KEY_LEN = 34

KEY_ENTER = 13
KEY_ESCAPE = 27
MODE_PIN_DEBOUNCE_MS = 50


class KeyResult(Enum):
    """What a key press led to."""

    BUFFERED = "buffered"
    RESET = "reset"
    GRANTED = "granted"
    DENIED = "denied"


def _default_clock() -> Callable[[], int]:
    start = time.monotonic()
    return lambda: int((time.monotonic() - start) * 1000)


class Controller:
    """Feeds key codes into access control and watches the modify-mode pin."""

    def __init__(
        self,
        access_control: AccessControl | None = None,
        logger: Logger | None = None,
        clock: Callable[[], int] | None = None,
        mode_pin: Callable[[], bool] | None = None,
    ) -> None:
        self.access_control = access_control if access_control is not None else AccessControl()
        self.logger = logger if logger is not None else Logger()
        self.clock = clock if clock is not None else _default_clock()
        self.mode_pin = mode_pin if mode_pin is not None else (lambda: False)
        self.wiegand_type = 0
        self.check_for_modify = 1
        self.allow_modify = False

    def handle_code(self, code: int) -> KeyResult:
        """Process one key code from the reader."""
        self.logger.println(
            "Wiegand HEX = ",
            hex_value(code),
            " DECIMAL = ",
            code,
            " CHAR = ",
            chr(code & 0xFF),
            " UCHAR = ",
            code & 0xFF,
            " Type W",
            self.wiegand_type,
            "...",
        )
        ac = self.access_control
        if code == KEY_ESCAPE:
            ac.reset_input()
            return KeyResult.RESET
        if code == KEY_ENTER:
            if ac.check():
                self.logger.println("HIT\n")
                result = KeyResult.GRANTED
            else:
                self.logger.println("MISS\n")
                self.logger.println("DATA: '", ac.data(), "'")
                result = KeyResult.DENIED
            ac.reset_input()
            return result
        ac.add_input(code)
        return KeyResult.BUFFERED

    def mode_pin_changed(self) -> None:
        """Schedule a debounced read of the mode pin."""
        self.check_for_modify = self.clock() + MODE_PIN_DEBOUNCE_MS

    def check_mode_pin(self) -> bool:
        """Read the mode pin once a scheduled check is due; return whether the mode changed."""
        now = self.clock()
        if not 0 < self.check_for_modify < now:
            return False
        self.check_for_modify = 0
        is_high = bool(self.mode_pin())
        if self.allow_modify == is_high:
            return False
        self.allow_modify = is_high
        self.logger.print(now)
        self.logger.print(" MODE has changed: ")
        self.logger.println(self.allow_modify)
        return True


def _stdin_tokens() -> Iterable[str]:
    for line in sys.stdin:
        yield from line.split()


def main(argv: list[str] | None = None) -> int:
    """Run the keypad loop over codes given as arguments or on standard input."""
    parser = argparse.ArgumentParser(
        prog="wiegandac", description="Wiegand keypad access control."
    )
    parser.add_argument(
        "codes", nargs="*", help="decimal key codes; read from standard input when none are given"
    )
    parser.add_argument("--serve", action="store_true", help="also start the web server")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=80)
    args = parser.parse_args(argv)

    controller = Controller()
    webserver = None
    if args.serve:
        webserver = Webserver(args.host, args.port, controller.logger)
        webserver.run()
    tokens = args.codes or _stdin_tokens()
    try:
        for token in tokens:
            try:
                code = int(token)
            except ValueError:
                parser.error(f"invalid key code: {token!r}")
            controller.handle_code(code)
            controller.check_mode_pin()
    finally:
        if webserver is not None:
            webserver.stop()
    return 0