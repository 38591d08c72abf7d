"""Cross-platform single-keypress reader for CLI frontends.

Handles arrow keys, WASD, and special keys without requiring Enter.
Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable

from backend.models.board import Direction


# -- low-level character readers -----------------------------------------------


def _getch_unix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return ch


def _getch_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    return msvcrt.getwch()


_getch = _getch_windows if os.name == "nt" else _getch_unix


# -- shared key mapping --------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "W": "up",
    "s": "down",
    "S": "down",
    "a": "left",
    "A": "left",
    "d": "right",
    "D": "right",
    "q": "quit",
    "Q": "quit",
    "\x03": "quit",  # Ctrl-C
    "r": "shuffle",
    "R": "shuffle",
    "h": "help",
    "?": "help",
}

# Unix: ESC [ A/B/C/D
_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}

# Windows: \xe0 (or \x00) followed by H/P/M/K
_WIN_ARROW_MAP: dict[str, str] = {
    "H": "up",
    "P": "down",
    "M": "right",
    "K": "left",
}

_DIRECTIONS: dict[str, Direction] = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


def _resolve(ch: str) -> str:
    """Map a raw character to its action string."""
    return _KEY_MAP.get(ch, ch if ch.isprintable() else "")


def to_direction(action: str) -> Direction | None:
    """Return the ``Direction`` for a movement action, else ``None``."""
    return _DIRECTIONS.get(action)


# -- public API ----------------------------------------------------------------


def read_action(getch: Callable[[], str]) -> str:
    """Decode one keypress from *getch* into a normalised action string."""
    ch = getch()

    if ch == "\x1b":
        ch2 = getch()
        if ch2 == "[":
            return _ARROW_MAP.get(getch(), "")
        return "quit"  # bare Escape

    if ch in ("\xe0", "\x00"):
        return _WIN_ARROW_MAP.get(getch(), "")

    return _resolve(ch)


def get_key() -> str:
    """Read a single keypress and return a normalised action string.

    Blocks until a key is pressed.

    Possible return values:
        "up", "down", "left", "right"  — movement
        "quit"                         — q / Ctrl-C / Escape
        "shuffle"                      — r
        "help"                         — h / ?
        "<char>"                       — unmapped printable char
        ""                             — unrecognised key
    """
    return read_action(_getch)
