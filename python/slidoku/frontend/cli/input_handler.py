"""Single-keypress reader for the terminal frontend.

Arrow keys move the selection cursor, WASD slide a tile into the blank,
Enter/Space "click" the selected cell.  Works on macOS / Linux
(tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable


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


_pending: list[str] = []


def _getch_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    if _pending:
        return _pending.pop(0)
    ch = msvcrt.getwch()
    if ch in ("\x00", "\xe0"):
        # Arrow keys arrive as a prefix plus a scan code; replay them
        # as the ANSI sequence the Unix path sees.
        _pending.extend(["[", _WIN_SCAN_MAP.get(msvcrt.getwch(), "")])
        return "\x1b"
    return ch


_getch = _getch_windows if os.name == "nt" else _getch_unix


# -- key mapping ---------------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "w": "slide_up",
    "s": "slide_down",
    "a": "slide_left",
    "d": "slide_right",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "r": "restart",
    "n": "hint",
    "t": "target",
    "\r": "click",
    "\n": "click",
    " ": "click",
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}

_WIN_SCAN_MAP: dict[str, str] = {
    "H": "A",
    "P": "B",
    "M": "C",
    "K": "D",
}


def _resolve(ch: str) -> str:
    """Map a raw character to its action string."""
    return _KEY_MAP.get(ch.lower(), ch if ch.isprintable() else "")


def _decode(read: Callable[[], str | None]) -> str:
    """Turn one keypress (possibly an escape sequence) into an action.

    *read* returns the next character, or ``None`` if none is pending.
    """
    ch = read()
    if ch != "\x1b":
        return _resolve(ch or "")
    if read() != "[":
        return "quit"  # bare Escape
    return _ARROW_MAP.get(read() or "", "")


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Read a single keypress and return a normalised action string.

    Blocks until a key is pressed.

    Possible return values:
        "up", "down", "left", "right"   — move the cursor (arrows)
        "slide_up" … "slide_right"      — slide a tile (WASD)
        "click"                         — Enter / Space
        "hint", "target", "restart"     — n / t / r
        "quit"                          — q / Ctrl-C / Escape
        "<char>"                        — unmapped printable char
        ""                              — unrecognised key
    """
    return _decode(_getch)


def get_key_timeout(timeout: float) -> str | None:
    """Like ``get_key`` but returns ``None`` after *timeout* seconds idle.

    Uses ``os.read`` (unbuffered) so ``select`` sees every pending byte
    of a multi-byte arrow sequence.
    """
    if os.name == "nt":
        import msvcrt  # type: ignore[import-not-found]
        import time as _time

        end = _time.monotonic() + timeout
        while _time.monotonic() < end:
            if msvcrt.kbhit():
                return get_key()
            _time.sleep(0.02)
        return None

    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ready, _, _ = select.select([fd], [], [], timeout)
        if not ready:
            return None

        def read() -> str | None:
            pending, _, _ = select.select([fd], [], [], 0.1)
            if not pending:
                return None
            return os.read(fd, 1).decode("utf-8", errors="ignore")

        return _decode(read)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
