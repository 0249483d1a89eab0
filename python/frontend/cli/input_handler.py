"""Polled single-key input for the terminal frontend.

``get_key_timeout`` waits up to a timeout for one key and turns it into an
action: ``"quit"``, ``"restart"``, ``"enter"``, a lower-cased printable
character, or ``""`` for anything else.  POSIX terminals are read through
termios + select, Windows consoles through msvcrt.
"""

from __future__ import annotations

import os
import sys
import time

_ACTIONS: dict[str, str] = {
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "\x1b": "quit",  # bare Escape
    "r": "restart",
    "\r": "enter",
    "\n": "enter",
}

_WINDOWS_POLL_S = 0.02
_ESCAPE_TAIL_S = 0.05


def _action(ch: str) -> str:
    action = _ACTIONS.get(ch.lower())
    if action is not None:
        return action
    return ch.lower() if ch.isprintable() else ""


def _poll_windows(timeout: float) -> str | None:
    import msvcrt  # type: ignore[import-not-found]

    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if msvcrt.kbhit():
            return _action(msvcrt.getwch())
        time.sleep(_WINDOWS_POLL_S)
    return None


def _poll_posix(timeout: float) -> str | None:
    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    saved = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        if not select.select([fd], [], [], timeout)[0]:
            return None
        # Unbuffered read, so select() below still sees an escape tail.
        ch = os.read(fd, 1).decode("utf-8", errors="ignore")
        if ch == "\x1b" and select.select([fd], [], [], _ESCAPE_TAIL_S)[0]:
            os.read(fd, 2)  # arrow / function key: ignored
            return ""
        return _action(ch)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def get_key_timeout(timeout: float) -> str | None:
    """Return the action for one key, or ``None`` after *timeout* seconds."""
    if os.name == "nt":
        return _poll_windows(timeout)
    return _poll_posix(timeout)
