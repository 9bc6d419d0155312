"""Terminal key reader.

Puts the terminal in cbreak mode and feeds decoded key names to a callback
from the asyncio loop (``loop.add_reader`` on stdin).
"""

import asyncio
import codecs
import os
import sys
import termios
import tty
from collections.abc import Callable

from ..telemetry import get_logger

logger = get_logger(__name__)

OnKeyCallback = Callable[[str], None]

_ARROWS = {"A": "up", "B": "down", "C": "right", "D": "left"}
_CONTROL = {
    "\r": "enter",
    "\n": "enter",
    " ": "space",
    "\t": "tab",
    "\x03": "ctrl+c",
    "\x7f": "backspace",
}


def decode_keys(data: str) -> list[str]:
    """Split a chunk of terminal input into key names.

    Arrow keys arrive as CSI (``ESC [ A``) or SS3 (``ESC O A``) sequences.
    Other escape sequences collapse to "esc".
    """
    keys: list[str] = []
    i = 0
    while i < len(data):
        ch = data[i]
        if ch != "\x1b":
            keys.append(_CONTROL.get(ch, ch))
            i += 1
            continue

        # ESC alone, or ESC followed by something that is not CSI/SS3
        if i + 1 >= len(data) or data[i + 1] not in "[O":
            keys.append("esc")
            i += 1
            continue

        j = i + 2
        # Parameter/intermediate bytes up to the final byte (0x40-0x7e)
        while j < len(data) and not ("\x40" <= data[j] <= "\x7e"):
            j += 1
        if j >= len(data):
            keys.append("esc")
            break
        final = data[j]
        params = data[i + 2 : j]
        keys.append(_ARROWS[final] if final in _ARROWS and not params else "esc")
        i = j + 1
    return keys


class KeyReader:
    """Reads stdin without echo or line buffering.

    Usage:
        reader = KeyReader(on_key)
        reader.start(loop)
        ...
        reader.stop()
    """

    def __init__(self, on_key: OnKeyCallback, fd: int | None = None):
        self._on_key = on_key
        self._fd = fd if fd is not None else sys.stdin.fileno()
        self._saved_attrs: list | None = None
        self._loop: asyncio.AbstractEventLoop | None = None
        # Multi-byte characters may be split across reads
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    def start(self, loop: asyncio.AbstractEventLoop) -> None:
        """Enter cbreak mode and start watching stdin.

        Raises:
            RuntimeError: stdin is not a terminal
        """
        if not os.isatty(self._fd):
            raise RuntimeError("stdin is not a terminal")

        self._saved_attrs = termios.tcgetattr(self._fd)
        tty.setcbreak(self._fd)
        loop.add_reader(self._fd, self._on_readable)
        self._loop = loop
        logger.debug("[KeyReader] Started")

    def stop(self) -> None:
        """Stop watching stdin and restore the terminal mode."""
        if self._loop is not None:
            self._loop.remove_reader(self._fd)
            self._loop = None
        if self._saved_attrs is not None:
            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved_attrs)
            self._saved_attrs = None
            logger.debug("[KeyReader] Stopped")

    def _on_readable(self) -> None:
        try:
            data = os.read(self._fd, 1024)
        except OSError as e:
            logger.error(f"[KeyReader] Read failed: {e}")
            return
        for key in decode_keys(self._decoder.decode(data)):
            self._on_key(key)
