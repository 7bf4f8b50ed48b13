"""Make the invoking shell ``cd`` to the result by faking keyboard input.

The command is pushed into the terminal's input queue before here exits,
so the shell reads it as if typed once it gets control back. This is
best-effort: there is no way to learn whether the shell ran it.
"""

from __future__ import annotations

import logging
import os
import shlex
import sys
from typing import Optional, Protocol

from .errors import DirectoryChangeWarning

logger = logging.getLogger(__name__)


class KeystrokeEmitter(Protocol):
    def type_text(self, text: str) -> None:
        ...


def cd_command(path: str, platform: Optional[str] = None) -> str:
    """Build the ``cd`` line for ``path``, quoting it unless already quoted."""
    platform = platform or sys.platform
    if len(path) >= 2 and path.startswith('"') and path.endswith('"'):
        quoted = path
    elif platform == "win32":
        quoted = f'"{path}"' if " " in path else path
    else:
        quoted = shlex.quote(path)
    return f"cd {quoted}"


class TtyEmitter:
    """POSIX: push bytes into the controlling terminal with ``TIOCSTI``.

    Newer Linux kernels may refuse this (``dev.tty.legacy_tiocsti = 0``);
    the resulting ``OSError`` reaches the caller.
    """

    def __init__(self, device: str = "/dev/tty"):
        self.device = device

    def type_text(self, text: str) -> None:
        import fcntl
        import termios

        request = getattr(termios, "TIOCSTI", None)
        if request is None:
            raise OSError("TIOCSTI is not supported on this platform")

        fd = os.open(self.device, os.O_RDWR)
        try:
            for byte in text.encode():
                fcntl.ioctl(fd, request, bytes([byte]))
        finally:
            os.close(fd)


class ConsoleInputEmitter:
    """Windows: queue key events on the console input buffer."""

    STD_INPUT_HANDLE = -10
    KEY_EVENT = 0x0001
    VK_RETURN = 0x0D

    def type_text(self, text: str) -> None:
        import ctypes
        from ctypes import wintypes

        class KEY_EVENT_RECORD(ctypes.Structure):
            _fields_ = [
                ("bKeyDown", wintypes.BOOL),
                ("wRepeatCount", wintypes.WORD),
                ("wVirtualKeyCode", wintypes.WORD),
                ("wVirtualScanCode", wintypes.WORD),
                ("uChar", wintypes.WCHAR),
                ("dwControlKeyState", wintypes.DWORD),
            ]

        class INPUT_RECORD(ctypes.Structure):
            _fields_ = [("EventType", wintypes.WORD), ("Event", KEY_EVENT_RECORD)]

        records = []
        for char in text:
            vk = self.VK_RETURN if char in "\r\n" else 0
            char = "\r" if char == "\n" else char
            for down in (True, False):
                records.append(INPUT_RECORD(self.KEY_EVENT, KEY_EVENT_RECORD(down, 1, vk, 0, char, 0)))

        kernel32 = ctypes.WinDLL("kernel32", use_last_error=True)
        handle = kernel32.GetStdHandle(self.STD_INPUT_HANDLE)
        buffer = (INPUT_RECORD * len(records))(*records)
        written = wintypes.DWORD(0)
        if not kernel32.WriteConsoleInputW(handle, buffer, len(records), ctypes.byref(written)):
            raise ctypes.WinError(ctypes.get_last_error())


def default_emitter() -> KeystrokeEmitter:
    return ConsoleInputEmitter() if sys.platform == "win32" else TtyEmitter()


def emit_cd(path: str, emitter: Optional[KeystrokeEmitter] = None) -> Optional[DirectoryChangeWarning]:
    """Type ``cd <path>`` plus Enter into the terminal.

    Returns a warning instead of raising when injection fails.
    """
    command = cd_command(path)
    logger.debug("Emitting keystrokes: %r", command)
    try:
        (emitter or default_emitter()).type_text(command + "\n")
    except OSError as exc:
        return DirectoryChangeWarning(f"Could not change directory: {exc}")
    return None
