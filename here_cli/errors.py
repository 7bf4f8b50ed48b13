"""Exception and warning types used across here.

Fatal problems derive from ``HereError`` and abort the run with a
non-zero exit code. Non-fatal problems derive from ``HereWarning``; they
are collected and printed, but never change the exit code.
"""

from __future__ import annotations


class HereError(Exception):
    """Base class for all fatal here errors."""

    exit_code = 1


class UsageError(HereError):
    """Raised when command line flags are malformed or conflict."""

    exit_code = 2


class ResolutionError(HereError):
    """Raised when the base path cannot be resolved."""


class NotFoundError(ResolutionError):
    """Raised when a program search yields no candidates."""

    def __init__(self, program: str):
        super().__init__(f"Could not find '{program}' on PATH")
        self.program = program


class UserCancelled(HereError):
    """Raised when the interactive candidate prompt is aborted."""

    def __init__(self, message: str = "Selection cancelled", interrupted: bool = False):
        super().__init__(message)
        self.interrupted = interrupted
        if interrupted:
            self.exit_code = 130


class HereWarning(UserWarning):
    """Base class for non-fatal problems surfaced to the user."""


class SymlinkWarning(HereWarning):
    """Symlink resolution was requested on a path that is not a symlink."""


class ClipboardWarning(HereWarning):
    """The result could not be placed on the system clipboard."""


class DirectoryChangeWarning(HereWarning):
    """Keystrokes for changing directory could not be injected."""
