"""Terminal and clipboard output."""

from __future__ import annotations

import logging
import subprocess
import sys
from typing import List, Optional, Tuple

import typer

from . import config
from .errors import ClipboardWarning, HereWarning

logger = logging.getLogger(__name__)


def clipboard_backends(platform: Optional[str] = None) -> List[Tuple[List[str], str]]:
    """Clipboard commands to try, with the encoding each expects on stdin.

    - Windows: clip.exe
    - macOS: pbcopy
    - Linux: wl-copy, xclip or xsel
    """
    platform = platform or sys.platform
    if platform == "win32":
        return [(["clip.exe"], "utf-16le")]
    if platform == "darwin":
        return [(["pbcopy"], "utf-8")]
    return [
        (["wl-copy"], "utf-8"),
        (["xclip", "-selection", "clipboard"], "utf-8"),
        (["xsel", "--clipboard", "--input"], "utf-8"),
    ]


def copy_to_clipboard(text: str) -> None:
    """Place ``text`` on the system clipboard.

    Raises:
        ClipboardWarning: if no backend accepted the text.
    """
    failures = []
    for cmd, encoding in clipboard_backends():
        try:
            proc = subprocess.run(cmd, input=text.encode(encoding), capture_output=True)
        except OSError as exc:
            failures.append(f"{cmd[0]}: {exc.strerror or exc}")
            continue
        if proc.returncode == 0:
            logger.debug("Copied to clipboard with %s", cmd[0])
            return
        failures.append(f"{cmd[0]}: exit {proc.returncode}")

    logger.debug("Clipboard backends failed: %s", "; ".join(failures))
    raise ClipboardWarning("Could not copy to clipboard (no clipboard mechanism available)")


def render(text: str, no_color: bool = False) -> str:
    """Style the result path, unless color is turned off."""
    if no_color or config.color_disabled():
        return text
    return typer.style(text, fg=config.SALMON)


def echo_result(text: str, no_color: bool = False) -> None:
    # color=True keeps the ANSI codes even when stdout is piped
    typer.echo(render(text, no_color), color=not (no_color or config.color_disabled()))


def print_warning(warning: HereWarning, no_color: bool = False) -> None:
    message = f"warning: {warning}"
    if not (no_color or config.color_disabled()):
        message = typer.style("warning:", fg=config.ORANGE, bold=True) + f" {warning}"
    typer.echo(message, err=True)


def print_error(message: str, no_color: bool = False) -> None:
    text = f"error: {message}"
    if not (no_color or config.color_disabled()):
        text = typer.style("error:", fg=config.CRIMSON, bold=True) + f" {message}"
    typer.echo(text, err=True)
