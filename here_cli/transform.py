"""Text transforms applied to a resolved path before it is emitted.

The steps run in a fixed order, whatever order the flags were given in:
folder extraction, symlink resolution, slash normalization, backslash
escaping, then quote wrapping. Escaping therefore sees the final
separators, and the quotes added last are never escaped.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, List, Tuple, Union

from .errors import HereWarning, SymlinkWarning
from .models import Configuration, RunResult

logger = logging.getLogger(__name__)

Step = Callable[[str], str]


def clean_path(path: Union[str, Path]) -> str:
    """Lexically drop `.`, `..` and doubled separators, without touching the disk."""
    # pathlib has no lexical normalizer; resolve() would follow symlinks
    return os.path.normpath(path)


def folder_component(path: str) -> str:
    """Directory paths pass through; anything else becomes its parent."""
    candidate = Path(path)
    if candidate.is_dir():
        return path
    return str(candidate.parent)


def resolve_symlink(path: str) -> str:
    """Return the symlink's target.

    Raises:
        SymlinkWarning: if ``path`` is not a symlink.
    """
    link = Path(path)
    if not link.is_symlink():
        raise SymlinkWarning(f"'{path}' is not a symlink, using it unchanged")
    target = link.readlink()
    if not target.is_absolute():
        return clean_path(link.parent / target)
    return str(target)


def to_posix(path: str) -> str:
    return path.replace("\\", "/")


def to_windows(path: str) -> str:
    return path.replace("/", "\\")


def escape_backslashes(path: str) -> str:
    return path.replace("\\", "\\\\")


def wrap_quotes(path: str) -> str:
    return f'"{path}"'


def build_steps(config: Configuration) -> List[Tuple[str, Step]]:
    """Select the steps enabled by ``config``, in pipeline order."""
    steps: List[Tuple[str, Step]] = []
    if config.folder:
        steps.append(("folder", folder_component))
    if config.resolve_symlink:
        steps.append(("resolve-symlink", resolve_symlink))
    if config.posix:
        steps.append(("posix", to_posix))
    elif config.no_posix:
        steps.append(("no-posix", to_windows))
    if config.escape_backslash:
        steps.append(("escape-backslash", escape_backslashes))
    if config.wrap_quote:
        steps.append(("wrap-quote", wrap_quotes))
    return steps


def transform_path(path: str, config: Configuration) -> RunResult:
    """Run every enabled step over ``path``, collecting non-fatal warnings."""
    text = path
    warnings: List[HereWarning] = []
    for name, step in build_steps(config):
        try:
            text = step(text)
        except HereWarning as warning:
            warnings.append(warning)
            continue
        logger.debug("After %s: %s", name, text)
    return RunResult(text=text, warnings=warnings)
