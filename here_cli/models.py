"""Records passed between the parsing, resolving and output stages."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import List, Optional, Tuple

from .errors import HereWarning

# Flags that may not accompany --completions / --markdown
REGULAR_FLAGS = (
    "folder",
    "from_where",
    "change_directory",
    "escape_backslash",
    "wrap_quote",
    "resolve_symlink",
    "no_copy",
    "no_color",
    "posix",
    "no_posix",
    "select_first",
)


@dataclass(frozen=True)
class Configuration:
    """Immutable view of one invocation's command line."""

    target: Optional[str] = None
    folder: bool = False
    from_where: bool = False
    change_directory: bool = False
    escape_backslash: bool = False
    wrap_quote: bool = False
    resolve_symlink: bool = False
    no_copy: bool = False
    no_color: bool = False
    posix: bool = False
    no_posix: bool = False
    select_first: bool = False
    completions: Optional[str] = None
    markdown: bool = False

    @property
    def special_mode(self) -> bool:
        return self.completions is not None or self.markdown

    def enabled_flags(self) -> List[str]:
        """Names of the regular flags set on this configuration."""
        return [f.name for f in fields(self) if f.name in REGULAR_FLAGS and getattr(self, f.name)]


@dataclass(frozen=True)
class SearchResult:
    program: str
    candidates: Tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.candidates

    @property
    def is_ambiguous(self) -> bool:
        return len(self.candidates) > 1

    @property
    def first(self) -> str:
        return self.candidates[0]


@dataclass
class RunResult:
    text: str
    warnings: List[HereWarning] = field(default_factory=list)
