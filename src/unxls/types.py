from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import TYPE_CHECKING, Annotated, NewType

from annotated_types import Predicate

from .errors import EXIT_SUCCESS, LsError

if TYPE_CHECKING:
    from .globbing import GlobMatcher


def _is_glob(pattern) -> bool:
    if not isinstance(pattern, str):
        return False
    return any(c in pattern for c in "*?[]\\")


TGlob = Annotated[NewType("TGlob", str), Predicate(_is_glob)]
"""A shell wildcard pattern: `*`, `?`, `[...]`, `[!...]`. Not a regex."""


class EntryKind(Enum):
    FILE = auto()
    DIRECTORY = auto()
    SYMLINK_FILE = auto()
    SYMLINK_DIRECTORY = auto()

    @property
    def is_directory_like(self) -> bool:
        return self in (EntryKind.DIRECTORY, EntryKind.SYMLINK_DIRECTORY)

    @property
    def is_symlink(self) -> bool:
        return self in (EntryKind.SYMLINK_FILE, EntryKind.SYMLINK_DIRECTORY)


class ColorMode(Enum):
    NEVER = "never"
    AUTO = "auto"
    ALWAYS = "always"


class SortKey(Enum):
    NAME = "name"
    NONE = "none"


@dataclass(frozen=True, slots=True)
class ListOptions:
    show_all: bool = False
    almost_all: bool = False
    ignore_backups: bool = False
    directory_only: bool = False
    dereference_command_line: bool = False
    dereference_command_line_symlink_to_dir: bool = False
    dereference_always: bool = False
    recursive: bool = False
    group_directories_first: bool = False
    ignore_patterns: tuple[GlobMatcher, ...] = ()
    hide_pattern: GlobMatcher | None = None
    color: ColorMode = ColorMode.NEVER
    sort: SortKey = SortKey.NAME


@dataclass(frozen=True, slots=True)
class PathArgument:
    """One operand exactly as typed, plus where it points on disk."""

    given: str
    path: Path

    @classmethod
    def from_operand(cls, operand: str, cwd: Path | None = None) -> PathArgument:
        base = Path.cwd() if cwd is None else Path(cwd)
        # No resolve(): symlinks in the operand must survive for classification.
        return cls(given=operand, path=base / operand)


@dataclass(frozen=True, slots=True)
class ListEntry:
    name: str
    path: Path
    kind: EntryKind
    children: tuple[ListEntry, ...] | None = None

    @property
    def is_expanded(self) -> bool:
        return self.children is not None


@dataclass(frozen=True, slots=True)
class ListResult:
    entries: tuple[ListEntry, ...] = ()
    errors: tuple[LsError, ...] = ()

    @property
    def exit_status(self) -> int:
        return max((e.exit_status for e in self.errors), default=EXIT_SUCCESS)

    def __add__(self, other: ListResult) -> ListResult:
        return ListResult(self.entries + other.entries, self.errors + other.errors)
