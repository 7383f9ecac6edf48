from __future__ import annotations

from typing import Iterable

from typeguard import typechecked

from .defaults import BACKUP_SUFFIX, DOT_ENTRIES
from .globbing import GlobMatcher, any_match, compile_glob
from .types import ListOptions, TGlob


@typechecked
def compile_ignore_patterns(patterns: Iterable[TGlob]) -> tuple[GlobMatcher, ...]:
    """Compile every --ignore pattern up front, in the order given."""
    return tuple(compile_glob(p) for p in patterns)


@typechecked
def compile_hide_pattern(pattern: TGlob | None) -> GlobMatcher | None:
    if pattern is None:
        return None
    return compile_glob(pattern)


def is_hidden(name: str) -> bool:
    return name.startswith(".")


def is_backup(name: str) -> bool:
    return name.endswith(BACKUP_SUFFIX)


@typechecked
def should_include(name: str, options: ListOptions) -> bool:
    """
    Decide whether a name found inside a directory is listed.

    Rules, each exclusion final:
    1. -a keeps every dotfile, "." and ".." included.
    2. -A keeps dotfiles except "." and "..".
    3. Otherwise any name starting with "." is dropped.
    4. -B drops names ending with "~".
    5. Any --ignore pattern match drops the name, whatever -a/-A say.
    6. A --hide pattern match drops the name, unless -a or -A is set.
    """
    if options.show_all:
        pass
    elif options.almost_all:
        if name in DOT_ENTRIES:
            return False
    elif is_hidden(name):
        return False

    if options.ignore_backups and is_backup(name):
        return False

    if any_match(options.ignore_patterns, name):
        return False

    if (
        options.hide_pattern is not None
        and not (options.show_all or options.almost_all)
        and options.hide_pattern.matches(name)
    ):
        return False
    return True
