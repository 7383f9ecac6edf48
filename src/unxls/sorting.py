from __future__ import annotations

import os
from typing import Iterable

from .types import ListEntry, ListOptions, SortKey


def name_key(entry: ListEntry) -> bytes:
    # Byte-wise, as in the C locale.
    return os.fsencode(entry.name)


def order(entries: Iterable[ListEntry], options: ListOptions) -> tuple[ListEntry, ...]:
    """
    Order sibling entries.

    With --sort=none the enumeration order is kept and directory grouping is
    disabled. "." and ".." are sorted like any other name.
    """
    entries = list(entries)
    if options.sort is SortKey.NONE:
        return tuple(entries)
    if not options.group_directories_first:
        return tuple(sorted(entries, key=name_key))
    dirs = [e for e in entries if e.kind.is_directory_like]
    rest = [e for e in entries if not e.kind.is_directory_like]
    return tuple(sorted(dirs, key=name_key) + sorted(rest, key=name_key))
