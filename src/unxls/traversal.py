from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable

from .adapters.filesystem import LocalFileSystem
from .core import Cancellation, FileSystem
from .defaults import DEFAULT_JOBS, DEFAULT_RUN_PATH, DOT_ENTRIES
from .errors import AccessError, LoopError, LsError, PartialError
from .filters import should_include
from .links import LinkResolver
from .sorting import order
from .types import EntryKind, ListEntry, ListOptions, ListResult, PathArgument

logger = logging.getLogger(__name__)

Identity = tuple[int, int]


class _Walk:
    """Mutable bookkeeping for a single root; never shared between roots."""

    def __init__(self) -> None:
        self.errors: list[LsError] = []
        self.cancelled = False

    def report(self, error: LsError) -> None:
        logger.warning("%s", error)
        self.errors.append(error)


class Traverser:
    def __init__(
        self,
        options: ListOptions,
        *,
        fs: FileSystem | None = None,
        cancel: Cancellation | None = None,
    ) -> None:
        self.options = options
        self.fs = fs or LocalFileSystem()
        self.resolver = LinkResolver(self.fs)
        self.cancel = cancel

    def list(self, root: PathArgument | str) -> ListResult:
        """
        Build the entry tree for one operand.

        An operand that cannot be stat-ed or, when it is a directory to be
        listed, cannot be read, yields no entry and a serious AccessError.
        Problems below the operand are collected and never abort the walk.
        """
        if isinstance(root, str):
            root = PathArgument.from_operand(root)
        walk = _Walk()
        try:
            kind = self.resolver.classify(root.path, True, self.options)
        except AccessError as e:
            walk.report(e)
            return ListResult((), tuple(walk.errors))

        if not self._expands(root.given, kind, top_level=True):
            return ListResult((ListEntry(root.given, root.path, kind),), tuple(walk.errors))

        if self._cancelled(root.path, walk):
            return ListResult((ListEntry(root.given, root.path, kind),), tuple(walk.errors))
        try:
            identity = self.resolver.identity(root.path)
        except OSError as e:
            walk.report(AccessError.from_os_error(root.path, e, command_line=True))
            return ListResult((), tuple(walk.errors))
        children = self._expand(root.path, identity, frozenset(), walk, command_line=True)
        if children is None:
            return ListResult((), tuple(walk.errors))
        entry = ListEntry(root.given, root.path, kind, children)
        return ListResult((entry,), tuple(walk.errors))

    def _expands(self, name: str, kind: EntryKind, *, top_level: bool) -> bool:
        if self.options.directory_only or kind is not EntryKind.DIRECTORY:
            return False
        if top_level:
            return True
        # "." and ".." would lead straight back up the tree.
        return self.options.recursive and name not in DOT_ENTRIES

    def _cancelled(self, path: Path, walk: _Walk) -> bool:
        if walk.cancelled:
            return True
        if self.cancel is not None and self.cancel.is_set():
            walk.cancelled = True
            walk.report(PartialError(path))
            return True
        return False

    def _expand(
        self,
        dir_path: Path,
        identity: Identity,
        ancestry: frozenset[Identity],
        walk: _Walk,
        *,
        command_line: bool,
    ) -> tuple[ListEntry, ...] | None:
        """Return the ordered, filtered children of `dir_path`, or None if it can't be read."""
        try:
            names = list(self.fs.list_names(dir_path))
        except OSError as e:
            walk.report(AccessError.from_os_error(dir_path, e, command_line=command_line))
            return None
        logger.debug("expanding %s (%d names)", dir_path, len(names))
        ancestry = ancestry | {identity}

        children: list[ListEntry] = []
        for name in (*DOT_ENTRIES, *names):
            if not should_include(name, self.options):
                continue
            path = dir_path / name
            if name in DOT_ENTRIES:
                # pathlib folds "dir/." into "dir", which may be a symlink operand.
                children.append(ListEntry(name, path, EntryKind.DIRECTORY))
                continue
            try:
                kind = self.resolver.classify(path, False, self.options)
            except AccessError as e:
                # Vanished or unreadable between enumeration and stat.
                walk.report(e)
                continue
            children.append(self._child(name, path, kind, ancestry, walk))
        return order(children, self.options)

    def _child(
        self,
        name: str,
        path: Path,
        kind: EntryKind,
        ancestry: frozenset[Identity],
        walk: _Walk,
    ) -> ListEntry:
        if not self._expands(name, kind, top_level=False):
            return ListEntry(name, path, kind)
        if self._cancelled(path, walk):
            return ListEntry(name, path, kind)
        try:
            identity = self.resolver.identity(path)
        except OSError as e:
            walk.report(AccessError.from_os_error(path, e, command_line=False))
            return ListEntry(name, path, kind)
        if identity in ancestry:
            walk.report(LoopError(path))
            return ListEntry(name, path, kind)
        children = self._expand(path, identity, ancestry, walk, command_line=False)
        return ListEntry(name, path, kind, () if children is None else children)


def list_paths(
    paths: Iterable[str | PathArgument],
    options: ListOptions,
    *,
    fs: FileSystem | None = None,
    cancel: Cancellation | None = None,
    jobs: int = DEFAULT_JOBS,
) -> ListResult:
    """
    List every operand independently and concatenate the results in operand order.

    With `jobs` > 1 operands are walked on a thread pool; the result is the same
    as a sequential run.
    """
    roots = list(paths) or [DEFAULT_RUN_PATH]
    traverser = Traverser(options, fs=fs, cancel=cancel)
    if jobs > 1 and len(roots) > 1:
        with ThreadPoolExecutor(max_workers=jobs) as pool:
            results = list(pool.map(traverser.list, roots))
    else:
        results = [traverser.list(root) for root in roots]
    return sum(results, ListResult())
