from __future__ import annotations

import stat
from pathlib import Path

from .adapters.filesystem import LocalFileSystem
from .core import FileSystem
from .errors import AccessError
from .types import EntryKind, ListOptions


def dereferences_command_line(options: ListOptions) -> bool:
    return (
        options.dereference_command_line
        or options.dereference_command_line_symlink_to_dir
        or options.dereference_always
    )


def _follows_directory_link(is_command_line_argument: bool, options: ListOptions) -> bool:
    if is_command_line_argument:
        # Without any dereference flag, a linked directory operand is still
        # listed, unless -d asks for the operand itself.
        return dereferences_command_line(options) or not options.directory_only
    return options.dereference_always


def _must_reach_target(is_command_line_argument: bool, options: ListOptions) -> bool:
    """-H and -L promise information about the target, so a dangling operand is an error."""
    return is_command_line_argument and (
        options.dereference_command_line or options.dereference_always
    )


class LinkResolver:
    def __init__(self, fs: FileSystem | None = None) -> None:
        self.fs = fs or LocalFileSystem()

    def classify(
        self, path: Path, is_command_line_argument: bool, options: ListOptions
    ) -> EntryKind:
        try:
            st = self.fs.lstat(path)
        except OSError as e:
            raise AccessError.from_os_error(path, e, command_line=is_command_line_argument) from e

        if not stat.S_ISLNK(st.st_mode):
            return EntryKind.DIRECTORY if stat.S_ISDIR(st.st_mode) else EntryKind.FILE

        try:
            target = self.fs.stat(path)
        except OSError as e:
            if _must_reach_target(is_command_line_argument, options):
                raise AccessError.from_os_error(path, e, command_line=True) from e
            return EntryKind.SYMLINK_FILE

        if not stat.S_ISDIR(target.st_mode):
            return EntryKind.SYMLINK_FILE
        if _follows_directory_link(is_command_line_argument, options):
            return EntryKind.DIRECTORY
        return EntryKind.SYMLINK_DIRECTORY

    def identity(self, path: Path) -> tuple[int, int]:
        """(device, inode) of what `path` finally points at."""
        st = self.fs.stat(path)
        return st.st_dev, st.st_ino


def classify(
    path: Path,
    is_command_line_argument: bool,
    options: ListOptions,
    fs: FileSystem | None = None,
) -> EntryKind:
    return LinkResolver(fs).classify(path, is_command_line_argument, options)
