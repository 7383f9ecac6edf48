from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

from ..core import FileSystem


class LocalFileSystem(FileSystem):
    def lstat(self, path: Path) -> os.stat_result:
        return os.lstat(path)

    def stat(self, path: Path) -> os.stat_result:
        return os.stat(path)

    def list_names(self, dir_path: Path) -> Iterable[str]:
        # Materialize inside the context so the directory handle is closed
        # before callers start stat-ing entries.
        with os.scandir(dir_path) as it:
            return [e.name for e in it]
