from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Iterable, Protocol


class FileSystem(Protocol):
    def lstat(self, path: Path) -> os.stat_result: ...
    def stat(self, path: Path) -> os.stat_result: ...
    def list_names(self, dir_path: Path) -> Iterable[str]: ...


class Writer(Protocol):
    def write(self, text: str) -> None: ...
    def isatty(self) -> bool: ...


class Cancellation(Protocol):
    def is_set(self) -> bool: ...


class StdoutWriter(Writer):
    def write(self, text: str) -> None:
        sys.stdout.write(text)

    def isatty(self) -> bool:
        return sys.stdout.isatty()


class StringWriter(Writer):
    """
    Collects written text into an internal buffer for tests and callers.

    Provides a lightweight Writer implementation that accumulates text and
    exposes it via the `text()` accessor. `tty` controls what `isatty()` reports,
    which is what `--color=auto` looks at.
    """

    def __init__(self, *, tty: bool = False) -> None:
        self._parts: list[str] = []
        self._tty = tty

    def write(self, text: str) -> None:  # Writer protocol
        self._parts.append(text)

    def isatty(self) -> bool:
        return self._tty

    def text(self) -> str:
        return "".join(self._parts)

    def lines(self) -> list[str]:
        return self.text().splitlines()
