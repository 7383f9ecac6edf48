from __future__ import annotations

from typing import Iterable

from .core import Writer
from .defaults import COLORS
from .sorting import order
from .types import ColorMode, EntryKind, ListEntry, ListOptions, ListResult


class PlainFormatter:
    def name(self, entry: ListEntry) -> str:
        return entry.name

    def header(self, label: str) -> str:
        return f"{label}:\n"


class ColorFormatter(PlainFormatter):
    def name(self, entry: ListEntry) -> str:
        if entry.kind.is_symlink:
            color = COLORS["SYMLINK"]
        elif entry.kind is EntryKind.DIRECTORY:
            color = COLORS["DIRECTORY"]
        else:
            return entry.name
        return f"{color}{entry.name}{COLORS['RESET']}"


def pick_formatter(mode: ColorMode, writer: Writer) -> PlainFormatter:
    if mode is ColorMode.ALWAYS or (mode is ColorMode.AUTO and writer.isatty()):
        return ColorFormatter()
    return PlainFormatter()


class ListingPrinter:
    """
    Render finished entry trees one name per line, the way `ls -1` lays them out.

    Operands that are not directories to list are printed first, then each
    directory operand as its own block. A directory operand left unexpanded
    because the walk was cancelled still gets its block, empty. Blocks get a
    `label:` header when more than one operand was given or when listing
    recursively.
    """

    def __init__(self, formatter: PlainFormatter, options: ListOptions) -> None:
        self.formatter = formatter
        self.options = options

    def render(self, result: ListResult, writer: Writer, *, operand_count: int) -> None:
        leaves = [e for e in result.entries if not self._is_block(e)]
        expanded = [e for e in result.entries if self._is_block(e)]
        with_headers = operand_count > 1 or self.options.recursive

        first = True
        if leaves:
            self._names(order(leaves, self.options), writer)
            first = False
        for entry in expanded:
            for label, block in self._blocks(entry, entry.name):
                if not first:
                    writer.write("\n")
                first = False
                if with_headers:
                    writer.write(self.formatter.header(label))
                self._names(block.children or (), writer)

    def _is_block(self, entry: ListEntry) -> bool:
        if entry.is_expanded:
            return True
        return entry.kind is EntryKind.DIRECTORY and not self.options.directory_only

    def _names(self, entries: Iterable[ListEntry], writer: Writer) -> None:
        for entry in entries:
            writer.write(self.formatter.name(entry) + "\n")

    def _blocks(self, entry: ListEntry, label: str) -> Iterable[tuple[str, ListEntry]]:
        yield label, entry
        for child in entry.children or ():
            if child.is_expanded:
                yield from self._blocks(child, _join(label, child.name))


def _join(label: str, name: str) -> str:
    return f"{label}{name}" if label.endswith("/") else f"{label}/{name}"
