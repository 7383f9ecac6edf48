from __future__ import annotations

from pathlib import Path

from unxls.core import StringWriter
from unxls.formatters import ListingPrinter, PlainFormatter
from unxls.types import EntryKind, ListEntry, ListResult


def _render(result: ListResult, options, operand_count: int) -> list[str]:
    buf = StringWriter()
    ListingPrinter(PlainFormatter(), options).render(result, buf, operand_count=operand_count)
    return buf.lines()


def test_cancelled_directory_operand_gets_an_empty_block(make_options):
    result = ListResult(
        (
            ListEntry("notes.txt", Path("notes.txt"), EntryKind.FILE),
            ListEntry(
                "done",
                Path("done"),
                EntryKind.DIRECTORY,
                (ListEntry("a", Path("done/a"), EntryKind.FILE),),
            ),
            ListEntry("cut", Path("cut"), EntryKind.DIRECTORY),
        )
    )
    lines = _render(result, make_options(), operand_count=3)
    assert lines == ["notes.txt", "", "done:", "a", "", "cut:"]


def test_directory_flag_prints_directories_as_names(make_options):
    result = ListResult(
        (
            ListEntry("b", Path("b"), EntryKind.DIRECTORY),
            ListEntry("a.txt", Path("a.txt"), EntryKind.FILE),
        )
    )
    lines = _render(result, make_options(directory_only=True), operand_count=2)
    assert lines == ["a.txt", "b"]
