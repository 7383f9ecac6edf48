from __future__ import annotations

from pathlib import Path

from unxls.types import ListEntry


def write_text_file(path: Path, content: str = "") -> None:
    """Create parents and write UTF-8 text to a file path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def touch_file(path: Path) -> None:
    """Create parents as needed and touch a file path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.touch()


def child_names(entry: ListEntry) -> list[str]:
    """Names of an expanded entry's children, in listed order."""
    assert entry.children is not None, f"{entry.name} was not expanded"
    return [c.name for c in entry.children]


def find_child(entry: ListEntry, name: str) -> ListEntry:
    for child in entry.children or ():
        if child.name == name:
            return child
    raise AssertionError(f"{name!r} not among children of {entry.name!r}")
