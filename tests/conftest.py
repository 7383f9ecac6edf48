from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterator

import pytest

from unxls.filters import compile_hide_pattern, compile_ignore_patterns
from unxls.types import ListOptions


@pytest.fixture(autouse=True)
def _quiet_unxls_logger() -> Iterator[None]:
    """Keep handlers installed by `main()` from leaking between tests."""
    logger = logging.getLogger("unxls")
    saved = list(logger.handlers)
    yield
    logger.handlers[:] = saved


@pytest.fixture
def make_options() -> Callable[..., ListOptions]:
    """Build ListOptions from raw pattern strings, the way the CLI does."""

    def _make(*, ignore: list[str] | None = None, hide: str | None = None, **flags) -> ListOptions:
        return ListOptions(
            ignore_patterns=compile_ignore_patterns(ignore or []),
            hide_pattern=compile_hide_pattern(hide),
            **flags,
        )

    return _make


@pytest.fixture
def listing_dir(tmp_path: Path) -> Path:
    """A single directory with visible files, dotfiles, a backup and a subdirectory.

    Layout:
        listing/
            .hidden
            .config/
            README
            a.txt
            b.txt
            notes.txt~
            sub/
                inner.txt
    """
    base = tmp_path / "listing"
    (base / "sub").mkdir(parents=True)
    (base / ".config").mkdir()
    for name in (".hidden", "README", "a.txt", "b.txt", "notes.txt~"):
        (base / name).write_text(name + "\n", encoding="utf-8")
    (base / "sub" / "inner.txt").write_text("inner\n", encoding="utf-8")
    return base


@pytest.fixture
def recursive_tree(tmp_path: Path) -> Path:
    """root/{x, sub/{y}}."""
    root = tmp_path / "root"
    (root / "sub").mkdir(parents=True)
    (root / "x").write_text("x\n", encoding="utf-8")
    (root / "sub" / "y").write_text("y\n", encoding="utf-8")
    return root
