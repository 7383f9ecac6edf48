from __future__ import annotations

from pathlib import Path

import pytest

from unxls.errors import AccessError
from unxls.links import LinkResolver, classify
from unxls.types import EntryKind


@pytest.fixture
def links(tmp_path: Path) -> Path:
    (tmp_path / "dir").mkdir()
    (tmp_path / "file").write_text("f\n", encoding="utf-8")
    (tmp_path / "to_dir").symlink_to(tmp_path / "dir")
    (tmp_path / "to_file").symlink_to(tmp_path / "file")
    (tmp_path / "dangling").symlink_to(tmp_path / "nowhere")
    return tmp_path


def test_plain_file_and_directory(links, make_options):
    opts = make_options()
    assert classify(links / "dir", True, opts) is EntryKind.DIRECTORY
    assert classify(links / "file", True, opts) is EntryKind.FILE
    assert classify(links / "dir", False, opts) is EntryKind.DIRECTORY
    assert classify(links / "file", False, opts) is EntryKind.FILE


def test_operand_link_to_dir_is_followed_by_default(links, make_options):
    assert classify(links / "to_dir", True, make_options()) is EntryKind.DIRECTORY


def test_operand_link_to_dir_with_directory_flag_is_not_followed(links, make_options):
    opts = make_options(directory_only=True)
    assert classify(links / "to_dir", True, opts) is EntryKind.SYMLINK_DIRECTORY


@pytest.mark.parametrize(
    "flag",
    ["dereference_command_line", "dereference_command_line_symlink_to_dir", "dereference_always"],
)
def test_dereference_flags_follow_operand_even_with_directory_flag(links, make_options, flag):
    opts = make_options(directory_only=True, **{flag: True})
    assert classify(links / "to_dir", True, opts) is EntryKind.DIRECTORY


def test_discovered_link_to_dir_needs_dereference_always(links, make_options):
    assert classify(links / "to_dir", False, make_options()) is EntryKind.SYMLINK_DIRECTORY
    assert (
        classify(links / "to_dir", False, make_options(dereference_command_line=True))
        is EntryKind.SYMLINK_DIRECTORY
    )
    assert (
        classify(links / "to_dir", False, make_options(dereference_always=True))
        is EntryKind.DIRECTORY
    )


def test_link_to_file_is_symlink_file(links, make_options):
    for opts in (make_options(), make_options(dereference_always=True)):
        assert classify(links / "to_file", True, opts) is EntryKind.SYMLINK_FILE
        assert classify(links / "to_file", False, opts) is EntryKind.SYMLINK_FILE


def test_dangling_link_is_symlink_file_without_dereference(links, make_options):
    assert classify(links / "dangling", True, make_options()) is EntryKind.SYMLINK_FILE
    assert (
        classify(links / "dangling", False, make_options(dereference_always=True))
        is EntryKind.SYMLINK_FILE
    )
    # Following only links to directories does not promise a reachable target.
    assert (
        classify(links / "dangling", True, make_options(dereference_command_line_symlink_to_dir=True))
        is EntryKind.SYMLINK_FILE
    )


@pytest.mark.parametrize("flag", ["dereference_command_line", "dereference_always"])
def test_dangling_operand_under_dereference_is_access_error(links, make_options, flag):
    with pytest.raises(AccessError) as info:
        classify(links / "dangling", True, make_options(**{flag: True}))
    assert info.value.command_line is True
    assert info.value.exit_status == 2


def test_missing_path_is_access_error(links, make_options):
    with pytest.raises(AccessError) as info:
        classify(links / "missing", False, make_options())
    assert info.value.command_line is False
    assert info.value.exit_status == 1


def test_identity_follows_links(links):
    resolver = LinkResolver()
    assert resolver.identity(links / "to_dir") == resolver.identity(links / "dir")
