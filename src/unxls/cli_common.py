from __future__ import annotations

import argparse
import sys
import textwrap
from dataclasses import dataclass, field

from unxls.defaults import (
    COLOR_CHOICES,
    DEFAULT_ALMOST_ALL,
    DEFAULT_COLOR,
    DEFAULT_COLOR_WHEN_BARE,
    DEFAULT_DIRECTORY_ONLY,
    DEFAULT_GROUP_DIRECTORIES_FIRST,
    DEFAULT_HIDE_FILTER,
    DEFAULT_IGNORE_BACKUPS,
    DEFAULT_IGNORE_FILTER,
    DEFAULT_RECURSIVE,
    DEFAULT_RUN_PATH,
    DEFAULT_SHOW_ALL,
    DEFAULT_SORT,
    SORT_CHOICES,
)
from unxls.errors import OptionError
from unxls.filters import compile_hide_pattern, compile_ignore_patterns
from unxls.types import ColorMode, ListOptions, SortKey


@dataclass(slots=True)
class Context:
    paths: list[str] = field(default_factory=lambda: [DEFAULT_RUN_PATH])
    show_all: bool = DEFAULT_SHOW_ALL
    almost_all: bool = DEFAULT_ALMOST_ALL
    ignore_backups: bool = DEFAULT_IGNORE_BACKUPS
    directory_only: bool = DEFAULT_DIRECTORY_ONLY
    dereference_command_line: bool = False
    dereference_command_line_symlink_to_dir: bool = False
    dereference_always: bool = False
    recursive: bool = DEFAULT_RECURSIVE
    group_directories_first: bool = DEFAULT_GROUP_DIRECTORIES_FIRST
    ignore: list[str] = field(default_factory=lambda: list(DEFAULT_IGNORE_FILTER))
    hide: str | None = DEFAULT_HIDE_FILTER
    color: ColorMode = DEFAULT_COLOR
    sort: SortKey = DEFAULT_SORT


class _RaisingArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):  # type: ignore[override]
        raise OptionError(message)


def _expand_bare_color(argv: list[str]) -> list[str]:
    # `--color` with no `=WHEN` must not swallow the next operand.
    when = DEFAULT_COLOR_WHEN_BARE.value
    return [f"--color={when}" if arg == "--color" else arg for arg in argv]


def build_parser() -> argparse.ArgumentParser:
    epilog = textwrap.dedent(
        """
        PATTERNS
        --ignore and --hide take shell patterns, not regular expressions. As in the
        shell, a leading '*' or '?' does not match an initial '.' in a file name.
        --hide has no effect together with -a or -A; --ignore always applies.

        EXIT STATUS
        0 if OK, 1 if a file found while recursing could not be accessed,
        2 for bad options, inaccessible operands, or directory loops.
        """
    )

    parser = _RaisingArgumentParser(
        prog="unxls",
        description="List information about the FILEs (the current directory by default).",
        add_help=True,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=epilog,
    )
    parser.add_argument(
        "paths",
        type=str,
        nargs="*",
        help="Files or directories to list. Defaults to the current directory.",
    )
    parser.add_argument(
        "-a",
        "--all",
        action="store_true",
        dest="show_all",
        help="Do not ignore entries starting with '.'.",
        default=DEFAULT_SHOW_ALL,
    )
    parser.add_argument(
        "-A",
        "--almost-all",
        action="store_true",
        help="Do not list implied '.' and '..'.",
        default=DEFAULT_ALMOST_ALL,
    )
    parser.add_argument(
        "-B",
        "--ignore-backups",
        action="store_true",
        help="Do not list entries ending with '~'.",
        default=DEFAULT_IGNORE_BACKUPS,
    )
    parser.add_argument(
        "-d",
        "--directory",
        action="store_true",
        dest="directory_only",
        help="List directories themselves, not their contents.",
        default=DEFAULT_DIRECTORY_ONLY,
    )
    parser.add_argument(
        "-H",
        "--dereference-command-line",
        action="store_true",
        help="Follow symbolic links listed on the command line.",
    )
    parser.add_argument(
        "--dereference-command-line-symlink-to-dir",
        action="store_true",
        help="Follow each command line symbolic link that points to a directory.",
    )
    parser.add_argument(
        "--group-directories-first",
        action="store_true",
        help="Group directories before files. Disabled by --sort=none.",
        default=DEFAULT_GROUP_DIRECTORIES_FIRST,
    )
    parser.add_argument(
        "--hide",
        type=str,
        metavar="PATTERN",
        help="Do not list entries matching shell PATTERN (overridden by -a or -A).",
        default=DEFAULT_HIDE_FILTER,
    )
    parser.add_argument(
        "-I",
        "--ignore",
        type=str,
        metavar="PATTERN",
        action="append",
        help="Do not list entries matching shell PATTERN (repeatable).",
        default=None,
    )
    parser.add_argument(
        "-L",
        "--dereference",
        action="store_true",
        dest="dereference_always",
        help="Follow symbolic links everywhere when deciding what is a directory.",
    )
    parser.add_argument(
        "-R",
        "--recursive",
        action="store_true",
        help="List subdirectories recursively.",
        default=DEFAULT_RECURSIVE,
    )
    parser.add_argument(
        "--color",
        type=str,
        metavar="WHEN",
        choices=COLOR_CHOICES,
        default=DEFAULT_COLOR.value,
        help="Color the output; WHEN is 'never', 'auto' or 'always' (the default when bare).",
    )
    parser.add_argument(
        "--sort",
        type=str,
        metavar="WORD",
        choices=SORT_CHOICES,
        default=DEFAULT_SORT.value,
        help="Sort by WORD: 'name' or 'none'.",
    )
    parser.add_argument(
        "-U",
        action="store_const",
        const=SortKey.NONE.value,
        dest="sort",
        help="Do not sort; list entries in directory order.",
    )
    parser.add_argument(
        "-1",
        action="store_true",
        dest="one_per_line",
        help="List one file per line (always the case).",
    )
    return parser


def parse_common_args(argv: list[str] | None = None) -> Context:
    if argv is None:
        argv = sys.argv[1:]
    parser = build_parser()
    # ls lets options and operands be intermixed arbitrarily.
    args = parser.parse_intermixed_args(_expand_bare_color(list(argv)))
    return Context(
        paths=list(args.paths or []) or [DEFAULT_RUN_PATH],
        show_all=bool(args.show_all),
        almost_all=bool(args.almost_all),
        ignore_backups=bool(args.ignore_backups),
        directory_only=bool(args.directory_only),
        dereference_command_line=bool(args.dereference_command_line),
        dereference_command_line_symlink_to_dir=bool(args.dereference_command_line_symlink_to_dir),
        dereference_always=bool(args.dereference_always),
        recursive=bool(args.recursive),
        group_directories_first=bool(args.group_directories_first),
        ignore=list(args.ignore or []),
        hide=args.hide,
        color=ColorMode(args.color),
        sort=SortKey(args.sort),
    )


def derive_list_options(ctx: Context) -> ListOptions:
    """Freeze a parsed Context into ListOptions; bad patterns raise PatternError here."""
    return ListOptions(
        show_all=ctx.show_all,
        almost_all=ctx.almost_all,
        ignore_backups=ctx.ignore_backups,
        directory_only=ctx.directory_only,
        dereference_command_line=ctx.dereference_command_line,
        dereference_command_line_symlink_to_dir=ctx.dereference_command_line_symlink_to_dir,
        dereference_always=ctx.dereference_always,
        recursive=ctx.recursive,
        group_directories_first=ctx.group_directories_first,
        ignore_patterns=compile_ignore_patterns(ctx.ignore),
        hide_pattern=compile_hide_pattern(ctx.hide),
        color=ctx.color,
        sort=ctx.sort,
    )


def parse(argv: list[str] | None = None) -> tuple[ListOptions, list[str]]:
    ctx = parse_common_args(argv)
    return derive_list_options(ctx), ctx.paths
