from __future__ import annotations

import logging
import sys

from .cli_common import parse
from .core import StdoutWriter, Writer
from .errors import EXIT_SERIOUS, LsError
from .formatters import ListingPrinter, pick_formatter
from .traversal import list_paths

logger = logging.getLogger("unxls")


def _configure_logging() -> None:
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("unxls: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.WARNING)


def main(*, argv: list[str] | None = None, writer: Writer | None = None) -> int:
    """Run one listing and return the exit status: 0 ok, 1 minor trouble, 2 serious trouble."""
    _configure_logging()
    try:
        options, paths = parse(argv)
    except LsError as e:
        logger.error("%s", e)
        return EXIT_SERIOUS

    result = list_paths(paths, options)
    out_writer = writer or StdoutWriter()
    printer = ListingPrinter(pick_formatter(options.color, out_writer), options)
    printer.render(result, out_writer, operand_count=len(paths))
    return result.exit_status


if __name__ == "__main__":
    sys.exit(main())
