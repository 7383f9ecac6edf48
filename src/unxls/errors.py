from __future__ import annotations

from pathlib import Path

EXIT_SUCCESS = 0
EXIT_MINOR = 1
EXIT_SERIOUS = 2


class LsError(Exception):
    exit_status: int = EXIT_SERIOUS


class PatternError(LsError, ValueError):
    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"invalid pattern {pattern!r}: {reason}")


class OptionError(LsError):
    pass


class AccessError(LsError):
    """
    A path could not be stat-ed or enumerated.

    Serious when the path was given on the command line, minor when it was
    discovered while recursing.
    """

    def __init__(self, path: Path | str, reason: str, *, command_line: bool) -> None:
        self.path = Path(path)
        self.reason = reason
        self.command_line = command_line
        verb = "access" if command_line else "open"
        super().__init__(f"cannot {verb} '{path}': {reason}")

    @property
    def exit_status(self) -> int:  # type: ignore[override]
        return EXIT_SERIOUS if self.command_line else EXIT_MINOR

    @classmethod
    def from_os_error(cls, path: Path | str, err: OSError, *, command_line: bool) -> AccessError:
        return cls(path, err.strerror or str(err), command_line=command_line)


class LoopError(LsError):
    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"{path}: not listing already-listed directory")


class PartialError(LsError):
    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"listing cancelled before expanding '{path}'")
