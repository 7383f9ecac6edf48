from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable

from typeguard import typechecked

from .errors import PatternError

_NEGATORS = "!^"
_LEADING_WILDCARDS = "*?"


@dataclass(frozen=True, slots=True)
class GlobMatcher:
    pattern: str
    _regex: re.Pattern[str] = field(repr=False, compare=False)

    def matches(self, name: str) -> bool:
        # As in the shell, a leading "." must be matched explicitly.
        if name.startswith(".") and self.pattern[:1] in _LEADING_WILDCARDS:
            return False
        return self._regex.fullmatch(name) is not None


def _read_class_char(pattern: str, j: int) -> tuple[str, int]:
    ch = pattern[j]
    if ch == "\\" and j + 1 < len(pattern):
        return pattern[j + 1], j + 2
    return ch, j + 1


def _translate_class(pattern: str, start: int) -> tuple[str, int]:
    """
    Translate the bracket expression opening at `start` (the index right after
    `[`) and return the regex fragment together with the index after `]`.

    A `]` directly after `[` or `[!` is a literal member. Reversed ranges such as
    `z-a` contribute nothing, as in fnmatch(3).
    """
    n = len(pattern)
    j = start
    negate = j < n and pattern[j] in _NEGATORS
    if negate:
        j += 1
    members: list[str] = []
    first = True
    while True:
        if j >= n:
            raise PatternError(pattern, "unterminated character class")
        if pattern[j] == "]" and not first:
            break
        first = False
        lo, j = _read_class_char(pattern, j)
        if j + 1 < n and pattern[j] == "-" and pattern[j + 1] != "]":
            hi, j = _read_class_char(pattern, j + 1)
            if lo <= hi:
                members.append(f"{re.escape(lo)}-{re.escape(hi)}")
        else:
            members.append(re.escape(lo))
    if not members:
        return ("(?s:.)" if negate else "(?!)"), j + 1
    return f"[{'^' if negate else ''}{''.join(members)}]", j + 1


def translate(pattern: str) -> str:
    """Translate a shell wildcard pattern into an anchored-by-fullmatch regex."""
    parts: list[str] = []
    i, n = 0, len(pattern)
    while i < n:
        c = pattern[i]
        i += 1
        if c == "*":
            if not parts or parts[-1] != ".*":
                parts.append(".*")
        elif c == "?":
            parts.append(".")
        elif c == "\\":
            if i >= n:
                raise PatternError(pattern, "trailing backslash")
            parts.append(re.escape(pattern[i]))
            i += 1
        elif c == "[":
            fragment, i = _translate_class(pattern, i)
            parts.append(fragment)
        else:
            parts.append(re.escape(c))
    return "(?s:" + "".join(parts) + ")"


@typechecked
def compile_glob(pattern: str) -> GlobMatcher:
    """Compile a shell pattern; malformed patterns raise PatternError right away."""
    return GlobMatcher(pattern, re.compile(translate(pattern)))


def any_match(matchers: Iterable[GlobMatcher], name: str) -> bool:
    return any(m.matches(name) for m in matchers)
