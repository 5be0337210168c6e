"""RegexEngine Protocol — the regular-expression capability Simplex relies on.

Simplex only needs three operations from a regex engine: compile a pattern,
find the first match, and find every non-overlapping match. Keeping them
behind a Protocol lets tests substitute a fake engine and lets callers plug
in an alternative implementation.
"""

import re
from dataclasses import dataclass
from typing import Any, Iterator, Protocol, runtime_checkable


@dataclass(frozen=True)
class RegexMatch:
    """One match of a compiled pattern.

    Attributes:
        captures: Captured substrings in group order (None for a group that
            did not participate)
        start: Offset of the match in the searched text
        end: Offset just past the match
    """

    captures: tuple[str | None, ...]
    start: int
    end: int


@runtime_checkable
class RegexEngine(Protocol):
    """Interface every regex engine must implement."""

    def compile(self, pattern: str) -> Any: ...

    def search(self, compiled: Any, text: str) -> RegexMatch | None: ...

    def finditer(self, compiled: Any, text: str) -> Iterator[RegexMatch]: ...


class StdlibRegexEngine:
    """RegexEngine backed by Python's ``re`` module."""

    def __init__(self, flags: int = 0):
        self.flags = flags

    def compile(self, pattern: str) -> re.Pattern[str]:
        return re.compile(pattern, self.flags)

    def search(self, compiled: re.Pattern[str], text: str) -> RegexMatch | None:
        match = compiled.search(text)
        if match is None:
            return None
        return _to_regex_match(match)

    def finditer(self, compiled: re.Pattern[str], text: str) -> Iterator[RegexMatch]:
        for match in compiled.finditer(text):
            yield _to_regex_match(match)


def _to_regex_match(match: re.Match[str]) -> RegexMatch:
    return RegexMatch(captures=match.groups(), start=match.start(), end=match.end())


DEFAULT_ENGINE = StdlibRegexEngine()
