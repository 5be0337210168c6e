"""The Simplex matcher.

Usage:
    matcher = Simplex("name=value")
    matcher.match("foo=bar")        # {"name": "foo", "value": "bar"}

    pairs = Simplex("pairName=[x,y]", "g")
    pairs.match_all("foo=[a,b]&bar=[c,d]")
    # [{"pairName": "foo", "x": "a", "y": "b"},
    #  {"pairName": "bar", "x": "c", "y": "d"}]
"""

import logging
from typing import Any, Sequence

from simplex.compiler import CompiledMatcher, compile_expression
from simplex.engine import DEFAULT_ENGINE, RegexEngine
from simplex.errors import CompileError
from simplex.options import SimplexOptions, resolve_options
from simplex.weak_parse import weak_parse

logger = logging.getLogger(__name__)

MatchResult = dict[str, Any]


class Simplex:
    """A compiled expression that extracts named fields from text.

    The expression is compiled once, in the constructor; a Simplex holds no
    state that changes between calls and may be shared across threads.
    """

    def __init__(
        self,
        expression: str,
        options: Any = None,
        *,
        engine: RegexEngine | None = None,
    ):
        resolved = resolve_options(options)
        engine = engine or DEFAULT_ENGINE
        compiled = compile_expression(
            expression,
            resolved.field_markers,
            strict_whitespace=resolved.strict_whitespace,
        )

        try:
            regex = engine.compile(compiled.pattern)
        except Exception as e:
            raise CompileError(
                f"Invalid pattern: {e}", expression, compiled.pattern
            ) from e

        self._expression = expression
        self._options = resolved
        self._compiled = compiled
        self._engine = engine
        self._regex = regex

    def __repr__(self) -> str:
        return f"Simplex({self._expression!r}, pattern={self._compiled.pattern!r})"

    @property
    def expression(self) -> str:
        return self._expression

    @property
    def options(self) -> SimplexOptions:
        return self._options

    @property
    def compiled(self) -> CompiledMatcher:
        return self._compiled

    @property
    def pattern(self) -> str:
        """The regular expression source the expression compiled to."""
        return self._compiled.pattern

    @property
    def fields(self) -> tuple[str, ...]:
        """Field names in source order, one per capturing group."""
        return self._compiled.fields

    def match(self, text: str) -> MatchResult | list[MatchResult] | None:
        """Match the first occurrence of the expression in text.

        Returns:
            The field values, or None if the expression does not occur. With
            the global option set, the list from match_all() instead:

                Simplex("key=value").match("a=1 b=2")        # {"key": "a", "value": "1"}
                Simplex("key=value", "g").match("a=1 b=2")   # [{"key": "a", ...}, {"key": "b", ...}]
        """
        if self._options.global_:
            return self.match_all(text)

        found = self._engine.search(self._regex, text)
        if found is None:
            return None
        return self._to_result(found.captures)

    def match_all(self, text: str) -> list[MatchResult]:
        """Match every non-overlapping occurrence, left to right."""
        results = [
            self._to_result(found.captures)
            for found in self._engine.finditer(self._regex, text)
        ]
        logger.debug("%r matched %d time(s)", self._expression, len(results))
        return results

    def _to_result(self, captures: Sequence[str | None]) -> MatchResult:
        result: MatchResult = {}
        for name, value in zip(self._compiled.fields, captures):
            # Captures pair with fields by position; later repeats overwrite
            if value is None:
                continue
            result[name] = weak_parse(value) if self._options.weak_parse else value
        return result
