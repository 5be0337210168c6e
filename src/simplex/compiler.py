"""Compile Simplex expressions into regular expressions.

An expression is a flat sequence of literal text and field tokens. Each field
becomes one capturing group; literal text is escaped so it matches itself.

    "name=value"      -> (\\w+)=(\\w+)          fields: name, value
    "<tags*>"         -> <(.*?)>               fields: tags
    "<name>" with markers "<>" -> <(\\w+)>     fields: name
    "a b"             -> (\\w+)\\s+(\\w+)        fields: a, b

Captures are mapped back onto field names purely by position, so the field
list always has exactly one entry per capturing group.
"""

import logging
import re
from dataclasses import dataclass

from simplex.markers import NO_MARKERS, FieldMarkers
from simplex.scanner import FieldToken, TokenScanner

logger = logging.getLogger(__name__)

SINGLE_WORD_CAPTURE = r"(\w+)"
MULTI_WORD_CAPTURE = r"(.*?)"
TRAILING_MULTI_WORD_CAPTURE = r"(.*)"
ELASTIC_WHITESPACE = r"\s+"

_WHITESPACE_RE = re.compile(r"(\s+)")


@dataclass(frozen=True)
class CompiledMatcher:
    """A compiled expression.

    Attributes:
        pattern: Regular expression source with one group per field
        fields: Field names in source order, one per capturing group
    """

    pattern: str
    fields: tuple[str, ...]


def escape_literal(text: str, strict_whitespace: bool = False) -> str:
    """Escape literal expression text for use in a regular expression.

    With strict_whitespace off, every whitespace run becomes ``\\s+`` so the
    input may use any amount and kind of whitespace where the expression has
    some.
    """
    if strict_whitespace:
        return re.escape(text)

    parts = []
    for piece in _WHITESPACE_RE.split(text):
        if not piece:
            continue
        if piece.isspace():
            parts.append(ELASTIC_WHITESPACE)
        else:
            parts.append(re.escape(piece))
    return "".join(parts)


def field_capture(token: FieldToken, is_last: bool) -> str:
    """Capturing group for a field token.

    Multi-word fields are non-greedy so they stop at the next literal; a
    multi-word field that ends the expression takes the rest of the match.
    """
    if not token.is_multi_word:
        return SINGLE_WORD_CAPTURE
    if is_last:
        return TRAILING_MULTI_WORD_CAPTURE
    return MULTI_WORD_CAPTURE


def compile_expression(
    expression: str,
    field_markers: FieldMarkers = NO_MARKERS,
    strict_whitespace: bool = False,
) -> CompiledMatcher:
    """Compile an expression into a pattern and its ordered field names.

    Args:
        expression: The Simplex expression, e.g. ``"name=value"``
        field_markers: Resolved field delimiters
        strict_whitespace: Match expression whitespace exactly

    Returns:
        The CompiledMatcher. Repeated field names are kept as-is.
    """
    pattern: list[str] = []
    fields: list[str] = []
    index = 0

    for token in TokenScanner(expression, field_markers):
        pattern.append(escape_literal(expression[index:token.start], strict_whitespace))
        # Markers stay in the pattern so they anchor the capture
        pattern.append(escape_literal(field_markers.left, strict_whitespace))
        is_last = token.end == len(expression) and not field_markers.right
        pattern.append(field_capture(token, is_last=is_last))
        pattern.append(escape_literal(field_markers.right, strict_whitespace))
        fields.append(token.name)
        index = token.end

    if index < len(expression):
        pattern.append(escape_literal(expression[index:], strict_whitespace))

    compiled = CompiledMatcher(pattern="".join(pattern), fields=tuple(fields))
    logger.debug(
        "Compiled expression %r to %r with fields %s",
        expression,
        compiled.pattern,
        list(compiled.fields),
    )
    return compiled
