"""Field token scanner for Simplex expressions.

Finds the field tokens in an expression, in source order. A field token is a
run of word characters (letters, digits, underscore), optionally followed by
``*`` to mark a multi-word field, and bracketed by the resolved field markers
when there are any:

    "name=value"                  -> name, value
    "<tags*>" with markers "<>"   -> tags (multi-word)
"""

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator

from simplex.markers import FieldMarkers

MULTI_WORD_SUFFIX = "*"


class Multiplicity(Enum):
    """How much text a field captures."""

    SINGLE_WORD = auto()
    MULTI_WORD = auto()


@dataclass(frozen=True)
class FieldToken:
    """A field occurrence within an expression.

    Attributes:
        name: The field name, without markers or ``*``
        start: Offset of the token (including markers) in the expression
        length: Length of the raw token text
        multiplicity: Whether the field captures one word or many
    """

    name: str
    start: int
    length: int
    multiplicity: Multiplicity = Multiplicity.SINGLE_WORD

    @property
    def end(self) -> int:
        return self.start + self.length

    @property
    def is_multi_word(self) -> bool:
        return self.multiplicity is Multiplicity.MULTI_WORD

    def __repr__(self) -> str:
        return f"FieldToken({self.name!r}, {self.multiplicity.name}, pos={self.start})"


def token_pattern(markers: FieldMarkers) -> re.Pattern[str]:
    """Build the regex that recognizes field tokens for the given markers."""
    return re.compile(
        re.escape(markers.left)
        + r"(\w+)(" + re.escape(MULTI_WORD_SUFFIX) + r"?)"
        + re.escape(markers.right)
    )


class TokenScanner:
    """Single-pass scanner over an expression.

    Usage:
        scanner = TokenScanner("pairName=[x,y]", NO_MARKERS)
        for token in scanner:
            print(token.name)
    """

    def __init__(self, expression: str, markers: FieldMarkers):
        self.expression = expression
        self.markers = markers
        self._pattern = token_pattern(markers)

    def __iter__(self) -> Iterator[FieldToken]:
        for match in self._pattern.finditer(self.expression):
            # The "*" is read from the raw token, before the right marker
            multiplicity = (
                Multiplicity.MULTI_WORD if match.group(2) else Multiplicity.SINGLE_WORD
            )
            yield FieldToken(
                name=match.group(1),
                start=match.start(),
                length=match.end() - match.start(),
                multiplicity=multiplicity,
            )

    def tokenize(self) -> list[FieldToken]:
        """Scan the whole expression and return its field tokens."""
        return list(self)
