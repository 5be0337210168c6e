"""Exceptions raised by Simplex."""


class SimplexError(Exception):
    """Base class for all Simplex errors."""


class CompileError(SimplexError):
    """The assembled pattern was rejected by the regex engine.

    Attributes:
        expression: The Simplex expression being compiled
        pattern: The regular expression source assembled from it
    """

    def __init__(self, message: str, expression: str, pattern: str):
        self.expression = expression
        self.pattern = pattern
        super().__init__(f"{message} (expression {expression!r}, pattern {pattern!r})")


class PatternLibraryError(SimplexError):
    """A pattern library file is malformed or a pattern is unknown."""
