"""Simplex — extract named fields from text with readable expressions.

This module provides:
- Simplex: compiles an expression such as "name=value" and matches text
- FieldMarkers / resolve_field_markers: field delimiter handling
- compile_expression: the expression-to-regex compiler
- RegexEngine: the regex capability Simplex runs on
- PatternLibrary: named expressions loaded from YAML
"""

from simplex.compiler import CompiledMatcher, compile_expression, escape_literal
from simplex.engine import RegexEngine, RegexMatch, StdlibRegexEngine
from simplex.errors import CompileError, PatternLibraryError, SimplexError
from simplex.library import PatternDefinition, PatternLibrary
from simplex.markers import NO_MARKERS, FieldMarkers, resolve_field_markers
from simplex.matcher import MatchResult, Simplex
from simplex.options import SimplexOptions, resolve_options
from simplex.scanner import FieldToken, Multiplicity, TokenScanner
from simplex.weak_parse import weak_parse

__all__ = [
    # Matcher
    "MatchResult",
    "Simplex",
    # Options
    "SimplexOptions",
    "resolve_options",
    # Markers
    "NO_MARKERS",
    "FieldMarkers",
    "resolve_field_markers",
    # Compiler
    "CompiledMatcher",
    "FieldToken",
    "Multiplicity",
    "TokenScanner",
    "compile_expression",
    "escape_literal",
    # Engine
    "RegexEngine",
    "RegexMatch",
    "StdlibRegexEngine",
    # Library
    "PatternDefinition",
    "PatternLibrary",
    # Errors
    "CompileError",
    "PatternLibraryError",
    "SimplexError",
    # Helpers
    "weak_parse",
]
