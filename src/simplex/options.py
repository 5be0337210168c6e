"""Matcher options.

Options may be given as:

- a mapping: ``{"global": True, "fieldMarkers": "<>", "strictWhitespace": False,
  "weakParse": True}`` (snake_case keys are accepted too)
- a flag string, like regex flags: ``"g"`` turns on global matching
- a SimplexOptions instance

Whatever the shape, it is resolved once into a frozen SimplexOptions.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from simplex.markers import NO_MARKERS, FieldMarkers, resolve_field_markers

GLOBAL_FLAG = "g"

# Option name -> accepted keys, first match wins
_OPTION_KEYS = {
    "global_": ("global", "global_"),
    "field_markers": ("fieldMarkers", "field_markers"),
    "strict_whitespace": ("strictWhitespace", "strict_whitespace"),
    "weak_parse": ("weakParse", "weak_parse"),
}


@dataclass(frozen=True)
class SimplexOptions:
    """Resolved options for one matcher.

    Attributes:
        global_: match() returns every occurrence instead of the first
        field_markers: Delimiters around field names in the expression
        strict_whitespace: Expression whitespace must match exactly
        weak_parse: Coerce captured values to int/bool where possible
    """

    global_: bool = False
    field_markers: FieldMarkers = NO_MARKERS
    strict_whitespace: bool = False
    weak_parse: bool = False

    def __post_init__(self):
        # Raw marker specs passed to the constructor are resolved here too
        object.__setattr__(self, "field_markers", resolve_field_markers(self.field_markers))

    @classmethod
    def from_flags(cls, flags: str) -> "SimplexOptions":
        """Create options from a regex-style flag string such as ``"g"``."""
        return cls(global_=GLOBAL_FLAG in flags)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "SimplexOptions":
        """Create options from a configuration mapping."""
        return cls(
            global_=bool(_lookup(data, "global_")),
            field_markers=_lookup(data, "field_markers"),
            strict_whitespace=bool(_lookup(data, "strict_whitespace")),
            weak_parse=bool(_lookup(data, "weak_parse")),
        )


def resolve_options(options: Any = None) -> SimplexOptions:
    """Resolve any accepted options shape into SimplexOptions.

    Unrecognized shapes fall back to the defaults.
    """
    if isinstance(options, SimplexOptions):
        return options
    if isinstance(options, str):
        return SimplexOptions.from_flags(options)
    if isinstance(options, Mapping):
        return SimplexOptions.from_mapping(options)
    return SimplexOptions()


def _lookup(data: Mapping[str, Any], option: str) -> Any:
    for key in _OPTION_KEYS[option]:
        if key in data:
            return data[key]
    return None
