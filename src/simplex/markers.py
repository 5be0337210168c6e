"""Field marker resolution.

Field markers are the optional left/right text that brackets a field name in
an expression, e.g. ``<`` and ``>`` in ``"<name>: <value>"``. Callers may
describe them in several shapes:

- nothing (None, "", ...): bare word tokens are fields
- a string: split in half, an odd middle character shared by both sides
- a two-element list or tuple: (left, right)
- a mapping or object with ``left`` / ``right``

Every shape is normalized once into a FieldMarkers value.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldMarkers:
    """Canonical left/right field delimiters.

    Attributes:
        left: Text that opens a field token (may be empty)
        right: Text that closes a field token (may be empty)
    """

    left: str = ""
    right: str = ""

    @property
    def is_bare(self) -> bool:
        """True when fields are plain word tokens with no delimiters."""
        return not self.left and not self.right


NO_MARKERS = FieldMarkers()


def resolve_field_markers(spec: Any) -> FieldMarkers:
    """Normalize a field marker specification.

    Args:
        spec: None, a string, a (left, right) pair, a mapping with
            ``left``/``right`` keys or an object with those attributes.

    Returns:
        The resolved FieldMarkers. Unrecognized shapes resolve to NO_MARKERS.
    """
    if not spec:
        return NO_MARKERS

    if isinstance(spec, FieldMarkers):
        return spec

    if isinstance(spec, str):
        return _split_marker_string(spec)

    if isinstance(spec, (list, tuple)):
        if len(spec) == 2:
            return FieldMarkers(_side(spec[0]), _side(spec[1]))
        logger.warning(
            "Field markers %r must have exactly two elements, using bare word fields",
            spec,
        )
        return NO_MARKERS

    if isinstance(spec, Mapping):
        return FieldMarkers(_side(spec.get("left")), _side(spec.get("right")))

    if hasattr(spec, "left") or hasattr(spec, "right"):
        return FieldMarkers(
            _side(getattr(spec, "left", None)),
            _side(getattr(spec, "right", None)),
        )

    logger.warning("Unrecognized field markers %r, using bare word fields", spec)
    return NO_MARKERS


def _split_marker_string(spec: str) -> FieldMarkers:
    half, odd = divmod(len(spec), 2)
    # "<|>" -> ("<|", "|>"): the middle character belongs to both sides
    return FieldMarkers(spec[: half + odd], spec[half:])


def _side(value: Any) -> str:
    if value is None:
        return ""
    return str(value)
