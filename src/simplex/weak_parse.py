"""Best-effort coercion of captured text."""

import re

_DIGITS_RE = re.compile(r"[0-9]+")

_BOOLEANS = {
    "true": True,
    "false": False,
}


def weak_parse(value: str) -> str | int | bool:
    """Coerce a captured substring to int or bool when it clearly is one.

    All-digit strings become ints ("02" -> 2), the exact literals "true" and
    "false" become bools, anything else is returned unchanged.
    """
    if _DIGITS_RE.fullmatch(value):
        return int(value)
    if value in _BOOLEANS:
        return _BOOLEANS[value]
    return value
