"""Sex code normalizer.

``DBC`` is numeric in current AAMVA revisions (1 = male, 2 = female,
9 = not specified) and a letter or word in older ones.  Output is one of
``M`` / ``F`` / ``X``.  Values that match none of the known codes are
returned stripped but otherwise verbatim.
"""
from __future__ import annotations

import re

_NUMERIC_CODES: dict[str, str] = {"1": "M", "2": "F", "9": "X"}

_MALE_RE = re.compile(r"^m(?:ale)?$", re.IGNORECASE)
_FEMALE_RE = re.compile(r"^f(?:emale)?$", re.IGNORECASE)
_UNSPECIFIED_RE = re.compile(r"^[xnu]$", re.IGNORECASE)


def normalize_sex(raw: str | None) -> str | None:
    """Return ``"M"``, ``"F"``, ``"X"``, the stripped input, or ``None``.

    ``None`` is returned only for missing or whitespace-only input.
    """
    if not raw:
        return None

    value = raw.strip()
    if not value:
        return None

    if value in _NUMERIC_CODES:
        return _NUMERIC_CODES[value]
    if _MALE_RE.match(value):
        return "M"
    if _FEMALE_RE.match(value):
        return "F"
    if _UNSPECIFIED_RE.match(value):
        return "X"
    return value
