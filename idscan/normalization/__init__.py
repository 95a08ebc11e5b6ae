"""Normalization package.

One normalizer per AAMVA field type.  Each normalizer takes the raw
element value (or ``None`` when the element is missing) and returns a
canonical form, or ``None`` when the value has no recognisable shape.

All normalizers follow the same contract::

    def normalize(raw: str | None) -> str | None:
        ...

Normalizers never raise on malformed input and never log raw values.
"""
from __future__ import annotations

from idscan.normalization.date_normalizer import normalize_date
from idscan.normalization.postal_normalizer import normalize_postal_code
from idscan.normalization.sex_normalizer import normalize_sex

__all__ = ["normalize_date", "normalize_postal_code", "normalize_sex"]
