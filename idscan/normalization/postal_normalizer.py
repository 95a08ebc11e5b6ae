"""Postal code normalizer.

``DAK`` values are usually an 11-character field padded with zeros or
spaces (``"902230000  "``).  Only US ZIP shapes are produced:

* 9+ digits  -> ``NNNNN-NNNN`` (first nine digits)
* 5-8 digits -> ``NNNNN``
* otherwise  -> ``None``

Safety rule: raw values are never logged.
"""
from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

_NON_DIGIT_RE = re.compile(r"[^0-9]")


def normalize_postal_code(raw: str | None) -> str | None:
    """Return *raw* as a 5-digit or ZIP+4 code, or ``None``."""
    if not raw:
        return None

    digits = _NON_DIGIT_RE.sub("", raw)
    if len(digits) >= 9:
        return f"{digits[:5]}-{digits[5:9]}"
    if len(digits) >= 5:
        return digits[:5]

    logger.debug("normalize_postal_code: too few digits (%d)", len(digits))
    return None
