"""Date normalizer.

AAMVA dates are eight digits.  US jurisdictions encode them as
``MMDDCCYY``; Canadian jurisdictions use ``CCYYMMDD``.  Separators that
some encoders insert (``01/01/2000``, ``2000-01-01``) are discarded
before the shape is examined.

Output is always ``YYYY-MM-DD``.  Only digit shape is checked: month 13
or day 32 pass through unchanged, calendar validity belongs to callers.

Safety rule: raw values are never logged.
"""
from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

_NON_DIGIT_RE = re.compile(r"[^0-9]")

# A leading year is accepted only in the 1800-2199 range.  Anything else is
# read as month/day first, which is what US documents carry.
_YYYYMMDD_RE = re.compile(r"^((?:1[89]|2[01])[0-9]{2})([0-9]{2})([0-9]{2})$")
_MMDDYYYY_RE = re.compile(r"^([0-9]{2})([0-9]{2})([0-9]{4})$")


def normalize_date(raw: str | None) -> str | None:
    """Return *raw* as ``YYYY-MM-DD``, or ``None`` if it has no date shape.

    Parameters
    ----------
    raw:
        Element value such as ``"01012000"`` (``DBB``) or ``"20000101"``.

    Returns
    -------
    str | None
        Canonical date string, or ``None`` when the digits left after
        stripping separators are not exactly eight.  Never raises.
    """
    if not raw:
        return None

    digits = _NON_DIGIT_RE.sub("", raw)

    m = _YYYYMMDD_RE.match(digits)
    if m:
        return f"{m.group(1)}-{m.group(2)}-{m.group(3)}"

    m = _MMDDYYYY_RE.match(digits)
    if m:
        return f"{m.group(3)}-{m.group(1)}-{m.group(2)}"

    logger.debug("normalize_date: unrecognised shape (digits=%d)", len(digits))
    return None
