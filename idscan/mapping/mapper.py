"""Map a parsed AAMVA record onto the canonical document schema.

Tag precedence
--------------
Where a field has a current and a legacy tag, the current tag wins; an
empty value falls through to the next tag.

    suffix        DAF, DCU
    license class DCA, DAR
    restrictions  DCB, DAS
    endorsements  DCD, DAT
    jurisdiction  DAJ value, then the header Issuer Identification Number

The jurisdiction fallback puts a numeric issuer id where a region code
normally sits.  Consumers that need the region should read ``state``.

Safety rule: raw values are never logged.
"""
from __future__ import annotations

import logging

from idscan.aamva.parser import ParsedRecord
from idscan.core.constants import SOURCE_PDF417
from idscan.normalization import normalize_date, normalize_postal_code, normalize_sex
from idscan.schema.document import (
    DraftDocument,
    NormalizedDocument,
    SourcePathway,
    apply_defaults,
)

logger = logging.getLogger(__name__)

SUFFIX_TAGS: tuple[str, ...] = ("DAF", "DCU")
CLASS_TAGS: tuple[str, ...] = ("DCA", "DAR")
RESTRICTION_TAGS: tuple[str, ...] = ("DCB", "DAS")
ENDORSEMENT_TAGS: tuple[str, ...] = ("DCD", "DAT")


def resolve_jurisdiction(parsed: ParsedRecord) -> str:
    """Return the region code, else the issuer id, else ``""``."""
    return parsed.get("DAJ") or parsed.issuer_id or ""


def build_draft(
    parsed: ParsedRecord,
    source_pathway: str | SourcePathway = SOURCE_PDF417,
    *,
    confidence: float | None = None,
    include_raw_text: bool = True,
) -> DraftDocument:
    """Apply per-field normalization and tag precedence to *parsed*."""
    return DraftDocument(
        jurisdiction=resolve_jurisdiction(parsed),
        id_number=parsed.get("DAQ"),
        first_name=parsed.get("DAC"),
        middle_name=parsed.get("DAD"),
        last_name=parsed.get("DCS"),
        suffix=parsed.first_of(*SUFFIX_TAGS),
        address1=parsed.get("DAG"),
        address2=parsed.get("DAH"),
        city=parsed.get("DAI"),
        state=parsed.get("DAJ"),
        postal_code=normalize_postal_code(parsed.get("DAK")),
        dob=normalize_date(parsed.get("DBB")),
        issued_on=normalize_date(parsed.get("DBD")),
        expires_on=normalize_date(parsed.get("DBA")),
        license_class=parsed.first_of(*CLASS_TAGS),
        restrictions=parsed.first_of(*RESTRICTION_TAGS),
        endorsements=parsed.first_of(*ENDORSEMENT_TAGS),
        sex=normalize_sex(parsed.get("DBC")),
        eye_color=parsed.get("DAY"),
        height=parsed.get("DAU"),
        raw_source=source_pathway,
        raw_text=parsed.raw if include_raw_text else None,
        confidence=confidence,
    )


def map_to_document(
    parsed: ParsedRecord,
    source_pathway: str | SourcePathway = SOURCE_PDF417,
    *,
    confidence: float | None = None,
    include_raw_text: bool = True,
) -> NormalizedDocument:
    """Return the canonical document for *parsed*.

    Parameters
    ----------
    parsed:
        Output of :func:`idscan.aamva.parser.parse_aamva`.
    source_pathway:
        ``"pdf417"`` or ``"ocr+llm"``; recorded as ``rawSource``.
    confidence:
        Score for the record.  Defaults to 0.98 and is clamped to
        ``[0, 1]``.
    include_raw_text:
        Echo ``parsed.raw`` as ``rawText``.  Empty payloads are never echoed.

    Raises
    ------
    ValidationError
        Only for hard schema violations: an unknown *source_pathway* or a
        NaN *confidence*.  Malformed payloads never raise.
    """
    draft = build_draft(
        parsed,
        source_pathway,
        confidence=confidence,
        include_raw_text=include_raw_text,
    )
    document = apply_defaults(draft)
    logger.debug(
        "map_to_document: source=%s elements=%d",
        document.raw_source.value,
        len(parsed.elements),
    )
    return document
