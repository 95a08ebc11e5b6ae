"""Decoded-payload pipeline: select -> parse -> map -> hand off.

The external PDF417 decoder may return several candidate strings for one
image (multiple symbols, partial reads).  :func:`select_payload` picks one,
:func:`extract_document` runs the parser and mapper on it, and
:func:`extract_and_store` passes the result to a storage sink.

Settings (``DEFAULT_SOURCE``, ``DEFAULT_CONFIDENCE``,
``PREFER_AAMVA_HEADER``) are read here and nowhere deeper; every function
takes an explicit override.

Safety rule: raw values are never logged.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable

from idscan.aamva.parser import parse_aamva
from idscan.core.settings import get_settings
from idscan.mapping.mapper import map_to_document
from idscan.pipeline.storage import DocumentSink, build_storage_record
from idscan.schema.document import NormalizedDocument, SourcePathway

logger = logging.getLogger(__name__)


def select_payload(candidates: Iterable[str | None], *, prefer_aamva: bool | None = None) -> str | None:
    """Return the candidate payload to parse, or ``None``.

    Blank candidates are skipped.  With *prefer_aamva*, the first candidate
    that parses as a license record wins; otherwise (or when none does) the
    first non-blank candidate is returned.
    """
    if prefer_aamva is None:
        prefer_aamva = get_settings().prefer_aamva_header

    usable = [c for c in candidates if c and c.strip()]
    if not usable:
        logger.debug("select_payload: no usable candidates")
        return None

    if prefer_aamva:
        for index, candidate in enumerate(usable):
            if parse_aamva(candidate).looks_like_license:
                logger.debug("select_payload: chose candidate %d of %d (license record)", index, len(usable))
                return candidate

    logger.debug("select_payload: chose first of %d candidates", len(usable))
    return usable[0]


def _document_from_payload(
    payload: str,
    source: str | SourcePathway | None,
    confidence: float | None,
) -> NormalizedDocument:
    settings = get_settings()
    return map_to_document(
        parse_aamva(payload),
        source or settings.default_source,
        confidence=settings.default_confidence if confidence is None else confidence,
    )


def extract_document(
    candidates: Iterable[str | None],
    *,
    source: str | SourcePathway | None = None,
    confidence: float | None = None,
    prefer_aamva: bool | None = None,
) -> NormalizedDocument | None:
    """Parse and map the best candidate; ``None`` when there is none.

    Raises
    ------
    ValidationError
        Propagated unchanged from :func:`map_to_document`.
    """
    payload = select_payload(candidates, prefer_aamva=prefer_aamva)
    if payload is None:
        return None

    return _document_from_payload(payload, source, confidence)


def extract_and_store(
    candidates: Iterable[str | None],
    sink: DocumentSink,
    *,
    file_key: str | None = None,
    mime_type: str | None = None,
    source: str | SourcePathway | None = None,
    source_label: str | None = None,
    confidence: float | None = None,
    prefer_aamva: bool | None = None,
) -> tuple[str, NormalizedDocument] | None:
    """Run the pipeline and hand the document to *sink*.

    Returns ``(record_id, document)``, or ``None`` when no candidate is
    usable (nothing is stored).  Errors raised by *sink* propagate.
    """
    payload = select_payload(candidates, prefer_aamva=prefer_aamva)
    if payload is None:
        return None

    document = _document_from_payload(payload, source, confidence)

    record = build_storage_record(
        document,
        payload,
        file_key=file_key,
        mime_type=mime_type,
        source_label=source_label,
    )
    record_id = sink.store(record)
    logger.info("extract_and_store: stored record (source=%s)", record.source)
    return record_id, document
