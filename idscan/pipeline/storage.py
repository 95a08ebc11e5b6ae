"""Storage hand-off contract.

The persistence layer is an external collaborator.  This module only
defines the row it receives and the interface it must satisfy.

Row contract
------------
file_key     : caller-supplied key of the uploaded file; None for
               client-side decodes
mime_type    : upload content type, ``"unknown"`` when not supplied
source       : decoding pathway label (e.g. ``"pdf417"``,
               ``"client-pdf417"``)
payload_raw  : decoded payload text exactly as received
parsed_json  : ``NormalizedDocument.to_json_dict()``
confidence   : copied from the document for indexing
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from idscan.schema.document import NormalizedDocument


@dataclass(frozen=True)
class StorageRecord:
    """One row handed to a :class:`DocumentSink`."""

    source: str
    payload_raw: str
    confidence: float
    parsed_json: dict[str, Any] = field(default_factory=dict)
    file_key: str | None = None
    mime_type: str = "unknown"


class DocumentSink(ABC):
    """Pluggable interface for the persistence collaborator."""

    @abstractmethod
    def store(self, record: StorageRecord) -> str:
        """Persist *record* and return an opaque identifier."""
        ...


def build_storage_record(
    document: NormalizedDocument,
    payload: str,
    *,
    file_key: str | None = None,
    mime_type: str | None = None,
    source_label: str | None = None,
) -> StorageRecord:
    """Return the storage row for *document* decoded from *payload*.

    *source_label* overrides the document's ``rawSource`` in the
    ``source`` column.
    """
    return StorageRecord(
        source=source_label or document.raw_source.value,
        payload_raw=payload,
        confidence=document.confidence,
        parsed_json=document.to_json_dict(),
        file_key=file_key,
        mime_type=mime_type or "unknown",
    )
