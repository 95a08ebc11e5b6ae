"""Canonical driver's-license document schema."""
from __future__ import annotations

from idscan.schema.document import (
    DraftDocument,
    NormalizedDocument,
    SourcePathway,
    apply_defaults,
    validate_document,
)
from idscan.schema.errors import ValidationError

__all__ = [
    "DraftDocument",
    "NormalizedDocument",
    "SourcePathway",
    "ValidationError",
    "apply_defaults",
    "validate_document",
]
