"""idscan: AAMVA driver's-license barcode payload parsing and normalization."""
from __future__ import annotations

from idscan.aamva.parser import ParsedRecord, parse_aamva
from idscan.mapping.mapper import map_to_document
from idscan.schema.document import NormalizedDocument, SourcePathway
from idscan.schema.errors import ValidationError

__version__ = "0.1.0"
__all__ = [
    "NormalizedDocument",
    "ParsedRecord",
    "SourcePathway",
    "ValidationError",
    "map_to_document",
    "parse_aamva",
]
