"""AAMVA element catalogue and shared constants.

The element table covers the DL/ID subfile tags consumed by
``idscan.mapping.mapper`` plus the header-adjacent tags that commonly
appear in decoded payloads.  Tags are three uppercase ASCII letters.

Source pathways
---------------
pdf417  — payload came from a decoded PDF417 barcode
ocr+llm — payload was reconstructed from OCR text by a language model
"""
from __future__ import annotations

# ---------------------------------------------------------------------------
# Schema defaults
# ---------------------------------------------------------------------------

DEFAULT_CONFIDENCE: float = 0.98

SOURCE_PDF417 = "pdf417"
SOURCE_OCR_LLM = "ocr+llm"

# Characters of the raw payload searched for header metadata when no line
# starts with an ``@`` / ``ANSI `` / ``AAMVA`` marker.
HEADER_WINDOW: int = 64

# ---------------------------------------------------------------------------
# Element tag -> description
# ---------------------------------------------------------------------------

AAMVA_ELEMENTS: dict[str, str] = {
    # Identity
    "DAQ": "Customer ID number",
    "DCS": "Customer family name",
    "DAC": "Customer first name",
    "DAD": "Customer middle name(s)",
    "DAF": "Name suffix (legacy)",
    "DCU": "Name suffix",

    # Address
    "DAG": "Address - street 1",
    "DAH": "Address - street 2",
    "DAI": "Address - city",
    "DAJ": "Address - jurisdiction code",
    "DAK": "Address - postal code",

    # Dates
    "DBB": "Date of birth",
    "DBD": "Document issue date",
    "DBA": "Document expiration date",

    # Physical description
    "DBC": "Physical description - sex",
    "DAY": "Physical description - eye color",
    "DAU": "Physical description - height",

    # Privileges
    "DCA": "Jurisdiction-specific vehicle class",
    "DAR": "License classification code (legacy)",
    "DCB": "Jurisdiction-specific restriction codes",
    "DAS": "License restriction code (legacy)",
    "DCD": "Jurisdiction-specific endorsement codes",
    "DAT": "License endorsements code (legacy)",

    # Document metadata
    "DCF": "Document discriminator",
    "DCG": "Country identification",
    "DDE": "Family name truncation",
    "DDF": "First name truncation",
    "DDG": "Middle name truncation",
}


def describe_element(tag: str) -> str:
    """Return the human-readable description for an AAMVA element *tag*.

    Lookup is case-insensitive.  Unknown tags return ``"Unknown element"``.
    """
    return AAMVA_ELEMENTS.get(tag.upper(), "Unknown element")
