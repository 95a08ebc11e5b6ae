"""AAMVA payload parser.

Input is the text decoded from the PDF417 symbol on the back of a North
American driver's license or ID card, e.g.::

    @
    ANSI 636014040002DL00410278ZC03190008DLDAQD1234562
    DCSSAMPLE
    DACJOHN
    DBB01011990

Header metadata
---------------
version    : two-digit AAMVA standard version following the ``ANSI`` /
             ``AAMVA`` marker
issuer_id  : 4-6 digit Issuer Identification Number immediately followed
             by the ``DL`` / ``ID`` file type
file_type  : ``"DL"`` or ``"ID"`` as a standalone token in the header
aamva      : True when the header window contains ``ANSI`` or ``AAMVA``

Element scanning
----------------
A single forward scan over the newline-joined, trimmed lines.  Each hit is
three uppercase ASCII letters followed by the rest of that line; the
cursor then resumes at the line break.  Repeated tags are appended to the
existing value with a single space.

Every field other than ``raw`` is best-effort.  A payload with no
structure yields an empty element map and absent metadata, never an
exception.

Safety rule: raw values are never logged.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from idscan.core.constants import HEADER_WINDOW

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Header patterns
# ---------------------------------------------------------------------------

_HEADER_LINE_RE = re.compile(r"^(?:@|ANSI |AAMVA)", re.IGNORECASE)
_AAMVA_MARKER_RE = re.compile(r"AAMVA|ANSI", re.IGNORECASE)
_VERSION_RE = re.compile(r"(?:AAMVA|ANSI)[^0-9]*([0-9]{2})")
_IIN_HEADER_RE = re.compile(r"([0-9]{4,6})\s*(?:DL|ID)", re.IGNORECASE)
# Full-payload fallback: the digit run must start the payload or follow
# whitespace so it is not the tail of a longer number.
_IIN_PAYLOAD_RE = re.compile(r"(?:^|(?<=\s))([0-9]{4,6})(?=\s*(?:DL|ID))", re.IGNORECASE)
_FILE_TYPE_RE = re.compile(r"\b(DL|ID)\b")

# ---------------------------------------------------------------------------
# Element pattern
# ---------------------------------------------------------------------------

_TAG_RE = re.compile(r"[A-Z]{3}")


@dataclass(frozen=True)
class ParsedRecord:
    """Intermediate result of :func:`parse_aamva`.

    ``raw`` is always the unmodified input.  Every other field may be
    absent.
    """

    raw: str
    version: str | None = None
    issuer_id: str | None = None
    file_type: str | None = None
    aamva: bool = False
    elements: dict[str, str] = field(default_factory=dict)

    @property
    def looks_like_license(self) -> bool:
        """True when the header was recognised or a customer ID was found."""
        return self.aamva or bool(self.elements.get("DAQ"))

    def get(self, tag: str) -> str | None:
        """Return the value of element *tag*, or ``None``."""
        return self.elements.get(tag)

    def first_of(self, *tags: str) -> str | None:
        """Return the first non-empty value among *tags*, in order.

        An element present with an empty value falls through to the next
        tag, the same as a missing one.
        """
        for tag in tags:
            value = self.elements.get(tag)
            if value:
                return value
        return None


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def split_lines(payload: str) -> list[str]:
    """Split *payload* on any line ending, trim each line, drop blanks."""
    text = payload.replace("\r\n", "\n").replace("\r", "\n")
    lines = (line.strip() for line in text.split("\n"))
    return [line for line in lines if line]


def find_header(lines: list[str], payload: str) -> str:
    """Return the header search window.

    The first line starting with ``@``, ``ANSI `` or ``AAMVA``
    (case-insensitive); otherwise the first ``HEADER_WINDOW`` characters of
    the raw payload.
    """
    for line in lines:
        if _HEADER_LINE_RE.match(line):
            return line
    return payload[:HEADER_WINDOW]


def scan_elements(text: str) -> dict[str, str]:
    """Return the tag -> value map found in *text*.

    The cursor advances past each matched value, so a value swallows any
    uppercase run later on the same line.
    """
    elements: dict[str, str] = {}
    pos = 0
    length = len(text)

    while pos < length:
        m = _TAG_RE.search(text, pos)
        if m is None:
            break

        tag = m.group(0)
        end = text.find("\n", m.end())
        if end == -1:
            end = length
        value = text[m.end():end].strip()

        if tag in elements:
            elements[tag] = f"{elements[tag]} {value}".strip()
        else:
            elements[tag] = value

        pos = end

    return elements


def _search(pattern: re.Pattern[str], *windows: str) -> str | None:
    for window in windows:
        m = pattern.search(window)
        if m:
            return m.group(1)
    return None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_aamva(payload: str | None) -> ParsedRecord:
    """Parse a decoded AAMVA barcode payload.

    Parameters
    ----------
    payload:
        Text produced by a PDF417 decoder, or any tagged text record in the
        same format.  ``None`` is treated as an empty payload.

    Returns
    -------
    ParsedRecord
        Header metadata and element map.  Never raises on malformed input.

    Raises
    ------
    TypeError
        If *payload* is not a string (e.g. undecoded ``bytes``).
    """
    if payload is None:
        payload = ""
    if not isinstance(payload, str):
        raise TypeError(
            f"payload must be str; got {type(payload).__name__}"
        )

    lines = split_lines(payload)
    header = find_header(lines, payload)

    aamva = bool(_AAMVA_MARKER_RE.search(header))
    version = _search(_VERSION_RE, header, payload)
    issuer_id = _search(_IIN_HEADER_RE, header) or _search(_IIN_PAYLOAD_RE, payload)
    file_type = _search(_FILE_TYPE_RE, header)

    elements = scan_elements("\n".join(lines))

    logger.debug(
        "parse_aamva: length=%d lines=%d elements=%d aamva=%s",
        len(payload),
        len(lines),
        len(elements),
        aamva,
    )

    return ParsedRecord(
        raw=payload,
        version=version,
        issuer_id=issuer_id,
        file_type=file_type,
        aamva=aamva,
        elements=elements,
    )
