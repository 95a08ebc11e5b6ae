"""Normalized driver's-license document: two-phase build.

Phase one is :class:`DraftDocument`: every field optional, filled in by
the mapper from whatever the parser found.  Phase two is
:func:`apply_defaults`, a pure function that fills defaults, clamps the
confidence score and validates the result into an immutable
:class:`NormalizedDocument`.

Field contract
--------------
Always present, ``""`` when unknown:
    jurisdiction, idNumber, firstName, lastName, address1, city, state,
    postalCode
Absent when unknown:
    middleName, suffix, address2, dob, issuedOn, expiresOn, class,
    restrictions, endorsements, sex, eyeColor, height, rawText
Dates are ``YYYY-MM-DD`` when present.  ``confidence`` is in ``[0, 1]``.

Attribute names are snake_case; serialized keys are the camelCase aliases
stored by the persistence layer.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

import pydantic
from pydantic import BaseModel, ConfigDict, Field

from idscan.core.constants import DEFAULT_CONFIDENCE, SOURCE_OCR_LLM, SOURCE_PDF417
from idscan.schema.errors import ValidationError

logger = logging.getLogger(__name__)


class SourcePathway(str, Enum):
    """Upstream pathway that produced the raw text."""

    PDF417 = SOURCE_PDF417
    OCR_LLM = SOURCE_OCR_LLM


class NormalizedDocument(BaseModel):
    """Canonical, immutable driver's-license / ID card record."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    jurisdiction: str = ""
    id_number: str = Field(default="", alias="idNumber")
    first_name: str = Field(default="", alias="firstName")
    middle_name: str | None = Field(default=None, alias="middleName")
    last_name: str = Field(default="", alias="lastName")
    suffix: str | None = None
    address1: str = ""
    address2: str | None = None
    city: str = ""
    state: str = ""
    postal_code: str = Field(default="", alias="postalCode")
    dob: str | None = Field(default=None, pattern=r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
    issued_on: str | None = Field(default=None, alias="issuedOn", pattern=r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
    expires_on: str | None = Field(default=None, alias="expiresOn", pattern=r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
    license_class: str | None = Field(default=None, alias="class")
    restrictions: str | None = None
    endorsements: str | None = None
    sex: str | None = None
    eye_color: str | None = Field(default=None, alias="eyeColor")
    height: str | None = None
    raw_source: SourcePathway = Field(alias="rawSource")
    raw_text: str | None = Field(default=None, alias="rawText")
    confidence: float = Field(default=DEFAULT_CONFIDENCE, ge=0.0, le=1.0, allow_inf_nan=False)

    def to_json_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dict keyed by camelCase names.

        Absent optional fields are omitted.
        """
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


@dataclass
class DraftDocument:
    """Phase-one document: every field optional."""

    jurisdiction: str | None = None
    id_number: str | None = None
    first_name: str | None = None
    middle_name: str | None = None
    last_name: str | None = None
    suffix: str | None = None
    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    dob: str | None = None
    issued_on: str | None = None
    expires_on: str | None = None
    license_class: str | None = None
    restrictions: str | None = None
    endorsements: str | None = None
    sex: str | None = None
    eye_color: str | None = None
    height: str | None = None
    raw_source: str | SourcePathway | None = None
    raw_text: str | None = None
    confidence: float | None = None


# Fields that default to "" rather than staying absent.
_DEFAULTED_TO_EMPTY: tuple[str, ...] = (
    "jurisdiction",
    "id_number",
    "first_name",
    "last_name",
    "address1",
    "city",
    "state",
    "postal_code",
)

_OPTIONAL: tuple[str, ...] = (
    "middle_name",
    "suffix",
    "address2",
    "dob",
    "issued_on",
    "expires_on",
    "license_class",
    "restrictions",
    "endorsements",
    "sex",
    "eye_color",
    "height",
    "raw_text",
)


def clamp_confidence(value: float | None) -> float:
    """Return *value* clamped to ``[0, 1]``; ``None`` -> default.

    NaN is returned unchanged so that validation rejects it.

    Raises
    ------
    ValidationError
        If *value* is not a number.
    """
    if value is None:
        return DEFAULT_CONFIDENCE
    try:
        value = float(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError("confidence", "Input should be a valid number") from exc
    if math.isnan(value):
        return value
    return min(1.0, max(0.0, value))


def _alias(name: str) -> str:
    info = NormalizedDocument.model_fields[name]
    return info.alias or name


def apply_defaults(draft: DraftDocument) -> NormalizedDocument:
    """Fill defaults on *draft* and validate it into a document.

    Empty-string optionals are treated as absent.

    Raises
    ------
    ValidationError
        If a hard constraint fails: ``rawSource`` missing or not a known
        pathway, ``confidence`` NaN, or a date field that is
        not ``YYYY-MM-DD``.
    """
    data: dict[str, Any] = {}

    for name in _DEFAULTED_TO_EMPTY:
        data[_alias(name)] = getattr(draft, name) or ""

    for name in _OPTIONAL:
        value = getattr(draft, name)
        if value:
            data[_alias(name)] = value

    data["rawSource"] = draft.raw_source
    data["confidence"] = clamp_confidence(draft.confidence)

    return validate_document(data)


def validate_document(data: dict[str, Any]) -> NormalizedDocument:
    """Validate camelCase *data* into a :class:`NormalizedDocument`.

    No defaulting or clamping happens here; ``pydantic`` errors are
    re-raised as :class:`ValidationError` naming the first failing field.
    """
    try:
        return NormalizedDocument.model_validate(data)
    except pydantic.ValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or "document"
        logger.warning("validate_document: schema validation failed on %s", field)
        raise ValidationError(field, first["msg"]) from exc
