"""Schema validation error."""
from __future__ import annotations


class ValidationError(ValueError):
    """Raised when a finished document violates a hard schema constraint.

    ``field`` is the serialized (camelCase) name of the offending field,
    e.g. ``"confidence"`` or ``"rawSource"``.
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message
