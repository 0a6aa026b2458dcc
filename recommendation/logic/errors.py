"""
Scoring engine errors.

Raised synchronously by the engine; the HTTP layer translates them.
"""

from typing import Any, Dict


class UnrecognizedAnswerValue(ValueError):
    """A questionnaire answer is not a key of its encoding table."""

    def __init__(self, field: str, value: Any, message: str = ""):
        self.field = field
        self.value = value
        self.message = message or f"Unrecognized value {value!r} for field '{field}'"
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {"field": self.field, "value": self.value, "message": self.message}


class MissingRequiredField(UnrecognizedAnswerValue):
    """A required single-choice answer is absent or blank."""

    def __init__(self, field: str):
        super().__init__(field, None, f"Required field '{field}' is missing")
