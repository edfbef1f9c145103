from __future__ import annotations

from typing import Any, Dict, Optional


class CalculationInputError(Exception):
    """Base class for precondition failures detected before running the model.

    Each subclass carries a stable ``code`` used on the wire and a
    user-facing ``message``.
    """

    code: str = "VALIDATION_ERROR"
    default_message: str = "Invalid input"

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None) -> None:
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)


class MissingFieldError(CalculationInputError):
    code = "MISSING_FIELD"
    default_message = "Please fill in all fields"


class TreeCountOutOfRangeError(CalculationInputError):
    code = "TREE_COUNT_OUT_OF_RANGE"
    default_message = "Number of trees must be between 1 and 100,000"


class DurationOutOfRangeError(CalculationInputError):
    code = "DURATION_OUT_OF_RANGE"
    default_message = "Project duration must be between 1 and 50 years"


class UnknownSpeciesError(CalculationInputError):
    code = "UNKNOWN_SPECIES"
    default_message = "Unknown tree species"

    def __init__(self, species_id: Optional[str] = None, message: Optional[str] = None) -> None:
        if message is None and species_id is not None:
            message = f"Unknown tree species: '{species_id}'"
        super().__init__(message, details={"species": species_id} if species_id is not None else None)
        self.species_id = species_id


class TransportError(Exception):
    """Remote calculation could not be completed (network, HTTP or payload failure).

    Deliberately not a ``CalculationInputError``: the UI shows a generic
    retry message instead of an input hint.
    """

    code = "TRANSPORT_ERROR"
    user_message = "Failed to calculate impact. Please try again later."

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)


INPUT_ERRORS_BY_CODE: Dict[str, type] = {
    cls.code: cls
    for cls in (MissingFieldError, TreeCountOutOfRangeError, DurationOutOfRangeError, UnknownSpeciesError)
}
