"""Error taxonomy for the planning pipeline.

Stages raise these; the web action boundary catches them and turns them into
a user notice. Nothing here is fatal to the process.
"""
from typing import Any, Optional


class PlannerError(Exception):
    """Base class for every error the pipeline reports to the user."""


class InputValidationError(PlannerError):
    """Form input cannot produce a request; nothing is sent."""


class EmptyInputError(InputValidationError):
    """No age in the list could be parsed."""

    def __init__(self, message: str = "Please enter at least one valid age."):
        super().__init__(message)


class NoMealSelectedError(InputValidationError):
    def __init__(self, message: str = "Please select at least one meal type."):
        super().__init__(message)


class RelayError(PlannerError):
    """The relay answered with a non-success status."""

    def __init__(self, status_code: int, error: str = "", details: Optional[Any] = None):
        self.status_code = status_code
        self.error = error or "Relay request failed"
        self.details = details
        super().__init__(f"{self.error} (status {status_code})")


class RelayUnavailableError(RelayError):
    """The relay could not be reached at all."""

    def __init__(self, message: str = "Failed to reach the meal plan service"):
        super().__init__(status_code=0, error=message)


class ParseError(PlannerError):
    """The completion text is not a usable meal plan."""
