"""
Recurrence Error Types

Validation problems are reported as data by RecurrenceValidator. The
exceptions here are raised only when a caller asks the engine to do
something it cannot honor, such as generating dates from a pattern that
failed validation.
"""

from typing import Any, Dict, List, Optional


class RecurrenceError(Exception):
    """Base exception for recurrence engine errors"""
    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidPatternError(RecurrenceError):
    """Raised when dates are requested from a pattern the engine cannot honor"""
    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__(
            code="INVALID_PATTERN",
            message="Invalid recurrence pattern: " + "; ".join(self.errors),
            details={"errors": self.errors}
        )


class UnknownPresetError(RecurrenceError):
    """Raised by strict preset lookups for names outside RecurrencePreset"""
    def __init__(self, preset: str):
        super().__init__(
            code="UNKNOWN_PRESET",
            message=f"Unknown recurrence preset: {preset}",
            details={"preset": preset}
        )


class DateOutOfRangeError(RecurrenceError):
    """Raised when the next occurrence would fall outside the supported calendar"""
    def __init__(self, from_date: Any, reason: str):
        super().__init__(
            code="DATE_OUT_OF_RANGE",
            message=f"Next occurrence after {from_date} is out of range: {reason}",
            details={"from_date": str(from_date)}
        )


def create_error_response(error: RecurrenceError) -> Dict[str, Any]:
    """
    Create a standardized error response

    Args:
        error: The RecurrenceError to convert

    Returns:
        Standardized error response dictionary
    """
    return {
        "success": False,
        "error": {
            "code": error.code,
            "message": error.message,
            "details": error.details
        }
    }
