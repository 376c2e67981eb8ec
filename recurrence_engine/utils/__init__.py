"""Shared utilities: error types and structured logging."""

from .errors import DateOutOfRangeError, InvalidPatternError, RecurrenceError, UnknownPresetError, create_error_response
from .logger import StructuredLogger, recurrence_logger

__all__ = [
    "DateOutOfRangeError",
    "InvalidPatternError",
    "RecurrenceError",
    "StructuredLogger",
    "UnknownPresetError",
    "create_error_response",
    "recurrence_logger",
]
