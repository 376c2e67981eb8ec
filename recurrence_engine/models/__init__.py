"""Models package for the recurrence engine."""

from .recurrence import (
    GeneratedInstance,
    RecurrenceFrequency,
    RecurrencePattern,
    RecurrencePreset,
    RecurringTaskInstance,
)

__all__ = [
    "GeneratedInstance",
    "RecurrenceFrequency",
    "RecurrencePattern",
    "RecurrencePreset",
    "RecurringTaskInstance",
]
