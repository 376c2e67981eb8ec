"""
Recurring Task Pattern Engine

Pure, deterministic recurrence calculations for the task manager:
validation, next-occurrence generation, projection, descriptions and
pattern comparison.
"""

from .models.recurrence import (
    GeneratedInstance,
    RecurrenceFrequency,
    RecurrencePattern,
    RecurrencePreset,
    RecurringTaskInstance,
)
from .services import (
    RecurringTaskService,
    generate_instances_for_range,
    generate_next_instance,
    get_default_pattern,
    get_ordinal,
    get_pattern_from_preset,
    get_recurrence_description,
    get_upcoming_instances,
    patterns_equal,
    validate_pattern,
)
from .utils.errors import DateOutOfRangeError, InvalidPatternError, RecurrenceError, UnknownPresetError

__all__ = [
    "DateOutOfRangeError",
    "GeneratedInstance",
    "InvalidPatternError",
    "RecurrenceError",
    "RecurrenceFrequency",
    "RecurrencePattern",
    "RecurrencePreset",
    "RecurringTaskInstance",
    "RecurringTaskService",
    "UnknownPresetError",
    "generate_instances_for_range",
    "generate_next_instance",
    "get_default_pattern",
    "get_ordinal",
    "get_pattern_from_preset",
    "get_recurrence_description",
    "get_upcoming_instances",
    "patterns_equal",
    "validate_pattern",
]
