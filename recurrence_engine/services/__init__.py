"""Recurrence services: validation, generation, projection and formatting."""

from .description import DAY_NAMES, DAY_NAMES_FULL, MONTH_NAMES, get_ordinal, get_recurrence_description
from .instance_generator import generate_next_instance
from .pattern_equality import patterns_equal
from .projection import generate_instances_for_range, get_upcoming_instances
from .recurrence_presets import FREQUENCY_LABELS, get_default_pattern, get_pattern_from_preset, list_presets
from .recurrence_validator import RecurrenceValidator, validate_pattern
from .recurring_task_service import RecurringTaskService

__all__ = [
    "DAY_NAMES",
    "DAY_NAMES_FULL",
    "FREQUENCY_LABELS",
    "MONTH_NAMES",
    "RecurrenceValidator",
    "RecurringTaskService",
    "generate_instances_for_range",
    "generate_next_instance",
    "get_default_pattern",
    "get_ordinal",
    "get_pattern_from_preset",
    "get_recurrence_description",
    "get_upcoming_instances",
    "list_presets",
    "patterns_equal",
    "validate_pattern",
]
