"""Recurrence Validator."""
from typing import Dict, Any, List
import logging

from pydantic import ValidationError

from recurrence_engine.models.recurrence import RecurrencePattern

logger = logging.getLogger(__name__)

INTERVAL_ERROR = "Interval must be at least 1"
DAYS_OF_WEEK_ERROR = "Days of week must be between 0 (Sunday) and 6 (Saturday)"
DAY_OF_MONTH_ERROR = "Day of month must be between 1 and 31"
MONTH_OF_YEAR_ERROR = "Month of year must be between 1 and 12"
END_CONDITION_ERROR = "Cannot have both end date and max occurrences"
MAX_OCCURRENCES_ERROR = "Max occurrences must be at least 1"
CUSTOM_DAYS_ERROR = "Custom days must be between 1 and 31"


class RecurrenceValidator:
    """Validate recurrence patterns for tasks."""

    @staticmethod
    def validate_pattern(pattern: RecurrencePattern) -> Dict[str, Any]:
        """
        Validate a recurrence pattern.

        Errors are returned as data in a fixed order so the picker UI can
        show every problem on each edit. Nothing is raised.

        Args:
            pattern: Recurrence pattern to check

        Returns:
            Dict with "valid" and the ordered list of "errors"
        """
        errors: List[str] = []

        if pattern.interval < 1:
            errors.append(INTERVAL_ERROR)

        if pattern.days_of_week and any(d < 0 or d > 6 for d in pattern.days_of_week):
            errors.append(DAYS_OF_WEEK_ERROR)

        if pattern.day_of_month is not None and not 1 <= pattern.day_of_month <= 31:
            errors.append(DAY_OF_MONTH_ERROR)

        if pattern.month_of_year is not None and not 1 <= pattern.month_of_year <= 12:
            errors.append(MONTH_OF_YEAR_ERROR)

        if pattern.end_date is not None and pattern.max_occurrences is not None:
            errors.append(END_CONDITION_ERROR)

        if pattern.max_occurrences is not None and pattern.max_occurrences < 1:
            errors.append(MAX_OCCURRENCES_ERROR)

        if pattern.custom_days and any(d < 1 or d > 31 for d in pattern.custom_days):
            errors.append(CUSTOM_DAYS_ERROR)

        return {
            "valid": len(errors) == 0,
            "errors": errors
        }

    @staticmethod
    def validate_pattern_data(data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Validate a raw wire-format pattern (camelCase keys).

        Type problems that stop the model from being built at all, such as an
        unknown frequency, are reported in the same result shape.

        Args:
            data: Pattern dictionary as received from the UI

        Returns:
            Dict with "valid" and "errors"
        """
        try:
            pattern = RecurrencePattern.model_validate(data)
        except ValidationError as e:
            errors = []
            for issue in e.errors():
                field = ".".join(str(part) for part in issue["loc"]) or "pattern"
                errors.append(f"Invalid {field}: {issue['msg']}")
            logger.warning(f"Rejected malformed recurrence pattern: {errors}")
            return {
                "valid": False,
                "errors": errors
            }

        return RecurrenceValidator.validate_pattern(pattern)


def validate_pattern(pattern: RecurrencePattern) -> Dict[str, Any]:
    """Validate a recurrence pattern. See RecurrenceValidator.validate_pattern."""
    return RecurrenceValidator.validate_pattern(pattern)
