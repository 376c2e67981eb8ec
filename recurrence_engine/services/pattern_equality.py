"""Structural comparison of recurrence patterns."""
from typing import Optional

from recurrence_engine.models.recurrence import RecurrencePattern


def _day_set(days) -> Optional[frozenset]:
    return frozenset(days) if days else None


def patterns_equal(a: Optional[RecurrencePattern], b: Optional[RecurrencePattern]) -> bool:
    """
    Check if two patterns describe the same rule.

    Comparison is deep: every field takes part. Day lists compare as sets,
    so [1, 3] equals [3, 1], and an empty list equals an absent one.
    """
    if a is None and b is None:
        return True
    if a is None or b is None:
        return False

    return (
        a.frequency == b.frequency
        and a.interval == b.interval
        and _day_set(a.days_of_week) == _day_set(b.days_of_week)
        and a.day_of_month == b.day_of_month
        and a.month_of_year == b.month_of_year
        and a.end_date == b.end_date
        and a.max_occurrences == b.max_occurrences
        and _day_set(a.custom_days) == _day_set(b.custom_days)
    )
