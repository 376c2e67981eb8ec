"""
Instance Generator

Computes the next occurrence date of a recurrence pattern.

Dates are naive local values. Both date and datetime anchors are accepted;
the result has the same type and, for datetimes, the same time of day.
Anchors are never mutated: every step builds a new value with timedelta
or replace.

Month and day overflow clamps to the last valid day of the target month
(Jan 31 + 1 month is Feb 28/29, Feb 29 + 1 year is Feb 28). Values never
roll over into the following month.
"""

import calendar
import logging
from datetime import date, datetime, timedelta
from typing import Optional

from recurrence_engine.models.recurrence import RecurrenceFrequency, RecurrencePattern
from recurrence_engine.services.recurrence_validator import RecurrenceValidator
from recurrence_engine.utils.errors import DateOutOfRangeError, InvalidPatternError

logger = logging.getLogger(__name__)


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def add_months(value: date, months: int, day: Optional[int] = None) -> date:
    """
    Move a date forward by whole months, clamping the day to the target month.

    Args:
        value: Date or datetime to start from
        months: Number of months to add
        day: Target day of month; defaults to the day of value

    Returns:
        New date (or datetime) with the time of day preserved
    """
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    target_day = value.day if day is None else day
    last_day = days_in_month(year, month)
    if target_day > last_day:
        logger.debug(f"Clamping day {target_day} to {last_day} for {year}-{month:02d}")
        target_day = last_day
    return value.replace(year=year, month=month, day=target_day)


def sunday_based_weekday(value: date) -> int:
    """Weekday with Sunday=0 ... Saturday=6."""
    return value.isoweekday() % 7


def as_date(value: date) -> date:
    """Calendar date of a date or datetime."""
    if isinstance(value, datetime):
        return value.date()
    return value


def is_on_or_after_end(value: date, end_date: Optional[date]) -> bool:
    """True if value falls on or after the pattern's end date."""
    if end_date is None:
        return False
    return as_date(value) >= end_date


def ensure_valid(pattern: RecurrencePattern) -> None:
    """
    Fail fast on patterns that cannot produce dates.

    Raises:
        InvalidPatternError: If the pattern fails validation, or is a custom
            pattern without custom days
    """
    result = RecurrenceValidator.validate_pattern(pattern)
    if not result["valid"]:
        logger.warning(f"Refusing to generate dates for invalid pattern: {result['errors']}")
        raise InvalidPatternError(result["errors"])

    if pattern.frequency == RecurrenceFrequency.CUSTOM and not pattern.custom_days:
        raise InvalidPatternError(["Custom schedule requires at least one custom day"])


def _next_weekly(pattern: RecurrencePattern, from_date: date) -> date:
    if not pattern.days_of_week:
        return from_date + timedelta(weeks=pattern.interval)

    days = sorted(set(pattern.days_of_week))
    current = sunday_based_weekday(from_date)

    remaining = [d for d in days if d > current]
    if remaining:
        return from_date + timedelta(days=remaining[0] - current)

    # Nothing left this week: jump `interval` weeks from this week's Sunday
    week_start = from_date - timedelta(days=current)
    return week_start + timedelta(weeks=pattern.interval, days=days[0])


def _next_monthly(pattern: RecurrencePattern, from_date: date) -> date:
    return add_months(from_date, pattern.interval, day=pattern.day_of_month)


def _next_yearly(pattern: RecurrencePattern, from_date: date) -> date:
    year = from_date.year + pattern.interval
    month = from_date.month
    day = from_date.day
    if pattern.month_of_year:
        month = pattern.month_of_year
        if pattern.day_of_month:
            day = pattern.day_of_month
    return from_date.replace(year=year, month=month, day=min(day, days_in_month(year, month)))


def _next_custom(pattern: RecurrencePattern, from_date: date) -> date:
    # custom_days are days of the month; the cycle is `interval` months
    days = sorted(set(pattern.custom_days))
    last_day = days_in_month(from_date.year, from_date.month)

    for day in days:
        day = min(day, last_day)
        if day > from_date.day:
            return from_date.replace(day=day)

    return add_months(from_date, pattern.interval, day=days[0])


_STEPS = {
    RecurrenceFrequency.DAILY: lambda pattern, from_date: from_date + timedelta(days=pattern.interval),
    RecurrenceFrequency.WEEKLY: _next_weekly,
    RecurrenceFrequency.MONTHLY: _next_monthly,
    RecurrenceFrequency.YEARLY: _next_yearly,
    RecurrenceFrequency.CUSTOM: _next_custom,
}


def generate_next_instance(pattern: RecurrencePattern, from_date: date) -> date:
    """
    Generate the next occurrence strictly after from_date.

    Args:
        pattern: Validated recurrence pattern
        from_date: Anchor date or datetime

    Returns:
        The next occurrence, of the same type as from_date

    Raises:
        InvalidPatternError: If the pattern cannot produce dates
        DateOutOfRangeError: If the next occurrence is past the last
            representable date
    """
    ensure_valid(pattern)
    try:
        return _STEPS[pattern.frequency](pattern, from_date)
    except (OverflowError, ValueError) as e:
        logger.warning(f"Next occurrence after {from_date} is out of range: {e}")
        raise DateOutOfRangeError(from_date, str(e)) from e
