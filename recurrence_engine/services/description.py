"""Human-readable descriptions of recurrence patterns."""
from recurrence_engine.models.recurrence import RecurrenceFrequency, RecurrencePattern

DAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
DAY_NAMES_FULL = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]
MONTH_NAMES = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]

WEEKDAYS = {1, 2, 3, 4, 5}
WEEKENDS = {0, 6}


def get_ordinal(n: int) -> str:
    """Get a number with its English ordinal suffix (1st, 2nd, 3rd, 11th, 21st...)."""
    last_two = abs(n) % 100
    if 11 <= last_two <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(last_two % 10, "th")
    return f"{n}{suffix}"


def _every(interval: int, unit: str, single: str) -> str:
    return single if interval == 1 else f"Every {interval} {unit}"


def _describe_weekly(pattern: RecurrencePattern) -> str:
    if not pattern.days_of_week:
        return _every(pattern.interval, "weeks", "Weekly")

    days = set(pattern.days_of_week)
    if len(days) == 7:
        return "Daily"
    if days == WEEKDAYS:
        return "Weekdays"
    if days == WEEKENDS:
        return "Weekends"

    names = ", ".join(DAY_NAMES[d] for d in sorted(days))
    return f"{_every(pattern.interval, 'weeks', 'Weekly')} on {names}"


def _describe_monthly(pattern: RecurrencePattern) -> str:
    base = _every(pattern.interval, "months", "Monthly")
    if pattern.day_of_month:
        return f"{base} on the {get_ordinal(pattern.day_of_month)}"
    return base


def _describe_yearly(pattern: RecurrencePattern) -> str:
    base = _every(pattern.interval, "years", "Yearly")
    if pattern.month_of_year and pattern.day_of_month:
        return f"{base} on {MONTH_NAMES[pattern.month_of_year - 1]} {pattern.day_of_month}"
    return base


def get_recurrence_description(pattern: RecurrencePattern) -> str:
    """
    Get a human-readable description of the recurrence pattern.

    Examples: "Daily", "Every 3 days", "Weekdays", "Weekly on Mon, Wed",
    "Monthly on the 15th", "Yearly on Jan 15", "Custom schedule".
    """
    if pattern.frequency == RecurrenceFrequency.DAILY:
        return _every(pattern.interval, "days", "Daily")
    if pattern.frequency == RecurrenceFrequency.WEEKLY:
        return _describe_weekly(pattern)
    if pattern.frequency == RecurrenceFrequency.MONTHLY:
        return _describe_monthly(pattern)
    if pattern.frequency == RecurrenceFrequency.YEARLY:
        return _describe_yearly(pattern)
    return "Custom schedule"
