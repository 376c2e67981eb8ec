"""
Projection Engine

Drives the instance generator to produce bounded, ordered sequences of
upcoming occurrences. Every call is pure: the only notion of "now" is the
anchor (or clock) the caller passes in, and the only notion of how many
occurrences were already used up is the `consumed` count the caller tracks.
"""

import logging
from datetime import date, datetime
from typing import Callable, List, Optional

from recurrence_engine.models.recurrence import GeneratedInstance, RecurrencePattern
from recurrence_engine.services.instance_generator import (
    as_date,
    ensure_valid,
    generate_next_instance,
    is_on_or_after_end,
)
from recurrence_engine.utils.errors import DateOutOfRangeError

logger = logging.getLogger(__name__)


def remaining_occurrences(pattern: RecurrencePattern, consumed: int = 0) -> Optional[int]:
    """How many more instances the pattern allows, or None when unbounded."""
    if pattern.max_occurrences is None:
        return None
    return max(0, pattern.max_occurrences - consumed)


def get_upcoming_instances(
    pattern: RecurrencePattern,
    count: int = 5,
    anchor: Optional[date] = None,
    *,
    consumed: int = 0,
    clock: Callable[[], datetime] = datetime.now,
) -> List[date]:
    """
    Get upcoming occurrences for preview.

    Args:
        pattern: Validated recurrence pattern
        count: Maximum number of dates to return
        anchor: Date to project from (not itself included); defaults to clock()
        consumed: Instances already materialized for this pattern
        clock: Source of the current time when anchor is omitted

    Returns:
        Ordered list of at most `count` occurrence dates

    Raises:
        InvalidPatternError: If the pattern cannot produce dates
    """
    ensure_valid(pattern)

    if anchor is None:
        anchor = clock()

    limit = count
    remaining = remaining_occurrences(pattern, consumed)
    if remaining is not None:
        limit = min(limit, remaining)

    instances: List[date] = []
    current = anchor
    while len(instances) < limit:
        current = generate_next_instance(pattern, current)
        if is_on_or_after_end(current, pattern.end_date):
            logger.debug(f"Projection stopped at end date {pattern.end_date} after {len(instances)} instances")
            break
        instances.append(current)

    return instances


def _not_after(value: date, limit: date) -> bool:
    # date and datetime do not compare; fall back to calendar dates when mixed
    if isinstance(value, datetime) != isinstance(limit, datetime):
        return as_date(value) <= as_date(limit)
    return value <= limit


def generate_instances_for_range(
    pattern: RecurrencePattern,
    start_date: date,
    end_date: date,
    max_instances: int = 100,
) -> List[GeneratedInstance]:
    """
    Generate instances for a date range.

    The start date is occurrence 1. Stepping continues while the current
    date is within the range, the pattern's end date has not been reached
    and the occurrence cap (max_occurrences, else max_instances) allows it.

    Args:
        pattern: Validated recurrence pattern
        start_date: First occurrence
        end_date: Last date (inclusive) the range may cover
        max_instances: Cap used when the pattern has no max_occurrences

    Returns:
        List of GeneratedInstance in date order
    """
    ensure_valid(pattern)

    max_allowed = pattern.max_occurrences or max_instances
    instances: List[GeneratedInstance] = []
    current = start_date
    occurrence_number = 1

    while _not_after(current, end_date) and len(instances) < max_allowed:
        if is_on_or_after_end(current, pattern.end_date):
            break

        instances.append(GeneratedInstance(
            due_date=current,
            occurrence_number=occurrence_number,
            is_valid=True,
        ))

        try:
            current = generate_next_instance(pattern, current)
        except DateOutOfRangeError:
            # No representable date follows, so none can fall inside the range
            logger.debug(f"Range stopped at the last representable date after {len(instances)} instances")
            break
        occurrence_number += 1

    return instances
