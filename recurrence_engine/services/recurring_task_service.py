"""
Recurring Task Service

Builds RecurringTaskInstance records for the task-creation pipeline and
decides when the next one is due. The service holds no task state: the
pipeline passes in the instances it has materialized so far.
"""

import logging
import uuid
from datetime import date, datetime
from typing import Callable, List, Optional

from recurrence_engine.models.recurrence import RecurrencePattern, RecurringTaskInstance
from recurrence_engine.services.instance_generator import as_date, generate_next_instance, is_on_or_after_end
from recurrence_engine.services.projection import get_upcoming_instances, remaining_occurrences

logger = logging.getLogger(__name__)


class RecurringTaskService:
    """Service to handle recurring task instance logic."""

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        """Initialize the recurring task service with the clock used for generatedAt stamps."""
        self.clock = clock

    def create_recurring_instance(
        self,
        parent_task_id: int,
        due_date: date,
        occurrence_number: int
    ) -> RecurringTaskInstance:
        """Create a new recurring task instance record (not persisted)."""
        return RecurringTaskInstance(
            instance_id=f"{parent_task_id}-{uuid.uuid4().hex[:12]}",
            parent_task_id=parent_task_id,
            due_date=due_date,
            generated_at=self.clock(),
            occurrence_number=occurrence_number,
            modified=False,
            completed=False
        )

    def get_upcoming_task_instances(
        self,
        parent_task_id: int,
        pattern: RecurrencePattern,
        count: int = 5,
        anchor: Optional[date] = None,
        consumed: int = 0
    ) -> List[RecurringTaskInstance]:
        """
        Project upcoming occurrences as instance records.

        Occurrence numbers continue from `consumed`, the number of instances
        the pipeline has already materialized for this task.
        """
        dates = get_upcoming_instances(pattern, count, anchor, consumed=consumed, clock=self.clock)
        return [
            self.create_recurring_instance(parent_task_id, due_date, consumed + offset)
            for offset, due_date in enumerate(dates, start=1)
        ]

    def should_generate_instance(
        self,
        instances: List[RecurringTaskInstance],
        pattern: Optional[RecurrencePattern],
        check_date: date
    ) -> bool:
        """
        Check if the pipeline should materialize another instance at check_date.

        Args:
            instances: Instances already materialized for the task
            pattern: The task's recurrence pattern
            check_date: The moment being checked (usually "now" in the caller)

        Returns:
            True if the next occurrence is due and allowed by the end conditions
        """
        if pattern is None:
            return False

        if remaining_occurrences(pattern, len(instances)) == 0:
            logger.debug(f"Max occurrences ({pattern.max_occurrences}) reached")
            return False

        if not instances:
            return not is_on_or_after_end(check_date, pattern.end_date)

        last_instance = max(instances, key=lambda instance: instance.due_date)
        next_due_date = generate_next_instance(pattern, last_instance.due_date)

        if is_on_or_after_end(next_due_date, pattern.end_date):
            logger.debug(f"Next occurrence {next_due_date} falls on or after end date {pattern.end_date}")
            return False

        if isinstance(next_due_date, datetime) != isinstance(check_date, datetime):
            return as_date(check_date) >= as_date(next_due_date)
        return check_date >= next_due_date
