# tests/test_recurring_task_service.py

from __future__ import annotations

from datetime import date, datetime

import pytest
from pydantic import ValidationError

from recurrence_engine.services.recurring_task_service import RecurringTaskService

from .factories import FIXED_NOW, make_pattern


@pytest.fixture()
def service(fixed_clock) -> RecurringTaskService:
    return RecurringTaskService(clock=fixed_clock)


def test_create_instance(service: RecurringTaskService) -> None:
    instance = service.create_recurring_instance(42, datetime(2024, 1, 16, 10, 0), 1)

    assert instance.instance_id.startswith("42-")
    assert instance.parent_task_id == 42
    assert instance.generated_at == FIXED_NOW
    assert instance.occurrence_number == 1
    assert instance.modified is False
    assert instance.completed is False


def test_instance_ids_are_unique(service: RecurringTaskService) -> None:
    a = service.create_recurring_instance(1, date(2024, 1, 16), 1)
    b = service.create_recurring_instance(1, date(2024, 1, 16), 1)
    assert a.instance_id != b.instance_id


def test_occurrence_number_is_one_based(service: RecurringTaskService) -> None:
    with pytest.raises(ValidationError):
        service.create_recurring_instance(1, date(2024, 1, 16), 0)


def test_instance_serializes_with_wire_names(service: RecurringTaskService) -> None:
    data = service.create_recurring_instance(7, date(2024, 1, 16), 2).model_dump(by_alias=True)
    assert {"instanceId", "parentTaskId", "dueDate", "generatedAt", "occurrenceNumber"} <= set(data)


def test_upcoming_instances_continue_numbering(service: RecurringTaskService, monday: datetime) -> None:
    instances = service.get_upcoming_task_instances(7, make_pattern("daily"), 3, monday, consumed=2)

    assert [i.occurrence_number for i in instances] == [3, 4, 5]
    assert [i.due_date for i in instances] == [
        datetime(2024, 1, 16, 10, 0),
        datetime(2024, 1, 17, 10, 0),
        datetime(2024, 1, 18, 10, 0),
    ]


def test_upcoming_instances_respect_max_occurrences(service: RecurringTaskService, monday: datetime) -> None:
    pattern = make_pattern("daily", max_occurrences=4)
    assert len(service.get_upcoming_task_instances(7, pattern, 5, monday, consumed=2)) == 2


def test_upcoming_instances_use_service_clock(service: RecurringTaskService) -> None:
    instances = service.get_upcoming_task_instances(7, make_pattern("daily"), 1)
    assert instances[0].due_date == datetime(2024, 1, 16, 10, 0)


def test_should_generate_without_pattern(service: RecurringTaskService, monday: datetime) -> None:
    assert service.should_generate_instance([], None, monday) is False


def test_should_generate_first_instance(service: RecurringTaskService, monday: datetime) -> None:
    assert service.should_generate_instance([], make_pattern("daily"), monday) is True


def test_should_not_generate_after_end_date(service: RecurringTaskService, monday: datetime) -> None:
    pattern = make_pattern("daily", end_date=date(2024, 1, 15))
    assert service.should_generate_instance([], pattern, monday) is False


def test_should_not_generate_past_max_occurrences(service: RecurringTaskService, monday: datetime) -> None:
    pattern = make_pattern("daily", max_occurrences=1)
    existing = [service.create_recurring_instance(1, monday, 1)]
    assert service.should_generate_instance(existing, pattern, datetime(2024, 2, 1)) is False


def test_should_generate_once_next_due_date_arrives(service: RecurringTaskService, monday: datetime) -> None:
    pattern = make_pattern("daily")
    existing = [service.create_recurring_instance(1, monday, 1)]

    assert service.should_generate_instance(existing, pattern, datetime(2024, 1, 15, 12, 0)) is False
    assert service.should_generate_instance(existing, pattern, datetime(2024, 1, 16, 10, 0)) is True


def test_should_use_latest_instance(service: RecurringTaskService) -> None:
    pattern = make_pattern("weekly")
    existing = [
        service.create_recurring_instance(1, date(2024, 1, 8), 2),
        service.create_recurring_instance(1, date(2024, 1, 1), 1),
    ]
    assert service.should_generate_instance(existing, pattern, date(2024, 1, 14)) is False
    assert service.should_generate_instance(existing, pattern, date(2024, 1, 15)) is True


def test_should_not_generate_when_next_due_hits_end(service: RecurringTaskService) -> None:
    pattern = make_pattern("daily", end_date=date(2024, 1, 16))
    existing = [service.create_recurring_instance(1, date(2024, 1, 15), 1)]
    assert service.should_generate_instance(existing, pattern, date(2024, 1, 20)) is False


def test_should_generate_compares_mixed_date_types(service: RecurringTaskService) -> None:
    pattern = make_pattern("daily")
    existing = [service.create_recurring_instance(1, date(2024, 1, 15), 1)]
    assert service.should_generate_instance(existing, pattern, datetime(2024, 1, 16, 0, 1)) is True
