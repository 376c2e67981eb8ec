"""Recurrence models for recurring tasks."""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from datetime import date, datetime
from enum import Enum
from typing import Optional, Tuple, Union


class RecurrenceFrequency(str, Enum):
    """How often a recurring task repeats"""
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    CUSTOM = "custom"


class RecurrencePreset(str, Enum):
    """Named shortcuts offered by the recurrence picker"""
    EVERY_DAY = "every_day"
    EVERY_WEEKDAY = "every_weekday"
    EVERY_WEEK = "every_week"
    EVERY_2_WEEKS = "every_2_weeks"
    EVERY_MONTH = "every_month"
    EVERY_QUARTER = "every_quarter"
    EVERY_YEAR = "every_year"
    CUSTOM = "custom"


class RecurrencePattern(BaseModel):
    """
    Abstract recurrence rule for a task.

    The model only enforces field types. Range and combination checks are
    left to RecurrenceValidator so the picker UI can report every problem
    at once instead of failing on the first one.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    frequency: RecurrenceFrequency
    interval: int = Field(default=1)  # Every N days/weeks/months/years
    days_of_week: Optional[Tuple[int, ...]] = Field(default=None, alias="daysOfWeek")  # 0-6 (Sun-Sat)
    day_of_month: Optional[int] = Field(default=None, alias="dayOfMonth")  # 1-31
    month_of_year: Optional[int] = Field(default=None, alias="monthOfYear")  # 1-12
    end_date: Optional[date] = Field(default=None, alias="endDate")
    max_occurrences: Optional[int] = Field(default=None, alias="maxOccurrences")
    custom_days: Optional[Tuple[int, ...]] = Field(default=None, alias="customDays")

    @field_validator("end_date", mode="before")
    @classmethod
    def _end_date_to_date(cls, value):
        """Reduce datetimes and ISO datetime strings to their calendar date."""
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, str) and "T" in value:
            return datetime.fromisoformat(value.replace('Z', '+00:00')).date()
        return value

    def to_wire(self) -> dict:
        """Serialize with camelCase keys, dropping unset optional fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class RecurringTaskInstance(BaseModel):
    """One concrete occurrence of a recurring task, handed to the task-creation pipeline."""

    model_config = ConfigDict(populate_by_name=True)

    instance_id: str = Field(alias="instanceId")
    parent_task_id: int = Field(alias="parentTaskId")
    due_date: Union[datetime, date] = Field(alias="dueDate")
    generated_at: datetime = Field(alias="generatedAt")
    occurrence_number: int = Field(ge=1, alias="occurrenceNumber")
    modified: bool = False  # User customized this instance
    completed: bool = False


class GeneratedInstance(BaseModel):
    """Result of range generation: a due date and its position in the series."""

    model_config = ConfigDict(populate_by_name=True)

    due_date: Union[datetime, date] = Field(alias="dueDate")
    occurrence_number: int = Field(ge=1, alias="occurrenceNumber")
    is_valid: bool = Field(default=True, alias="isValid")
    reason: Optional[str] = None
