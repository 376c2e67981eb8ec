"""Recurrence API schemas."""
from pydantic import BaseModel, ConfigDict, Field
from datetime import date, datetime
from typing import Dict, List, Optional

from recurrence_engine.models.recurrence import GeneratedInstance, RecurrencePattern, RecurrencePreset


class ValidationResponse(BaseModel):
    """Result of validating a pattern."""
    valid: bool
    errors: List[str] = []


class DescriptionResponse(BaseModel):
    """Human-readable rendering of a pattern."""
    description: str


class PreviewRequest(BaseModel):
    """Schema for requesting upcoming occurrences of a pattern."""
    pattern: RecurrencePattern
    anchor: datetime  # Project from this moment; never defaulted server-side
    count: Optional[int] = Field(None, ge=0)  # Falls back to RECURRENCE_PREVIEW_DEFAULT_COUNT
    consumed: int = Field(0, ge=0)  # Instances already materialized, for maxOccurrences


class PreviewResponse(BaseModel):
    """Schema for preview responses."""
    dates: List[datetime]
    description: str
    count: int


class RangeRequest(BaseModel):
    """Schema for generating the occurrences that fall inside a date range."""
    model_config = ConfigDict(populate_by_name=True)

    pattern: RecurrencePattern
    start_date: date = Field(alias="startDate")
    end_date: date = Field(alias="endDate")
    max_instances: Optional[int] = Field(None, ge=1, alias="maxInstances")  # Capped at RECURRENCE_RANGE_MAX_INSTANCES


class RangeResponse(BaseModel):
    """Schema for range generation responses."""
    instances: List[GeneratedInstance]
    count: int


class PresetResponse(BaseModel):
    """One entry of the preset picker."""
    id: RecurrencePreset
    label: str
    description: str
    pattern: RecurrencePattern


class LabelsResponse(BaseModel):
    """Display tables for the recurrence picker."""
    model_config = ConfigDict(populate_by_name=True)

    frequencies: Dict[str, str]
    day_names: List[str] = Field(alias="dayNames")
    day_names_full: List[str] = Field(alias="dayNamesFull")
    month_names: List[str] = Field(alias="monthNames")
