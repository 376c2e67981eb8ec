"""API schemas for the recurrence service."""

from .recurrence import (
    DescriptionResponse,
    LabelsResponse,
    PresetResponse,
    PreviewRequest,
    PreviewResponse,
    RangeRequest,
    RangeResponse,
    ValidationResponse,
)

__all__ = [
    "DescriptionResponse",
    "LabelsResponse",
    "PresetResponse",
    "PreviewRequest",
    "PreviewResponse",
    "RangeRequest",
    "RangeResponse",
    "ValidationResponse",
]
