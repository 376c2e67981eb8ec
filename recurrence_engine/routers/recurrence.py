"""Recurrence router exposing the pattern engine to the recurrence picker UI."""
from fastapi import APIRouter, Body, Depends, HTTPException, status
from typing import Any, Dict, List

from recurrence_engine.config import Settings, get_settings
from recurrence_engine.models.recurrence import RecurrencePattern
from recurrence_engine.schemas.recurrence import (
    DescriptionResponse,
    LabelsResponse,
    PresetResponse,
    PreviewRequest,
    PreviewResponse,
    RangeRequest,
    RangeResponse,
    ValidationResponse,
)
from recurrence_engine.services.description import DAY_NAMES, DAY_NAMES_FULL, MONTH_NAMES, get_recurrence_description
from recurrence_engine.services.projection import generate_instances_for_range, get_upcoming_instances
from recurrence_engine.services.recurrence_presets import (
    FREQUENCY_LABELS,
    get_pattern_from_preset,
    get_preset,
    list_presets,
)
from recurrence_engine.services.recurrence_validator import RecurrenceValidator
from recurrence_engine.utils.errors import (
    DateOutOfRangeError,
    InvalidPatternError,
    UnknownPresetError,
    create_error_response,
)
from recurrence_engine.utils.logger import recurrence_logger

router = APIRouter(tags=["Recurrence"])  # No prefix since main.py adds /api prefix


def _invalid_pattern(error: InvalidPatternError, pattern: RecurrencePattern) -> HTTPException:
    recurrence_logger.warning("Rejected recurrence pattern", errors=error.errors, pattern=pattern.to_wire())
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail=create_error_response(error)
    )


def _out_of_range(error: DateOutOfRangeError, pattern: RecurrencePattern) -> HTTPException:
    recurrence_logger.warning("Recurrence left the supported calendar", reason=error.message, pattern=pattern.to_wire())
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail=create_error_response(error)
    )


@router.post("/recurrence/validate", response_model=ValidationResponse)
async def validate_recurrence(data: Dict[str, Any] = Body(...)):
    """Validate a pattern. Problems, including type errors, are reported in the body, never as an error status."""
    return RecurrenceValidator.validate_pattern_data(data)


@router.post("/recurrence/describe", response_model=DescriptionResponse)
async def describe_recurrence(pattern: RecurrencePattern):
    """Render a pattern as human text."""
    return {"description": get_recurrence_description(pattern)}


@router.post("/recurrence/preview", response_model=PreviewResponse)
async def preview_recurrence(
    request: PreviewRequest,
    settings: Settings = Depends(get_settings),
):
    """Project the next occurrences of a pattern from the given anchor."""
    count = request.count if request.count is not None else settings.preview_default_count
    count = min(count, settings.preview_max_count)

    try:
        dates = get_upcoming_instances(request.pattern, count, request.anchor, consumed=request.consumed)
    except InvalidPatternError as e:
        raise _invalid_pattern(e, request.pattern)
    except DateOutOfRangeError as e:
        raise _out_of_range(e, request.pattern)

    recurrence_logger.info(
        "Generated recurrence preview",
        frequency=request.pattern.frequency.value,
        requested=count,
        returned=len(dates)
    )

    return {
        "dates": dates,
        "description": get_recurrence_description(request.pattern),
        "count": len(dates)
    }


@router.post("/recurrence/range", response_model=RangeResponse)
async def range_recurrence(
    request: RangeRequest,
    settings: Settings = Depends(get_settings),
):
    """List the occurrences of a pattern inside a date range, starting at startDate."""
    if request.end_date < request.start_date:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="endDate must not be before startDate"
        )

    max_instances = request.max_instances or settings.range_max_instances
    max_instances = min(max_instances, settings.range_max_instances)

    try:
        instances = generate_instances_for_range(
            request.pattern,
            request.start_date,
            request.end_date,
            max_instances=max_instances
        )
    except InvalidPatternError as e:
        raise _invalid_pattern(e, request.pattern)
    except DateOutOfRangeError as e:
        raise _out_of_range(e, request.pattern)

    return {
        "instances": instances,
        "count": len(instances)
    }


@router.get("/recurrence/presets", response_model=List[PresetResponse], response_model_exclude_none=True)
async def get_presets():
    """List the presets offered by the recurrence picker."""
    return list_presets()


@router.get("/recurrence/presets/{preset}", response_model=RecurrencePattern, response_model_exclude_none=True)
async def get_preset_pattern(preset: str):
    """Get the canonical pattern for a preset."""
    try:
        resolved = get_preset(preset)
    except UnknownPresetError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=create_error_response(e)
        )
    return get_pattern_from_preset(resolved)


@router.get("/recurrence/labels", response_model=LabelsResponse)
async def get_labels():
    """Display tables used by the recurrence picker."""
    return {
        "frequencies": FREQUENCY_LABELS,
        "day_names": DAY_NAMES,
        "day_names_full": DAY_NAMES_FULL,
        "month_names": MONTH_NAMES,
    }
