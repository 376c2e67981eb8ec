"""Recurrence presets and labels offered by the recurrence picker."""
from typing import Any, Dict, List, Union

from recurrence_engine.models.recurrence import RecurrenceFrequency, RecurrencePattern, RecurrencePreset
from recurrence_engine.utils.errors import UnknownPresetError

FREQUENCY_LABELS: Dict[str, str] = {
    "daily": "Day(s)",
    "weekly": "Week(s)",
    "monthly": "Month(s)",
    "yearly": "Year(s)",
    "custom": "Custom",
}

_PRESET_PATTERNS: Dict[RecurrencePreset, Dict[str, Any]] = {
    RecurrencePreset.EVERY_DAY: {"frequency": RecurrenceFrequency.DAILY, "interval": 1},
    RecurrencePreset.EVERY_WEEKDAY: {"frequency": RecurrenceFrequency.WEEKLY, "interval": 1, "days_of_week": (1, 2, 3, 4, 5)},
    RecurrencePreset.EVERY_WEEK: {"frequency": RecurrenceFrequency.WEEKLY, "interval": 1},
    RecurrencePreset.EVERY_2_WEEKS: {"frequency": RecurrenceFrequency.WEEKLY, "interval": 2},
    RecurrencePreset.EVERY_MONTH: {"frequency": RecurrenceFrequency.MONTHLY, "interval": 1},
    RecurrencePreset.EVERY_QUARTER: {"frequency": RecurrenceFrequency.MONTHLY, "interval": 3},
    RecurrencePreset.EVERY_YEAR: {"frequency": RecurrenceFrequency.YEARLY, "interval": 1},
    # Rule body (customDays) is filled in by the caller
    RecurrencePreset.CUSTOM: {"frequency": RecurrenceFrequency.CUSTOM, "interval": 1},
}

_PRESET_LABELS: Dict[RecurrencePreset, tuple] = {
    RecurrencePreset.EVERY_DAY: ("Daily", "Repeats every day"),
    RecurrencePreset.EVERY_WEEKDAY: ("Weekdays", "Monday through Friday"),
    RecurrencePreset.EVERY_WEEK: ("Weekly", "Repeats every week"),
    RecurrencePreset.EVERY_2_WEEKS: ("Bi-weekly", "Every two weeks"),
    RecurrencePreset.EVERY_MONTH: ("Monthly", "Repeats every month"),
    RecurrencePreset.EVERY_QUARTER: ("Quarterly", "Every three months"),
    RecurrencePreset.EVERY_YEAR: ("Yearly", "Repeats every year"),
    RecurrencePreset.CUSTOM: ("Custom", "Custom schedule"),
}


def get_default_pattern() -> RecurrencePattern:
    """Get the default recurrence pattern (daily, interval 1)."""
    return RecurrencePattern(frequency=RecurrenceFrequency.DAILY, interval=1)


def get_preset(preset: Union[RecurrencePreset, str]) -> RecurrencePreset:
    """
    Resolve a preset name strictly.

    Raises:
        UnknownPresetError: If the name is not a known preset
    """
    try:
        return RecurrencePreset(preset)
    except ValueError:
        raise UnknownPresetError(str(preset))


def get_pattern_from_preset(preset: Union[RecurrencePreset, str]) -> RecurrencePattern:
    """
    Convert a named shortcut to its canonical pattern.

    Unknown names fall back to the custom preset.
    """
    try:
        resolved = get_preset(preset)
    except UnknownPresetError:
        resolved = RecurrencePreset.CUSTOM
    return RecurrencePattern(**_PRESET_PATTERNS[resolved])


def list_presets() -> List[Dict[str, Any]]:
    """All presets with their display label, description and pattern, in picker order."""
    options = []
    for preset in RecurrencePreset:
        label, description = _PRESET_LABELS[preset]
        options.append({
            "id": preset,
            "label": label,
            "description": description,
            "pattern": get_pattern_from_preset(preset),
        })
    return options
