# tests/test_description.py

from __future__ import annotations

import pytest

from recurrence_engine.services.description import (
    DAY_NAMES,
    DAY_NAMES_FULL,
    MONTH_NAMES,
    get_ordinal,
    get_recurrence_description,
)

from .factories import make_pattern


@pytest.mark.parametrize(
    ("pattern", "expected"),
    [
        (make_pattern("daily", 1), "Daily"),
        (make_pattern("daily", 3), "Every 3 days"),
        (make_pattern("weekly", days_of_week=[1, 2, 3, 4, 5]), "Weekdays"),
        (make_pattern("weekly", days_of_week=[5, 4, 3, 2, 1]), "Weekdays"),
        (make_pattern("weekly", days_of_week=[0, 6]), "Weekends"),
        (make_pattern("weekly", days_of_week=[6, 0]), "Weekends"),
        (make_pattern("weekly", days_of_week=[0, 1, 2, 3, 4, 5, 6]), "Daily"),
        (make_pattern("weekly"), "Weekly"),
        (make_pattern("weekly", 2), "Every 2 weeks"),
        (make_pattern("weekly", days_of_week=[3, 1]), "Weekly on Mon, Wed"),
        (make_pattern("weekly", 2, days_of_week=[1, 3]), "Every 2 weeks on Mon, Wed"),
        (make_pattern("monthly"), "Monthly"),
        (make_pattern("monthly", day_of_month=15), "Monthly on the 15th"),
        (make_pattern("monthly", 3), "Every 3 months"),
        (make_pattern("monthly", 3, day_of_month=1), "Every 3 months on the 1st"),
        (make_pattern("yearly"), "Yearly"),
        (make_pattern("yearly", 2), "Every 2 years"),
        (make_pattern("yearly", month_of_year=1, day_of_month=15), "Yearly on Jan 15"),
        (make_pattern("custom"), "Custom schedule"),
    ],
)
def test_description(pattern, expected: str) -> None:
    assert get_recurrence_description(pattern) == expected


@pytest.mark.parametrize(
    ("n", "expected"),
    [
        (1, "1st"),
        (2, "2nd"),
        (3, "3rd"),
        (4, "4th"),
        (11, "11th"),
        (12, "12th"),
        (13, "13th"),
        (21, "21st"),
        (22, "22nd"),
        (23, "23rd"),
        (31, "31st"),
        (101, "101st"),
        (111, "111th"),
        (0, "0th"),
    ],
)
def test_ordinal(n: int, expected: str) -> None:
    assert get_ordinal(n) == expected


def test_name_tables() -> None:
    assert (len(DAY_NAMES), DAY_NAMES[0], DAY_NAMES[6]) == (7, "Sun", "Sat")
    assert (DAY_NAMES_FULL[0], DAY_NAMES_FULL[6]) == ("Sunday", "Saturday")
    assert (len(MONTH_NAMES), MONTH_NAMES[0], MONTH_NAMES[11]) == (12, "Jan", "Dec")
