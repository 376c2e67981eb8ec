# tests/test_pattern_equality.py

from __future__ import annotations

from datetime import date

from recurrence_engine.services.pattern_equality import patterns_equal

from .factories import make_pattern


def test_both_absent_are_equal() -> None:
    assert patterns_equal(None, None) is True


def test_one_absent_is_not_equal() -> None:
    a = make_pattern("daily")
    assert patterns_equal(a, None) is False
    assert patterns_equal(None, a) is False


def test_identical_patterns() -> None:
    assert patterns_equal(make_pattern("daily"), make_pattern("daily")) is True


def test_frequency_and_interval_differences() -> None:
    assert patterns_equal(make_pattern("daily"), make_pattern("weekly")) is False
    assert patterns_equal(make_pattern("daily", 1), make_pattern("daily", 2)) is False


def test_comparison_is_deep() -> None:
    assert patterns_equal(
        make_pattern("weekly", days_of_week=[1, 3]),
        make_pattern("weekly", days_of_week=[1, 5]),
    ) is False
    assert patterns_equal(
        make_pattern("monthly", day_of_month=1),
        make_pattern("monthly", day_of_month=15),
    ) is False
    assert patterns_equal(
        make_pattern("daily", end_date=date(2024, 12, 31)),
        make_pattern("daily"),
    ) is False


def test_day_order_does_not_matter() -> None:
    assert patterns_equal(
        make_pattern("weekly", days_of_week=[5, 1, 3]),
        make_pattern("weekly", days_of_week=[1, 3, 5]),
    ) is True


def test_empty_days_equal_absent_days() -> None:
    assert patterns_equal(make_pattern("weekly", days_of_week=[]), make_pattern("weekly")) is True
