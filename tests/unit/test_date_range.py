"""Unit tests for calendar date-range selection."""

from datetime import date, timedelta

import pytest

from planner.models import DateRange
from planner.services.date_range import select

MAR_5 = date(2025, 3, 5)
MAR_10 = date(2025, 3, 10)
MAR_15 = date(2025, 3, 15)


def test_first_tap_starts_range():
    r = select(DateRange(), MAR_10)
    assert r.starts_at == MAR_10
    assert r.ends_at is None
    assert r.marked_dates == (MAR_10,)
    assert r.label == ""


def test_second_tap_completes_range():
    r = select(select(DateRange(), MAR_10), MAR_15)
    assert r.starts_at == MAR_10
    assert r.ends_at == MAR_15
    assert r.marked_dates == tuple(MAR_10 + timedelta(days=i) for i in range(6))
    assert r.label == "10 to 15 of March"


def test_tap_before_start_resets():
    r = select(select(DateRange(), MAR_10), MAR_5)
    assert r.starts_at == MAR_5
    assert r.ends_at is None
    assert r.marked_dates == (MAR_5,)


def test_tap_on_start_makes_single_day_range():
    r = select(select(DateRange(), MAR_10), MAR_10)
    assert r.is_complete
    assert r.starts_at == r.ends_at == MAR_10
    assert r.marked_dates == (MAR_10,)
    assert r.label == "10 to 10 of March"


def test_tap_after_single_day_range_resets():
    single = DateRange(starts_at=MAR_10, ends_at=MAR_10, marked_dates=(MAR_10,))
    r = select(single, MAR_15)
    assert r.starts_at == MAR_15
    assert r.ends_at is None


@pytest.mark.parametrize("tapped", [MAR_5, MAR_10, date(2025, 3, 12), MAR_15, date(2025, 4, 1)])
def test_tap_on_complete_range_always_resets(tapped):
    complete = select(select(DateRange(), MAR_10), MAR_15)
    r = select(complete, tapped)
    assert r.starts_at == tapped
    assert r.ends_at is None
    assert r.marked_dates == (tapped,)


def test_reset_is_idempotent():
    complete = select(select(DateRange(), MAR_10), MAR_15)
    assert select(complete, MAR_5) == select(complete, MAR_5)


def test_range_across_month_boundary():
    r = select(select(DateRange(), date(2025, 1, 30)), date(2025, 2, 2))
    assert r.marked_dates == (date(2025, 1, 30), date(2025, 1, 31), date(2025, 2, 1), date(2025, 2, 2))


def test_select_does_not_mutate_input():
    start = select(DateRange(), MAR_10)
    select(start, MAR_15)
    assert start.ends_at is None
