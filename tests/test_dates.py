"""Property-based tests for calendar helpers.

**Feature: micro-diary**
"""

import time as time_module
from datetime import date, datetime, time, timedelta, timezone

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from microdiary.engine.dates import (
    add_days,
    days_between,
    is_same_day,
    local_day,
    start_of_day,
    subtract_years,
)
from microdiary.engine.periods import lookback_day, range_bounds


class TestStartOfDay:
    """
    **Feature: micro-diary, Property 1: Local Midnight Normalization**

    *For any* timestamp, start_of_day returns midnight of the same
    local calendar day.
    """

    @given(
        moment=st.datetimes(
            min_value=datetime(2000, 1, 1),
            max_value=datetime(2099, 12, 31),
        )
    )
    @settings(max_examples=100)
    def test_naive_moment(self, moment: datetime):
        midnight = start_of_day(moment)

        assert midnight.time() == time.min
        assert midnight.date() == moment.date()
        assert midnight.tzinfo is None

    def test_aware_moment_stays_aware(self):
        moment = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)
        midnight = start_of_day(moment)

        assert midnight.tzinfo is not None
        assert local_day(midnight) == local_day(moment)

    def test_idempotent(self):
        moment = datetime(2024, 3, 10, 23, 59, 59)
        assert start_of_day(start_of_day(moment)) == start_of_day(moment)


class TestAddDays:
    """
    **Feature: micro-diary, Property 2: Calendar Day Offsets**

    *For any* day and offset, add_days moves by whole calendar days.
    """

    @given(
        day=st.dates(min_value=date(2000, 1, 1), max_value=date(2099, 12, 31)),
        offset=st.integers(min_value=-400, max_value=400),
    )
    @settings(max_examples=100)
    def test_round_trip(self, day: date, offset: int):
        assert add_days(add_days(day, offset), -offset) == day

    def test_accepts_timestamps(self):
        assert add_days(datetime(2024, 3, 1, 23, 0), -1) == date(2024, 2, 29)

    def test_crosses_leap_day(self):
        assert add_days(date(2024, 3, 1), -365) == date(2023, 3, 2)
        assert add_days(date(2023, 3, 1), -365) == date(2022, 3, 1)
        assert add_days(datetime(2024, 3, 31, 0, 30), 1) == date(2024, 4, 1)


class TestIsSameDay:
    """
    **Feature: micro-diary, Property 3: Calendar Day Equality**
    """

    def test_same_day_different_times(self):
        assert is_same_day(datetime(2024, 5, 1, 0, 0), datetime(2024, 5, 1, 23, 59))

    def test_date_and_datetime(self):
        assert is_same_day(date(2024, 5, 1), datetime(2024, 5, 1, 8, 0))

    def test_different_days(self):
        assert not is_same_day(datetime(2024, 5, 1, 23, 59), datetime(2024, 5, 2, 0, 0))

    def test_none_never_matches(self):
        assert not is_same_day(None, date(2024, 5, 1))
        assert not is_same_day(date(2024, 5, 1), None)
        assert not is_same_day(None, None)


class TestDaysBetween:
    """
    **Feature: micro-diary, Property 4: Inclusive Day Ranges**
    """

    @given(
        start=st.dates(min_value=date(2000, 1, 1), max_value=date(2099, 1, 1)),
        length=st.integers(min_value=1, max_value=400),
    )
    @settings(max_examples=50)
    def test_length_and_order(self, start: date, length: int):
        end = start + timedelta(days=length - 1)
        days = days_between(start, end)

        assert len(days) == length
        assert days[0] == start
        assert days[-1] == end
        assert days == sorted(set(days))

    def test_empty_when_reversed(self):
        assert days_between(date(2024, 1, 2), date(2024, 1, 1)) == []


class TestSubtractYears:
    def test_regular_day(self):
        assert subtract_years(date(2025, 3, 1), 1) == date(2024, 3, 1)

    def test_leap_day_falls_back(self):
        assert subtract_years(date(2024, 2, 29), 1) == date(2023, 2, 28)

    def test_leap_day_to_leap_year(self):
        assert subtract_years(date(2024, 2, 29), 4) == date(2020, 2, 29)


@pytest.fixture
def new_york(monkeypatch):
    """Run with the local zone set to America/New_York."""
    if not hasattr(time_module, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", "America/New_York")
    time_module.tzset()
    yield
    monkeypatch.undo()
    time_module.tzset()


@pytest.mark.usefixtures("new_york")
class TestDaylightSavingTransitions:
    """
    **Feature: micro-diary, Property 20: DST-Stable Day Boundaries**

    *For any* timestamp on a DST transition day, day boundaries and
    lookbacks follow the local calendar, not elapsed hours.
    """

    @pytest.mark.parametrize(
        "moment, midnight_utc",
        [
            # Clocks spring forward at 02:00 local; midnight is still EST
            (datetime(2024, 3, 10, 18, 0, tzinfo=timezone.utc),
             datetime(2024, 3, 10, 5, 0, tzinfo=timezone.utc)),
            # Clocks fall back at 02:00 local; midnight is still EDT
            (datetime(2024, 11, 3, 18, 0, tzinfo=timezone.utc),
             datetime(2024, 11, 3, 4, 0, tzinfo=timezone.utc)),
        ],
    )
    def test_start_of_day(self, moment: datetime, midnight_utc: datetime):
        midnight = start_of_day(moment)

        assert midnight == midnight_utc
        assert midnight.time() == time.min
        assert midnight.date() == local_day(moment)

    def test_short_and_long_days(self):
        spring = start_of_day(datetime(2024, 3, 11, 18, 0, tzinfo=timezone.utc))
        spring_before = start_of_day(datetime(2024, 3, 10, 18, 0, tzinfo=timezone.utc))
        fall = start_of_day(datetime(2024, 11, 4, 18, 0, tzinfo=timezone.utc))
        fall_before = start_of_day(datetime(2024, 11, 3, 18, 0, tzinfo=timezone.utc))

        assert spring - spring_before == timedelta(hours=23)
        assert fall - fall_before == timedelta(hours=25)

    @pytest.mark.parametrize(
        "moment, today",
        [
            # 23:30 local on the transition day, already the next day in UTC
            (datetime(2024, 3, 11, 3, 30, tzinfo=timezone.utc), date(2024, 3, 10)),
            (datetime(2024, 11, 4, 4, 30, tzinfo=timezone.utc), date(2024, 11, 3)),
        ],
    )
    def test_lookback_and_range(self, moment: datetime, today: date):
        assert local_day(moment) == today
        assert lookback_day(moment, 1) == today - timedelta(days=1)
        assert lookback_day(moment, 7) == today - timedelta(days=7)
        assert range_bounds(moment, 7) == (today - timedelta(days=6), today)

    def test_naive_times_across_transition(self):
        assert add_days(datetime(2024, 3, 10, 1, 30), 1) == date(2024, 3, 11)
        assert start_of_day(datetime(2024, 11, 3, 1, 30)) == datetime(2024, 11, 3)
