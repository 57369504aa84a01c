"""Property-based tests for worked-hours arithmetic.

**Feature: ponto**
"""

from datetime import date

from hypothesis import given, settings
from hypothesis import strategies as st

from ponto.models import DailyRecord
from ponto.tracker.hours import compute_total_hours, format_hours, parse_time, sum_hours


def _hhmmss(seconds: int) -> str:
    h, rem = divmod(seconds, 3600)
    m, s = divmod(rem, 60)
    return f"{h:02d}:{m:02d}:{s:02d}"


class TestLunchSubtraction:
    """
    *For any* start <= lunch_start <= lunch_end <= end on the same day,
    total_hours equals (end - start) - (lunch_end - lunch_start) in hours.
    """

    def test_standard_day(self):
        """09:00 to 18:00 with a 12:00-13:00 lunch is 8 hours."""
        record = DailyRecord(
            date="2024-03-04",
            start_time="09:00:00",
            lunch_start="12:00:00",
            lunch_end="13:00:00",
            end_time="18:00:00",
        )

        total = compute_total_hours(record)

        assert total == 8.0
        assert format_hours(total) == "8h0m"

    @given(
        minutes=st.lists(
            st.integers(min_value=0, max_value=23 * 60 + 59),
            min_size=4,
            max_size=4,
        )
    )
    @settings(max_examples=100)
    def test_total_matches_interval_arithmetic(self, minutes: list[int]):
        """
        *For any* ordered whole-minute times, the total is exact.
        """
        start, lunch_start, lunch_end, end = sorted(minutes)
        record = DailyRecord(
            date="2024-03-04",
            start_time=_hhmmss(start * 60),
            lunch_start=_hhmmss(lunch_start * 60),
            lunch_end=_hhmmss(lunch_end * 60),
            end_time=_hhmmss(end * 60),
        )

        expected = ((end - start) - (lunch_end - lunch_start)) / 60

        assert abs(compute_total_hours(record) - expected) < 1e-9

    @given(
        seconds=st.lists(
            st.integers(min_value=0, max_value=86399),
            min_size=4,
            max_size=4,
        )
    )
    @settings(max_examples=100)
    def test_total_accurate_to_the_minute(self, seconds: list[int]):
        """
        *For any* ordered times with seconds, the total is within a minute.
        """
        start, lunch_start, lunch_end, end = sorted(seconds)
        record = DailyRecord(
            date="2024-03-04",
            start_time=_hhmmss(start),
            lunch_start=_hhmmss(lunch_start),
            lunch_end=_hhmmss(lunch_end),
            end_time=_hhmmss(end),
        )

        expected = ((end - start) - (lunch_end - lunch_start)) / 3600

        assert abs(compute_total_hours(record) - expected) < 1 / 60

    def test_partial_lunch_is_not_subtracted(self):
        """A lunch start without an end skips the lunch term."""
        record = DailyRecord(
            date="2024-03-04",
            start_time="09:00:00",
            lunch_start="12:00:00",
            end_time="17:30:00",
        )

        assert compute_total_hours(record) == 8.5

    def test_unparseable_lunch_is_not_subtracted(self):
        record = DailyRecord(
            date="2024-03-04",
            start_time="09:00:00",
            lunch_start="noon",
            lunch_end="13:00:00",
            end_time="17:00:00",
        )

        assert compute_total_hours(record) == 8.0


class TestMissingOrInvalidTimes:
    """
    total_hours is present only when start and end both exist and parse.
    """

    def test_missing_end(self):
        record = DailyRecord(date="2024-03-04", start_time="09:00:00")
        assert compute_total_hours(record) is None

    def test_missing_start(self):
        record = DailyRecord(date="2024-03-04", end_time="18:00:00")
        assert compute_total_hours(record) is None

    def test_unparseable_end(self):
        record = DailyRecord(date="2024-03-04", start_time="09:00:00", end_time="6pm")
        assert compute_total_hours(record) is None

    def test_unparseable_date(self):
        record = DailyRecord(date="yesterday", start_time="09:00:00", end_time="18:00:00")
        assert compute_total_hours(record) is None

    def test_missing_date_uses_fallback(self):
        record = DailyRecord(start_time="09:00:00", end_time="10:15:00")
        assert compute_total_hours(record, fallback_date=date(2024, 3, 4)) == 1.25

    def test_parse_time(self):
        assert parse_time("2024-03-04", "09:30:15").hour == 9
        assert parse_time("2024-03-04", "25:00:00") is None


class TestFormatHours:
    """Durations render as {hours}h{minutes}m with minutes floored."""

    def test_whole_hours(self):
        assert format_hours(8.0) == "8h0m"

    def test_half_hour(self):
        assert format_hours(7.5) == "7h30m"

    def test_minutes_are_floored(self):
        assert format_hours(1 + 59.9 / 60) == "1h59m"

    def test_in_progress(self):
        assert format_hours(None) == "in progress"

    def test_negative(self):
        assert format_hours(-0.5) == "-0h30m"

    @given(total_minutes=st.integers(min_value=0, max_value=100000))
    @settings(max_examples=100)
    def test_whole_minute_totals_render_exactly(self, total_minutes: int):
        """
        *For any* whole-minute total, the rendered minutes are exact.
        """
        h, m = divmod(total_minutes, 60)
        assert format_hours(total_minutes / 60) == f"{h}h{m}m"


class TestSumHours:
    def test_only_records_with_total_count(self):
        records = [
            DailyRecord(date="2024-03-04", total_hours=8.0),
            DailyRecord(date="2024-03-05", start_time="09:00:00"),
            DailyRecord(date="2024-03-06", total_hours=6.5),
        ]

        assert sum_hours(records) == (14.5, 2)

    def test_empty(self):
        assert sum_hours([]) == (0.0, 0)
