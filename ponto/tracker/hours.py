"""Worked-hours arithmetic for daily records."""

import math
from datetime import date, datetime
from typing import Optional

from ponto.models import DailyRecord

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M:%S"

IN_PROGRESS = "in progress"


def parse_time(day: str, value: str) -> Optional[datetime]:
    """Combine a date and a time-of-day string into a timestamp.

    Args:
        day: Date string (YYYY-MM-DD).
        value: Time string (HH:MM:SS).

    Returns:
        Naive local datetime, or None if either part does not parse.
    """
    try:
        return datetime.strptime(f"{day} {value}", f"{DATE_FORMAT} {TIME_FORMAT}")
    except (TypeError, ValueError):
        return None


def compute_total_hours(
    record: DailyRecord, fallback_date: Optional[date] = None
) -> Optional[float]:
    """Calculate worked hours for a record.

    The lunch interval is subtracted only when both of its bounds parse.
    The duration is truncated to whole minutes before converting to hours.

    Args:
        record: Record to evaluate.
        fallback_date: Date used when the record has none.

    Returns:
        Worked hours, or None if start or end is missing or unparseable.
    """
    if record.start_time is None or record.end_time is None:
        return None

    day = record.date
    if day is None:
        day = (fallback_date or date.today()).strftime(DATE_FORMAT)

    start = parse_time(day, record.start_time)
    end = parse_time(day, record.end_time)
    if start is None or end is None:
        return None

    worked = end - start

    if record.lunch_start is not None and record.lunch_end is not None:
        lunch_start = parse_time(day, record.lunch_start)
        lunch_end = parse_time(day, record.lunch_end)
        if lunch_start is not None and lunch_end is not None:
            worked -= lunch_end - lunch_start

    # Truncate toward zero like a whole-minute count
    minutes = int(worked.total_seconds() / 60)
    return minutes / 60


def format_hours(hours: Optional[float]) -> str:
    """Render hours as ``{h}h{m}m``.

    Examples:
        >>> format_hours(8.0)
        '8h0m'
        >>> format_hours(7.5)
        '7h30m'
        >>> format_hours(None)
        'in progress'
    """
    if hours is None:
        return IN_PROGRESS

    sign = "-" if hours < 0 else ""
    total_minutes = math.floor(abs(hours) * 60 + 1e-6)
    whole, minutes = divmod(total_minutes, 60)
    return f"{sign}{whole}h{minutes}m"


def sum_hours(records: list[DailyRecord]) -> tuple[float, int]:
    """Sum recorded totals.

    Returns:
        Tuple of (total_hours, days_worked), counting only records with a total.
    """
    total = 0.0
    days = 0
    for record in records:
        if record.total_hours is not None:
            total += record.total_hours
            days += 1
    return total, days
