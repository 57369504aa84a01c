"""Daily, weekly and monthly hour reports."""

from calendar import monthrange
from datetime import date, timedelta

from ponto.db.store import find_by_date
from ponto.models import DailyRecord, PeriodReport
from ponto.tracker.hours import DATE_FORMAT, sum_hours


def week_start(today: date) -> date:
    """Get the Monday of the week containing a date."""
    return today - timedelta(days=today.weekday())


def daily_report(records: list[DailyRecord], today: date) -> PeriodReport:
    """Build the report for a single day.

    Args:
        records: All stored records.
        today: Day to report.

    Returns:
        Report holding the day's record, or no records if there is none.
    """
    record = find_by_date(records, today.strftime(DATE_FORMAT))
    selected = [record] if record is not None else []
    total, days = sum_hours(selected)

    return PeriodReport(
        title=f"Daily report - {today.strftime(DATE_FORMAT)}",
        start=today,
        end=today,
        records=selected,
        total_hours=total,
        days_worked=days,
    )


def weekly_report(records: list[DailyRecord], today: date) -> PeriodReport:
    """Build the report for the Monday..Sunday week containing a date.

    Args:
        records: All stored records.
        today: Any day of the week to report.

    Returns:
        Report with the week's records in date order.
    """
    monday = week_start(today)
    selected = []
    for offset in range(7):
        day = monday + timedelta(days=offset)
        record = find_by_date(records, day.strftime(DATE_FORMAT))
        if record is not None:
            selected.append(record)

    total, days = sum_hours(selected)

    return PeriodReport(
        title="Weekly report",
        start=monday,
        end=monday + timedelta(days=6),
        records=selected,
        total_hours=total,
        days_worked=days,
    )


def monthly_report(records: list[DailyRecord], today: date) -> PeriodReport:
    """Build the report for the calendar month containing a date.

    Records are matched on their ``YYYY-MM`` prefix and kept in store order.

    Args:
        records: All stored records.
        today: Any day of the month to report.

    Returns:
        Report with the month's records.
    """
    prefix = today.strftime("%Y-%m")
    selected = [
        record for record in records
        if record.date is not None and record.date.startswith(prefix)
    ]
    total, days = sum_hours(selected)
    last_day = monthrange(today.year, today.month)[1]

    return PeriodReport(
        title=f"Monthly report - {today.strftime('%B %Y')}",
        start=today.replace(day=1),
        end=today.replace(day=last_day),
        records=selected,
        total_hours=total,
        days_worked=days,
    )
