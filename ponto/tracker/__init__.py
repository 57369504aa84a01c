"""Time-tracking engine for Ponto.

This package provides the clock-in session state machine, worked-hours
arithmetic and the daily, weekly and monthly reports.
"""

from ponto.tracker.hours import compute_total_hours, format_hours, parse_time
from ponto.tracker.reports import daily_report, monthly_report, weekly_report
from ponto.tracker.session import ActionResult, TrackerSession

__all__ = [
    "ActionResult",
    "TrackerSession",
    "compute_total_hours",
    "daily_report",
    "format_hours",
    "monthly_report",
    "parse_time",
    "weekly_report",
]
