"""Data models for Ponto."""

from ponto.models.record import DailyRecord
from ponto.models.report import PeriodReport

__all__ = [
    "DailyRecord",
    "PeriodReport",
]
