"""PeriodReport data model."""

from datetime import date
from pydantic import BaseModel, Field

from ponto.models.record import DailyRecord


class PeriodReport(BaseModel):
    """Aggregated worked hours over a date range."""

    title: str = Field(..., description="Report title")
    start: date = Field(..., description="First date covered")
    end: date = Field(..., description="Last date covered")
    records: list[DailyRecord] = Field(default_factory=list, description="Records in display order")
    total_hours: float = Field(default=0.0, description="Sum of recorded totals")
    days_worked: int = Field(default=0, ge=0, description="Records with a total")

    model_config = {"frozen": True}

    @property
    def is_empty(self) -> bool:
        return not self.records
