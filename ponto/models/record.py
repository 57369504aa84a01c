"""DailyRecord data model."""

from typing import Optional
from pydantic import BaseModel, Field


class DailyRecord(BaseModel):
    """Represents the clock-in state of one calendar date.

    Times are kept as the ``HH:MM:SS`` strings found in the records file so
    that a malformed value only leaves the total unset instead of failing
    the whole load.
    """

    date: Optional[str] = Field(default=None, alias="data", description="Record date (YYYY-MM-DD)")
    start_time: Optional[str] = Field(default=None, alias="horario_inicio", description="Shift start (HH:MM:SS)")
    end_time: Optional[str] = Field(default=None, alias="horario_fim", description="Shift end (HH:MM:SS)")
    lunch_start: Optional[str] = Field(default=None, alias="almoco_inicio", description="Lunch start (HH:MM:SS)")
    lunch_end: Optional[str] = Field(default=None, alias="almoco_fim", description="Lunch end (HH:MM:SS)")
    total_hours: Optional[float] = Field(default=None, alias="total_horas", description="Worked hours, derived")

    model_config = {"frozen": True, "populate_by_name": True}

    def to_json_dict(self) -> dict:
        """Serialize with the records file keys."""
        return self.model_dump(by_alias=True)
