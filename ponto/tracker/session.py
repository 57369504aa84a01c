"""Clock-in session: the state transitions of one day's record."""

import logging
from datetime import date, datetime
from typing import Callable, Optional

from pydantic import BaseModel, Field

from ponto.db.store import RecordStore
from ponto.models import DailyRecord
from ponto.tracker.hours import DATE_FORMAT, TIME_FORMAT, compute_total_hours, format_hours

logger = logging.getLogger(__name__)


class ActionResult(BaseModel):
    """Outcome of a clock-in action."""

    ok: bool = Field(..., description="Whether the action was applied")
    message: str = Field(..., description="Message for the user")
    timestamp: Optional[str] = Field(default=None, description="Stamped time (HH:MM:SS)")
    record: Optional[DailyRecord] = Field(default=None, description="Record after the action")

    model_config = {"frozen": True}


class TrackerSession:
    """Owns the record being tracked today and persists every change.

    Actions check their precondition, stamp the current local time, upsert
    the record and return an ActionResult. A failed precondition changes
    nothing and writes nothing.
    """

    def __init__(
        self,
        store: RecordStore,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """Initialize the session with today's stored record, if any.

        Args:
            store: Record store used for persistence.
            clock: Source of the current local time.
        """
        self.store = store
        self._clock = clock
        today = self._clock().strftime(DATE_FORMAT)
        self.record = self.store.get_record(today) or DailyRecord()

    def today(self) -> date:
        """Get the current local date."""
        return self._clock().date()

    def _apply(self, now: datetime, **changes) -> DailyRecord:
        """Apply changes, refresh the derived total and persist."""
        updated = self.record.model_copy(update=changes)
        total = compute_total_hours(updated, fallback_date=now.date())
        updated = updated.model_copy(update={"total_hours": total})

        if not self.store.upsert(updated):
            logger.warning("Record for %s was not persisted", updated.date)

        self.record = updated
        return updated

    def start_day(self) -> ActionResult:
        """Start the shift."""
        now = self._clock()
        today = now.strftime(DATE_FORMAT)
        stamp = now.strftime(TIME_FORMAT)

        if self.record.date is not None and self.record.date != today:
            self.record = DailyRecord()

        record = self._apply(now, date=today, start_time=stamp)
        return ActionResult(
            ok=True,
            message=f"Shift started at {stamp}",
            timestamp=stamp,
            record=record,
        )

    def start_lunch(self) -> ActionResult:
        """Start the lunch break."""
        if self.record.start_time is None:
            return ActionResult(ok=False, message="You need to start the shift first!")

        now = self._clock()
        stamp = now.strftime(TIME_FORMAT)
        record = self._apply(now, lunch_start=stamp)
        return ActionResult(
            ok=True,
            message=f"Lunch started at {stamp}",
            timestamp=stamp,
            record=record,
        )

    def end_lunch(self) -> ActionResult:
        """End the lunch break."""
        if self.record.lunch_start is None:
            return ActionResult(ok=False, message="You need to start lunch first!")

        now = self._clock()
        stamp = now.strftime(TIME_FORMAT)
        record = self._apply(now, lunch_end=stamp)
        return ActionResult(
            ok=True,
            message=f"Lunch ended at {stamp}",
            timestamp=stamp,
            record=record,
        )

    def end_day(self) -> ActionResult:
        """End the shift and compute the worked hours."""
        if self.record.start_time is None:
            return ActionResult(ok=False, message="You need to start the shift first!")

        now = self._clock()
        stamp = now.strftime(TIME_FORMAT)
        record = self._apply(now, end_time=stamp)

        message = f"Shift ended at {stamp}"
        if record.total_hours is not None:
            message += f"\nTotal worked: {format_hours(record.total_hours)}"
        else:
            logger.warning(
                "Could not compute worked hours for %s (start=%r, end=%r)",
                record.date, record.start_time, record.end_time,
            )
            message += "\nWarning: worked hours could not be computed"

        return ActionResult(ok=True, message=message, timestamp=stamp, record=record)

    def forget(self, day: Optional[str]) -> None:
        """Drop the current record if it was deleted from the store."""
        if day is not None and self.record.date == day:
            self.record = DailyRecord()
