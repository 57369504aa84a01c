"""JSON file store for Ponto records."""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field, ValidationError

from ponto.models import DailyRecord

logger = logging.getLogger(__name__)

RECORDS_FILENAME = ".ponto_records.json"

LoadError = Literal["missing", "corrupt", "unreadable"]


class LoadResult(BaseModel):
    """Outcome of reading the records file."""

    records: list[DailyRecord] = Field(default_factory=list, description="Loaded records")
    error: Optional[LoadError] = Field(default=None, description="Why nothing was loaded")

    model_config = {"frozen": True}


def default_records_path() -> Path:
    """Get the records file path under $HOME, or the current directory."""
    home = os.environ.get("HOME") or "."
    return Path(home) / RECORDS_FILENAME


def find_by_date(records: list[DailyRecord], day: str) -> Optional[DailyRecord]:
    """Find the record for a date.

    Args:
        records: Records to scan.
        day: Date string (YYYY-MM-DD).

    Returns:
        The matching record, or None.
    """
    for record in records:
        if record.date == day:
            return record
    return None


class RecordStore:
    """Whole-file JSON store of daily records.

    Every write reads the full collection, changes it and writes it back.
    There is no locking; a single user and process is assumed.
    """

    def __init__(self, path: Optional[Path] = None):
        """Initialize the store.

        Args:
            path: Records file path. Defaults to ~/.ponto_records.json.
        """
        self.path = path or default_records_path()

    def read(self) -> LoadResult:
        """Read the records file, reporting why it could not be used."""
        if not self.path.exists():
            return LoadResult(error="missing")

        try:
            content = self.path.read_bytes()
        except OSError as e:
            logger.info("Could not read %s: %s", self.path, e)
            return LoadResult(error="unreadable")

        try:
            raw = json.loads(content.decode("utf-8"))
            if not isinstance(raw, list):
                raise ValueError("records file is not a JSON array")
            records = [DailyRecord.model_validate(item) for item in raw]
        except (ValueError, ValidationError) as e:
            logger.info("Ignoring corrupt records file %s: %s", self.path, e)
            return LoadResult(error="corrupt")

        return LoadResult(records=records)

    def load(self) -> list[DailyRecord]:
        """Load all records; an absent or corrupt file yields an empty list."""
        return self.read().records

    def save(self, records: list[DailyRecord]) -> bool:
        """Write all records, replacing the file.

        Args:
            records: Full record collection.

        Returns:
            True if written, False if the write failed.
        """
        content = json.dumps(
            [record.to_json_dict() for record in records],
            indent=2,
            ensure_ascii=False,
        )
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=self.path.name, suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            os.replace(tmp_name, self.path)
        except OSError as e:
            logger.warning("Could not save records to %s: %s", self.path, e)
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            return False

        logger.debug("Saved %d records to %s", len(records), self.path)
        return True

    def get_record(self, day: str) -> Optional[DailyRecord]:
        """Get the stored record for a date."""
        return find_by_date(self.load(), day)

    def upsert(self, record: DailyRecord) -> bool:
        """Replace the record with the same date, or append it.

        Args:
            record: Record to store.

        Returns:
            True if the store was written.
        """
        records = self.load()
        for i, existing in enumerate(records):
            if existing.date == record.date:
                records[i] = record
                break
        else:
            records.append(record)
        return self.save(records)

    def delete_at(self, index: int) -> Optional[DailyRecord]:
        """Delete a record by its 1-based position.

        Args:
            index: Position as shown to the user (1-based).

        Returns:
            The removed record, or None if the index is out of range or
            the store could not be written.
        """
        records = self.load()
        if index < 1 or index > len(records):
            return None

        removed = records.pop(index - 1)
        if not self.save(records):
            logger.warning("Record for %s was not removed", removed.date)
            return None
        logger.info("Removed record for %s", removed.date)
        return removed
