"""Record persistence for Ponto."""

from ponto.db.store import LoadResult, RecordStore, find_by_date

__all__ = ["LoadResult", "RecordStore", "find_by_date"]
