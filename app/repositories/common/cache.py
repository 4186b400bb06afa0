"""Dataset cache - the single in-memory copy of the universities dataset."""

from datetime import datetime, timedelta

from loguru import logger

from app.models.university import DatasetSnapshot, DatasetSource, University


class DatasetCache:
    """Holds at most one dataset snapshot with a time-based expiry.

    Created once by the container and shared by reference. A snapshot is
    replaced in a single assignment, so readers see either the old
    generation or the new one, never a partial list.
    """

    def __init__(self, ttl: int = 3600):
        self.ttl = ttl
        self._snapshot: DatasetSnapshot | None = None
        self._generation = 0

    @property
    def snapshot(self) -> DatasetSnapshot | None:
        """Last stored snapshot, fresh or not."""
        return self._snapshot

    def get(self, now: datetime) -> DatasetSnapshot | None:
        """Snapshot if still within the TTL, else None."""
        snapshot = self._snapshot
        if snapshot is None:
            return None
        if now - snapshot.loaded_at > timedelta(seconds=self.ttl):
            logger.debug("Dataset cache expired (generation {})", snapshot.generation)
            return None
        return snapshot

    def store(
        self,
        records: list[University],
        loaded_at: datetime,
        source: DatasetSource,
        path: str | None,
    ) -> DatasetSnapshot:
        """Publish a new generation."""
        self._generation += 1
        for record in records:
            record.generation = self._generation
        snapshot = DatasetSnapshot(
            records=records,
            loaded_at=loaded_at,
            source=source,
            path=path,
            generation=self._generation,
        )
        self._snapshot = snapshot
        logger.info("Dataset cached: {} records from {} (generation {})", len(records), source.value, self._generation)
        return snapshot

    def clear(self) -> None:
        """Drop the snapshot; the next load reads the source again."""
        self._snapshot = None
        logger.info("Dataset cache cleared")

    def expires_at(self) -> datetime | None:
        snapshot = self._snapshot
        if snapshot is None:
            return None
        return snapshot.loaded_at + timedelta(seconds=self.ttl)
