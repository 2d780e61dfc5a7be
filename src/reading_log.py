"""In-memory record collection for blood pressure readings.

The log owns the readings of one user and hands them to the analytics
engine explicitly. Readings are immutable, so an edit replaces the stored
value under the same record id.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable, Iterator
from dataclasses import replace
from datetime import datetime

from src.bp_analytics import analyze, bucket, distribution
from src.models import BloodPressureReading, DistributionEntry, Period, Stats, TrendPoint

logger = logging.getLogger(__name__)


class ReadingLog:
    """Ordered collection of readings keyed by record id."""

    def __init__(self, readings: Iterable[BloodPressureReading] | None = None):
        """Initialize the log.

        Args:
            readings: Optional initial readings, stored in the given order
        """
        self._records: dict[str, BloodPressureReading] = {}
        for reading in readings or []:
            self.add(reading)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[BloodPressureReading]:
        return iter(list(self._records.values()))

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._records

    def add(self, reading: BloodPressureReading, record_id: str | None = None) -> str:
        """Add a reading.

        Args:
            reading: Reading to store
            record_id: Id to store it under (generated if not provided)

        Returns:
            Record id of the stored reading
        """
        record_id = record_id or uuid.uuid4().hex
        if record_id in self._records:
            raise ValueError(f"Record id already exists: {record_id}")

        self._records[record_id] = reading
        logger.debug(f"Added record {record_id}: {reading}")
        return record_id

    def get(self, record_id: str) -> BloodPressureReading | None:
        return self._records.get(record_id)

    def update(self, record_id: str, **changes) -> BloodPressureReading:
        """Replace a reading with an edited copy.

        Args:
            record_id: Id of the record to edit
            **changes: Field values to change (e.g. systolic=125)

        Returns:
            The new reading stored under record_id

        Raises:
            KeyError: If record_id is unknown
        """
        if record_id not in self._records:
            raise KeyError(record_id)

        updated = replace(self._records[record_id], **changes)
        self._records[record_id] = updated
        logger.debug(f"Updated record {record_id}: {updated}")
        return updated

    def delete(self, record_id: str) -> bool:
        """Delete a record.

        Returns:
            True if a record was removed
        """
        removed = self._records.pop(record_id, None) is not None
        if removed:
            logger.debug(f"Deleted record {record_id}")
        return removed

    def clear(self) -> int:
        """Remove all records.

        Returns:
            Number of removed records
        """
        deleted = len(self._records)
        self._records.clear()
        logger.warning(f"Cleared all {deleted} records from log")
        return deleted

    def readings(
        self,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[BloodPressureReading]:
        """Readings in insertion order.

        Args:
            start: Only include readings at or after this time
            end: Only include readings at or before this time

        Returns:
            List of readings
        """
        return [
            r
            for r in self._records.values()
            if (start is None or r.timestamp >= start) and (end is None or r.timestamp <= end)
        ]

    def history(
        self,
        limit: int = 100,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[dict]:
        """Most recent records first, as dictionaries.

        Args:
            limit: Maximum number of records to return
            start: Filter records at or after this time
            end: Filter records at or before this time

        Returns:
            List of record dictionaries including "id" and "category"
        """
        entries = [
            (record_id, reading)
            for record_id, reading in self._records.items()
            if (start is None or reading.timestamp >= start)
            and (end is None or reading.timestamp <= end)
        ]
        entries.sort(key=lambda e: e[1].timestamp, reverse=True)
        return [{"id": record_id, **reading.to_dict()} for record_id, reading in entries[:limit]]

    def import_readings(self, readings: Iterable[BloodPressureReading]) -> int:
        """Add readings that are not already in the log.

        Duplicates are detected by record hash (timestamp and values).

        Returns:
            Number of added readings
        """
        seen = {r.record_hash for r in self._records.values()}
        total = 0
        added = 0
        for reading in readings:
            total += 1
            if reading.record_hash in seen:
                continue
            self.add(reading)
            seen.add(reading.record_hash)
            added += 1

        logger.info(f"Imported {total} records: {added} new, {total - added} duplicates")
        return added

    def stats(self) -> Stats:
        """Statistics over all readings (raises EmptyInputError when empty)."""
        return analyze(self.readings())

    def trend(self, period: Period, reference: datetime | None = None) -> list[TrendPoint]:
        return bucket(self.readings(), period, reference)

    def category_distribution(self) -> list[DistributionEntry]:
        return distribution(self.readings())
