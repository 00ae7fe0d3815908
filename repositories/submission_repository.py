"""
Submission repository (process memory).

This module provides *only* storage operations for intake records. It does
not validate payloads; callers hand it data that already passed the kind's
form model.

Storage model:
- One SubmissionStore per collection (contact submissions, bookings), built
  once by the application factory and shared by reference with handlers.
- Records live in an append-only list for the lifetime of the process. Status
  edits swap the stored snapshot; nothing is ever removed.
- Nothing is persisted. Records are gone when the process exits.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Callable, List, Mapping, Optional, Set

from domain.submission import RecordKind, SubmissionRecord
from domain.time import epoch_millis, require_utc_timestamp, utc_now

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class DuplicateRecordError(ValueError):
    """Raised when appending a record whose id is already stored."""


class SubmissionStore:
    """
    Ordered in-memory collection of one kind of intake record.

    Lookups return ``None`` for unknown ids; they never raise for that case.
    """

    def __init__(self, kind: RecordKind, clock: Clock = utc_now) -> None:
        self.kind = kind
        self._clock = clock
        self._records: List[SubmissionRecord] = []
        self._ids: Set[str] = set()
        self._last_millis: Optional[int] = None

    def __len__(self) -> int:
        return len(self._records)

    def _next_id(self, timestamp: datetime) -> str:
        """
        Generate an id from the submission time in epoch milliseconds.

        Ids stay unique when several records land in the same millisecond (or
        the clock steps backwards): the counter never repeats a value.
        """

        millis = epoch_millis(timestamp)
        if self._last_millis is not None and millis <= self._last_millis:
            millis = self._last_millis + 1
        while f"{self.kind.id_prefix}{millis}" in self._ids:
            millis += 1
        self._last_millis = millis
        return f"{self.kind.id_prefix}{millis}"

    def append(self, record: SubmissionRecord) -> SubmissionRecord:
        """
        Insert a record at the end of the collection.

        No ordering is imposed at insertion time; ``list_all`` sorts.

        Raises:
            DuplicateRecordError: if a record with the same id is already stored.
        """

        if record.id in self._ids:
            raise DuplicateRecordError(f"{self.kind.name} {record.id!r} already exists")
        self._records.append(record)
        self._ids.add(record.id)
        return record

    def create(self, data: Mapping[str, Any], *, timestamp: Optional[datetime] = None) -> SubmissionRecord:
        """Stamp, identify and append a new record of this store's kind."""

        timestamp = timestamp if timestamp is not None else self._clock()
        require_utc_timestamp("timestamp", timestamp)
        record = self.kind.new_record(self._next_id(timestamp), timestamp, data)
        return self.append(record)

    def list_all(self) -> List[SubmissionRecord]:
        """
        Return every record, most recent first.

        Records sharing a timestamp keep their insertion order. The returned
        list is a copy; the stored order is left untouched.
        """

        return sorted(self._records, key=lambda record: record.timestamp, reverse=True)

    def find_by_id(self, record_id: str) -> Optional[SubmissionRecord]:
        """Linear lookup by id. Returns None if absent."""

        return next((record for record in self._records if record.id == record_id), None)

    def update_status(self, record_id: str, status: str) -> Optional[SubmissionRecord]:
        """
        Set the status of the record identified by ``record_id``.

        Any string is accepted as a status. Returns the updated record, or None
        (leaving the store unchanged) if no record matches.
        """

        for index, record in enumerate(self._records):
            if record.id == record_id:
                updated = record.with_status(status)
                self._records[index] = updated
                logger.debug(
                    "%s %s status %r -> %r", self.kind.name, record_id, record.status, status
                )
                return updated
        return None
