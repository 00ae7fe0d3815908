"""
Domain: form intake records.

Two record types share one shape:
- ContactSubmission: a general enquiry from the site's contact form.
- Booking: a request for a consultation.

Invariants:
- id and timestamp are fixed at creation; timestamp is a UTC timestamp.
- data is the validated payload and is never mutated after creation.
- status is the only field that changes; a status change returns a new record
  whose id, timestamp and data are the very same objects as before.

This module contains only pure domain entities: no I/O.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from types import MappingProxyType
from typing import Any, Dict, Mapping, Type

from pydantic import BaseModel

from .time import require_utc_timestamp, to_iso_utc


@dataclass(frozen=True, slots=True)
class SubmissionRecord:
    """
    Immutable snapshot of a stored submission.

    Status edits produce a new instance via ``with_status``.
    """

    id: str
    timestamp: datetime
    data: Mapping[str, Any]
    status: str

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("id must be a non-empty string")
        require_utc_timestamp("timestamp", self.timestamp)
        if not isinstance(self.data, MappingProxyType):
            object.__setattr__(self, "data", MappingProxyType(dict(self.data)))

    def with_status(self, status: str) -> "SubmissionRecord":
        """Return a copy of this record carrying ``status``."""

        return replace(self, status=status)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "timestamp": to_iso_utc(self.timestamp),
            "data": dict(self.data),
            "status": self.status,
        }


@dataclass(frozen=True, slots=True)
class ContactSubmission(SubmissionRecord):
    """A contact-form enquiry. Initial status is ``"new"``."""


@dataclass(frozen=True, slots=True)
class Booking(SubmissionRecord):
    """A consultation booking. Initial status is ``"pending"``."""


@dataclass(frozen=True, slots=True)
class RecordKind:
    """
    Everything that distinguishes one intake collection from another.

    name is the human label used in logs and not-found messages; form is the
    pydantic model visitor payloads are validated against.
    """

    name: str
    record_type: Type[SubmissionRecord]
    form: Type[BaseModel]
    id_prefix: str
    initial_status: str

    def new_record(self, record_id: str, timestamp: datetime, data: Mapping[str, Any]) -> SubmissionRecord:
        return self.record_type(id=record_id, timestamp=timestamp, data=data, status=self.initial_status)
