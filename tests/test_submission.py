"""
Tests for `domain/submission.py`.

Covers:
- Records require a UTC timestamp and a non-empty id.
- Records are frozen and their data is read-only.
- with_status changes only status; id, timestamp and data stay the same objects.
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import datetime, timedelta, timezone

import pytest

from domain.schemas import BOOKING_KIND, CONTACT_KIND
from domain.submission import Booking, ContactSubmission

TS = datetime(2025, 1, 1, 9, 30, 0, 123456, tzinfo=timezone.utc)


def test_record_timestamp_must_be_utc() -> None:
    """Verify timestamp enforces UTC timezone-aware values."""

    with pytest.raises(ValueError):
        ContactSubmission(id="1", timestamp=datetime(2025, 1, 1), data={}, status="new")

    with pytest.raises(ValueError):
        ContactSubmission(
            id="1",
            timestamp=datetime(2025, 1, 1, tzinfo=timezone(timedelta(hours=5, minutes=30))),
            data={},
            status="new",
        )


def test_record_id_must_not_be_empty() -> None:
    with pytest.raises(ValueError):
        Booking(id="", timestamp=TS, data={}, status="pending")


def test_record_is_immutable() -> None:
    """Verify records cannot be mutated after creation (frozen entity)."""

    record = ContactSubmission(id="1", timestamp=TS, data={"name": "Jo"}, status="new")

    with pytest.raises(FrozenInstanceError):
        record.status = "contacted"  # type: ignore[misc]

    with pytest.raises(TypeError):
        record.data["name"] = "Someone else"  # type: ignore[index]


def test_record_data_is_detached_from_caller_dict() -> None:
    source = {"name": "Jo"}
    record = ContactSubmission(id="1", timestamp=TS, data=source, status="new")

    source["name"] = "Changed"

    assert record.data["name"] == "Jo"


def test_with_status_changes_only_status() -> None:
    record = Booking(id="BK1", timestamp=TS, data={"service": "Audit"}, status="pending")

    updated = record.with_status("confirmed")

    assert isinstance(updated, Booking)
    assert updated.status == "confirmed"
    assert updated.id is record.id
    assert updated.timestamp is record.timestamp
    assert updated.data is record.data
    assert record.status == "pending"


def test_to_dict_serializes_timestamp_as_iso_utc() -> None:
    record = ContactSubmission(id="1", timestamp=TS, data={"urgency": "low"}, status="new")

    assert record.to_dict() == {
        "id": "1",
        "timestamp": "2025-01-01T09:30:00.123Z",
        "data": {"urgency": "low"},
        "status": "new",
    }


def test_record_kinds_build_their_own_types() -> None:
    contact = CONTACT_KIND.new_record("1735722000000", TS, {"name": "Jo"})
    booking = BOOKING_KIND.new_record("BK1735722000000", TS, {"name": "Jo"})

    assert isinstance(contact, ContactSubmission)
    assert contact.status == "new"
    assert isinstance(booking, Booking)
    assert booking.status == "pending"
