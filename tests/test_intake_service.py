"""
Tests for `services/intake_service.py`.

Covers the Result variant each operation returns, and that rejected or failed
operations leave the store as it was.
"""

from __future__ import annotations

import logging

from domain.validation import ErrorCode
from services import intake_service
from services.results import NotFound, Ok, Unexpected, ValidationFailed


class TestSubmit:
    def test_valid_contact_is_stored(self, contact_store, contact_payload):
        result = intake_service.submit(contact_store, contact_payload)

        assert isinstance(result, Ok)
        assert result.value.id
        assert result.value.status == "new"
        assert contact_store.list_all() == [result.value]

    def test_invalid_contact_is_not_stored(self, contact_store, contact_payload):
        del contact_payload["email"]

        result = intake_service.submit(contact_store, contact_payload)

        assert isinstance(result, ValidationFailed)
        assert [e.path for e in result.errors] == [("email",)]
        assert len(contact_store) == 0

    def test_booking_without_terms_is_rejected(self, booking_store, booking_payload):
        booking_payload["agreeToTerms"] = False

        result = intake_service.submit(booking_store, booking_payload)

        assert isinstance(result, ValidationFailed)
        assert result.errors[0].path == ("agreeToTerms",)
        assert len(booking_store) == 0

    def test_rejection_is_logged_without_values(self, contact_store, caplog):
        with caplog.at_level(logging.INFO, logger="services.intake_service"):
            intake_service.submit(contact_store, {"name": "J", "email": "secret@@"})

        (record,) = [r for r in caplog.records if r.getMessage() == "Rejected submission payload"]
        assert "name" in record.invalid_fields
        assert "secret@@" not in caplog.text

    def test_storage_failure_becomes_unexpected(self, contact_store, contact_payload, monkeypatch, caplog):
        def boom(data, *, timestamp=None):
            raise RuntimeError("disk on fire")

        monkeypatch.setattr(contact_store, "create", boom)

        with caplog.at_level(logging.ERROR):
            result = intake_service.submit(contact_store, contact_payload)

        assert isinstance(result, Unexpected)
        assert result.detail == "disk on fire"
        assert "Failed to store submission" in caplog.text


class TestLookups:
    def test_list_records_is_most_recent_first(self, contact_store, contact_payload):
        first = intake_service.submit(contact_store, contact_payload).value
        second = intake_service.submit(contact_store, contact_payload).value

        result = intake_service.list_records(contact_store)

        assert isinstance(result, Ok)
        assert result.value == [second, first]

    def test_get_record(self, booking_store, booking_payload):
        booking = intake_service.submit(booking_store, booking_payload).value

        assert intake_service.get_record(booking_store, booking.id) == Ok(booking)
        assert intake_service.get_record(booking_store, "BK1") == NotFound(resource="Booking", record_id="BK1")


class TestChangeStatus:
    def test_status_is_updated(self, booking_store, booking_payload):
        booking = intake_service.submit(booking_store, booking_payload).value

        result = intake_service.change_status(booking_store, booking.id, {"status": "confirmed"})

        assert isinstance(result, Ok)
        assert result.value.status == "confirmed"
        assert result.value.data == booking.data

    def test_unknown_id_is_not_found(self, contact_store):
        result = intake_service.change_status(contact_store, "123", {"status": "closed"})

        assert result == NotFound(resource="Submission", record_id="123")
        assert len(contact_store) == 0

    def test_missing_status_is_a_validation_failure(self, contact_store, contact_payload):
        record = intake_service.submit(contact_store, contact_payload).value

        for payload in ({}, {"status": 3}, ["closed"]):
            result = intake_service.change_status(contact_store, record.id, payload)
            assert isinstance(result, ValidationFailed)
            assert result.errors[0].path == ("status",)
            assert result.errors[0].code is ErrorCode.INVALID_TYPE

        assert contact_store.find_by_id(record.id).status == "new"
