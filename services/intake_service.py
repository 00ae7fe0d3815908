"""
Intake service for contact submissions and consultation bookings.

Handles:
- Validating visitor payloads against the store kind's form model
- Appending accepted records to the store
- Listing, lookup and status changes for staff

No exception escapes these functions: each returns a Result variant
(Ok, ValidationFailed, NotFound or Unexpected). Unexpected failures are logged
with their traceback here so the API layer can answer generically.
"""

from __future__ import annotations

import logging
from typing import Any, List

from domain.submission import SubmissionRecord
from domain.validation import ErrorCode, FieldError, ValidationError, validate_payload
from repositories.submission_repository import SubmissionStore
from services.results import NotFound, Ok, Result, Unexpected, ValidationFailed

logger = logging.getLogger(__name__)


def submit(store: SubmissionStore, payload: Any) -> Result[SubmissionRecord]:
    """
    Validate a visitor payload and store it as a new record.

    On validation failure the store is left unchanged.
    """

    kind = store.kind
    try:
        data = validate_payload(payload, kind.form)
    except ValidationError as e:
        logger.info(
            "Rejected %s payload",
            kind.name.lower(),
            extra={"invalid_fields": [".".join(err.path) for err in e.errors]},
        )
        return ValidationFailed(errors=e.errors)

    try:
        record = store.create(data)
    except Exception as e:
        logger.exception("Failed to store %s", kind.name.lower())
        return Unexpected(detail=str(e))

    logger.info(
        "New %s %s (service=%s, urgency=%s)",
        kind.name.lower(),
        record.id,
        data.get("service"),
        data.get("urgency"),
    )
    return Ok(record)


def list_records(store: SubmissionStore) -> Result[List[SubmissionRecord]]:
    """All records in the store, most recent first."""

    try:
        return Ok(store.list_all())
    except Exception as e:
        logger.exception("Failed to list %s records", store.kind.name.lower())
        return Unexpected(detail=str(e))


def get_record(store: SubmissionStore, record_id: str) -> Result[SubmissionRecord]:
    record = store.find_by_id(record_id)
    if record is None:
        return NotFound(resource=store.kind.name, record_id=record_id)
    return Ok(record)


def change_status(store: SubmissionStore, record_id: str, payload: Any) -> Result[SubmissionRecord]:
    """
    Apply a staff status change of the form ``{"status": "<any string>"}``.

    The new status is not checked against the kind's initial vocabulary.
    """

    status = payload.get("status") if isinstance(payload, dict) else None
    if not isinstance(status, str):
        error = FieldError(("status",), "Status must be a string", ErrorCode.INVALID_TYPE)
        return ValidationFailed(errors=(error,))

    try:
        updated = store.update_status(record_id, status)
    except Exception as e:
        logger.exception("Failed to update %s %s", store.kind.name.lower(), record_id)
        return Unexpected(detail=str(e))

    if updated is None:
        return NotFound(resource=store.kind.name, record_id=record_id)

    logger.info("%s %s status set to %r", store.kind.name, record_id, status)
    return Ok(updated)
