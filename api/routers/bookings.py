"""
Bookings API Endpoints.

Endpoints for consultation booking requests and their follow-up.
"""

from fastapi import APIRouter, Depends, Request

from api.dependencies import get_booking_store
from api.models import (
    BookingCreatedResponse,
    BookingListResponse,
    BookingResponse,
    ErrorResponse,
    RecordModel,
    StatusUpdateRequest,
)
from api.responses import read_payload, to_response
from repositories.submission_repository import SubmissionStore
from services import intake_service
from services.results import Ok

router = APIRouter()

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Booking not found"}}
_ERRORS = {
    400: {"model": ErrorResponse, "description": "Validation error"},
    500: {"model": ErrorResponse, "description": "Internal server error"},
}


@router.post(
    "/bookings",
    response_model=BookingCreatedResponse,
    responses=_ERRORS,
    summary="Book Consultation",
    description="Validate and store a consultation booking request.",
)
async def create_booking(request: Request, store: SubmissionStore = Depends(get_booking_store)):
    """
    Accept a consultation booking.

    **Example request:**
    ```json
    {
      "name": "Asha Rao",
      "email": "asha@example.com",
      "phone": "+91 98765 43210",
      "service": "Income Tax Return",
      "consultationType": "video",
      "preferredDate": "2025-01-10",
      "preferredTime": "11:00",
      "budget": "5000-10000",
      "description": "Salaried, two rental properties",
      "urgency": "flexible",
      "agreeToTerms": true
    }
    ```

    ``consultationType`` is one of ``phone``, ``video``, ``inperson``.
    ``urgency`` is one of ``urgent``, ``normal``, ``flexible`` (default
    ``normal``). ``agreeToTerms`` must be ``true``. New bookings start with
    status ``pending``.
    """
    payload = await read_payload(request)
    result = intake_service.submit(store, payload.value) if isinstance(payload, Ok) else payload
    return to_response(
        result,
        lambda record: BookingCreatedResponse(bookingId=record.id, booking=RecordModel.from_record(record)),
    )


@router.get(
    "/bookings",
    response_model=BookingListResponse,
    responses={500: _ERRORS[500]},
    summary="List Bookings",
    description="All bookings, most recent first.",
)
async def list_bookings(store: SubmissionStore = Depends(get_booking_store)):
    result = intake_service.list_records(store)
    return to_response(
        result,
        lambda records: BookingListResponse(
            bookings=[RecordModel.from_record(r) for r in records],
            total=len(records),
        ),
    )


@router.get(
    "/bookings/{booking_id}",
    response_model=BookingResponse,
    responses=_NOT_FOUND,
    summary="Get Booking",
)
async def get_booking(booking_id: str, store: SubmissionStore = Depends(get_booking_store)):
    result = intake_service.get_record(store, booking_id)
    return to_response(result, lambda record: BookingResponse(booking=RecordModel.from_record(record)))


@router.put(
    "/bookings/{booking_id}",
    response_model=BookingResponse,
    responses={**_ERRORS, **_NOT_FOUND},
    summary="Update Booking Status",
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": StatusUpdateRequest.model_json_schema()}},
        }
    },
)
async def update_booking_status(
    booking_id: str,
    request: Request,
    store: SubmissionStore = Depends(get_booking_store),
):
    """Set a booking's status. Any status string is accepted."""
    payload = await read_payload(request)
    if isinstance(payload, Ok):
        result = intake_service.change_status(store, booking_id, payload.value)
    else:
        result = payload
    return to_response(
        result,
        lambda record: BookingResponse(
            message="Booking status updated successfully",
            booking=RecordModel.from_record(record),
        ),
    )
