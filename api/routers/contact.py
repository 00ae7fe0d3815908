"""
Contact API Endpoints.

Endpoints for the site's contact form and for staff triage of submissions.
"""

from fastapi import APIRouter, Depends, Request

from api.dependencies import get_contact_store
from api.models import (
    ContactCreatedResponse,
    ErrorResponse,
    RecordModel,
    StatusUpdateRequest,
    SubmissionListResponse,
    SubmissionResponse,
)
from api.responses import read_payload, to_response
from repositories.submission_repository import SubmissionStore
from services import intake_service
from services.results import Ok

router = APIRouter()

_ERRORS = {
    400: {"model": ErrorResponse, "description": "Validation error"},
    500: {"model": ErrorResponse, "description": "Internal server error"},
}


@router.post(
    "/contact",
    response_model=ContactCreatedResponse,
    responses=_ERRORS,
    summary="Submit Contact Form",
    description="Validate and store a contact form submission.",
)
async def submit_contact(request: Request, store: SubmissionStore = Depends(get_contact_store)):
    """
    Accept a contact form submission.

    **Example request:**
    ```json
    {
      "name": "Jo",
      "email": "jo@x.com",
      "phone": "9876543210",
      "service": "GST",
      "message": "Need help with GST filing",
      "urgency": "urgent"
    }
    ```

    ``urgency`` is one of ``urgent``, ``normal``, ``low`` and defaults to
    ``normal``. New submissions start with status ``new``.
    """
    payload = await read_payload(request)
    result = intake_service.submit(store, payload.value) if isinstance(payload, Ok) else payload
    return to_response(result, lambda record: ContactCreatedResponse(submissionId=record.id))


@router.get(
    "/contact/submissions",
    response_model=SubmissionListResponse,
    responses={500: _ERRORS[500]},
    summary="List Contact Submissions",
    description="All contact submissions, most recent first.",
)
async def list_submissions(store: SubmissionStore = Depends(get_contact_store)):
    result = intake_service.list_records(store)
    return to_response(
        result,
        lambda records: SubmissionListResponse(
            submissions=[RecordModel.from_record(r) for r in records],
            total=len(records),
        ),
    )


@router.put(
    "/contact/submissions/{submission_id}",
    response_model=SubmissionResponse,
    responses={**_ERRORS, 404: {"model": ErrorResponse, "description": "Submission not found"}},
    summary="Update Submission Status",
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": StatusUpdateRequest.model_json_schema()}},
        }
    },
)
async def update_submission_status(
    submission_id: str,
    request: Request,
    store: SubmissionStore = Depends(get_contact_store),
):
    """Set a submission's status. Any status string is accepted."""
    payload = await read_payload(request)
    if isinstance(payload, Ok):
        result = intake_service.change_status(store, submission_id, payload.value)
    else:
        result = payload
    return to_response(result, lambda record: SubmissionResponse(submission=RecordModel.from_record(record)))
