"""
API Response Models.

Pydantic models describing the response envelope:
``{success, message?, ...payload}``, plus ``errors`` on validation failures.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from domain.submission import SubmissionRecord


# ============================================================================
# Record Models
# ============================================================================

class RecordModel(BaseModel):
    """A stored contact submission or booking."""
    id: str
    timestamp: str  # ISO-8601 UTC, millisecond precision
    data: Dict[str, Any]
    status: str

    @classmethod
    def from_record(cls, record: SubmissionRecord) -> "RecordModel":
        return cls(**record.to_dict())

    class Config:
        json_schema_extra = {
            "example": {
                "id": "BK1735689600000",
                "timestamp": "2025-01-01T00:00:00.000Z",
                "data": {
                    "name": "Asha Rao",
                    "email": "asha@example.com",
                    "phone": "9876543210",
                    "service": "GST Registration",
                    "consultationType": "video",
                    "preferredDate": "2025-01-10",
                    "preferredTime": "11:00",
                    "urgency": "normal",
                    "agreeToTerms": True
                },
                "status": "pending"
            }
        }


# ============================================================================
# Contact Models
# ============================================================================

class ContactCreatedResponse(BaseModel):
    """Response after a contact form is accepted."""
    success: bool = True
    message: str = "Form submitted successfully"
    submissionId: str


class SubmissionListResponse(BaseModel):
    """All contact submissions, most recent first."""
    success: bool = True
    submissions: List[RecordModel]
    total: int


class SubmissionResponse(BaseModel):
    """A single contact submission after a status change."""
    success: bool = True
    message: str = "Status updated successfully"
    submission: RecordModel


# ============================================================================
# Booking Models
# ============================================================================

class BookingCreatedResponse(BaseModel):
    """Response after a consultation booking is accepted."""
    success: bool = True
    message: str = "Booking submitted successfully"
    bookingId: str
    booking: RecordModel


class BookingListResponse(BaseModel):
    """All bookings, most recent first."""
    success: bool = True
    bookings: List[RecordModel]
    total: int


class BookingResponse(BaseModel):
    """A single booking (lookup or status change)."""
    success: bool = True
    message: Optional[str] = None
    booking: RecordModel


# ============================================================================
# Request Models
# ============================================================================

class StatusUpdateRequest(BaseModel):
    """Staff status change. Any string is accepted."""
    status: str

    class Config:
        json_schema_extra = {"example": {"status": "contacted"}}


# ============================================================================
# Service Models
# ============================================================================

class PingResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    status: str
    version: str
    service: str
    checked_at: datetime


# ============================================================================
# Error Models
# ============================================================================

class FieldErrorModel(BaseModel):
    """One violated field constraint."""
    path: List[str]
    message: str
    code: str


class ErrorResponse(BaseModel):
    """Standard error envelope."""
    success: bool = False
    message: str
    errors: Optional[List[FieldErrorModel]] = None

    class Config:
        json_schema_extra = {
            "example": {
                "success": False,
                "message": "Validation error",
                "errors": [
                    {
                        "path": ["email"],
                        "message": "Invalid email address",
                        "code": "invalid_email"
                    }
                ]
            }
        }
