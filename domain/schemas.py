"""
Domain: the site's intake forms.

Each form is a pydantic model; its field declarations are the constraint
table. Messages in ``error_messages`` are shown to visitors next to the
offending form field.
"""

from __future__ import annotations

from typing import ClassVar, Dict, Literal, Optional

from pydantic import BaseModel, EmailStr, Field, StrictBool, StrictStr, field_validator
from pydantic_core import PydanticCustomError

from .submission import Booking, ContactSubmission, RecordKind

MIN_PHONE_DIGITS = 10


class _VisitorDetails(BaseModel):
    """Fields shared by every intake form."""

    name: StrictStr = Field(..., min_length=2, description="Full name of the visitor")
    email: EmailStr = Field(..., description="Contact email")
    phone: StrictStr = Field(..., description="Phone number, at least 10 digits")
    service: StrictStr = Field(..., min_length=1, description="Service the visitor is interested in")

    error_messages: ClassVar[Dict[str, str]] = {
        "name": "Name must be at least 2 characters",
        "email": "Invalid email address",
        "service": "Service selection is required",
    }

    @field_validator("phone")
    @classmethod
    def phone_has_enough_digits(cls, value: str) -> str:
        if sum(1 for ch in value if ch.isdigit()) < MIN_PHONE_DIGITS:
            raise PydanticCustomError(
                "invalid_phone", f"Phone number must be at least {MIN_PHONE_DIGITS} digits"
            )
        return value


class ContactForm(_VisitorDetails):
    """
    Contact form submitted from the site.
    Initial status: "new"
    """

    message: StrictStr = Field(..., min_length=10, description="What the visitor needs help with")
    urgency: Literal["urgent", "normal", "low"] = "normal"

    error_messages: ClassVar[Dict[str, str]] = {
        **_VisitorDetails.error_messages,
        "message": "Message must be at least 10 characters",
    }


class BookingForm(_VisitorDetails):
    """
    Consultation booking request.
    Initial status: "pending"
    """

    consultationType: Literal["phone", "video", "inperson"]
    preferredDate: StrictStr = Field(..., min_length=1)
    preferredTime: StrictStr = Field(..., min_length=1)
    budget: Optional[StrictStr] = None
    description: Optional[StrictStr] = None
    urgency: Literal["urgent", "normal", "flexible"] = "normal"
    agreeToTerms: StrictBool

    error_messages: ClassVar[Dict[str, str]] = {
        **_VisitorDetails.error_messages,
        "preferredDate": "Date is required",
        "preferredTime": "Time is required",
    }

    @field_validator("agreeToTerms")
    @classmethod
    def terms_accepted(cls, value: bool) -> bool:
        if value is not True:
            raise PydanticCustomError("must_be_true", "Must agree to terms")
        return value


CONTACT_KIND = RecordKind(
    name="Submission",
    record_type=ContactSubmission,
    form=ContactForm,
    id_prefix="",
    initial_status="new",
)

BOOKING_KIND = RecordKind(
    name="Booking",
    record_type=Booking,
    form=BookingForm,
    id_prefix="BK",
    initial_status="pending",
)
