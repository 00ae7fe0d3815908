"""
Request-scoped access to the stores held by the application.

The stores are created once in ``create_app`` and kept on ``app.state``;
handlers receive them through these dependencies.
"""

from fastapi import Request

from repositories.submission_repository import SubmissionStore


def get_contact_store(request: Request) -> SubmissionStore:
    return request.app.state.contact_store


def get_booking_store(request: Request) -> SubmissionStore:
    return request.app.state.booking_store
