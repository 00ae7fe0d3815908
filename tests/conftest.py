"""
Pytest configuration and shared fixtures.

Adds the project root to the Python path so tests can import the domain,
repositories, services and api packages without installing the project.
"""

from __future__ import annotations

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Dict

import pytest

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from domain.schemas import BOOKING_KIND, CONTACT_KIND  # noqa: E402
from repositories.submission_repository import SubmissionStore  # noqa: E402

START = datetime(2025, 1, 1, 9, 0, 0, tzinfo=timezone.utc)


class StepClock:
    """Deterministic clock: each call returns the previous instant plus ``step``."""

    def __init__(self, start: datetime = START, step: timedelta = timedelta(seconds=1)) -> None:
        self._next = start
        self._step = step

    def __call__(self) -> datetime:
        now = self._next
        self._next = now + self._step
        return now


@pytest.fixture
def clock() -> StepClock:
    return StepClock()


@pytest.fixture
def contact_store(clock: StepClock) -> SubmissionStore:
    return SubmissionStore(CONTACT_KIND, clock=clock)


@pytest.fixture
def booking_store(clock: StepClock) -> SubmissionStore:
    return SubmissionStore(BOOKING_KIND, clock=clock)


@pytest.fixture
def contact_payload() -> Dict[str, Any]:
    return {
        "name": "Jo",
        "email": "jo@x.com",
        "phone": "9876543210",
        "service": "GST",
        "message": "Need help with GST filing",
        "urgency": "urgent",
    }


@pytest.fixture
def booking_payload() -> Dict[str, Any]:
    return {
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
        "agreeToTerms": True,
    }
