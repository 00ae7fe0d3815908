"""
Outcome types returned by the intake service.

Every service operation returns exactly one of these instead of raising, and
the API layer maps each variant onto a response envelope.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Tuple, TypeVar, Union

from domain.validation import FieldError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True, slots=True)
class ValidationFailed:
    """One or more field constraints were violated. Nothing was stored."""
    errors: Tuple[FieldError, ...]


@dataclass(frozen=True, slots=True)
class NotFound:
    """The referenced record does not exist. ``resource`` names its kind."""
    resource: str
    record_id: str


@dataclass(frozen=True, slots=True)
class Unexpected:
    """
    Any other failure.

    detail is for operators (logs) only and must not reach response bodies.
    """
    detail: str


Result = Union[Ok[T], ValidationFailed, NotFound, Unexpected]
