"""
Domain: payload validation.

Form payloads arrive untyped. Each form is a pydantic model (see
``domain.schemas``) whose field declarations are the constraint table;
``validate_payload`` runs the model and either returns the normalized record
or raises ``ValidationError`` carrying every violated field.

Rules:
- All violations are collected, at most one per field.
- Absent fields with a default take it; absent optional fields are omitted.
- Unknown keys are dropped from the normalized record.
- Forms may set ``error_messages`` (field name -> text) to replace the
  library's wording for a violated length or format constraint.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, Mapping, Tuple, Type

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import ErrorDetails


class ErrorCode(str, Enum):
    REQUIRED = "required"
    INVALID_TYPE = "invalid_type"
    TOO_SHORT = "too_short"
    INVALID_EMAIL = "invalid_email"
    INVALID_PHONE = "invalid_phone"
    INVALID_CHOICE = "invalid_choice"
    MUST_BE_TRUE = "must_be_true"
    INVALID = "invalid"


# pydantic error types -> envelope codes
_CODES: Mapping[str, ErrorCode] = {
    "missing": ErrorCode.REQUIRED,
    "model_type": ErrorCode.INVALID_TYPE,
    "dict_type": ErrorCode.INVALID_TYPE,
    "string_type": ErrorCode.INVALID_TYPE,
    "bool_type": ErrorCode.INVALID_TYPE,
    "string_too_short": ErrorCode.TOO_SHORT,
    "value_error": ErrorCode.INVALID_EMAIL,
    "literal_error": ErrorCode.INVALID_CHOICE,
    "invalid_phone": ErrorCode.INVALID_PHONE,
    "must_be_true": ErrorCode.MUST_BE_TRUE,
}

# Violations whose wording the form may override.
_CONSTRAINT_CODES = frozenset({ErrorCode.TOO_SHORT, ErrorCode.INVALID_EMAIL})


@dataclass(frozen=True, slots=True)
class FieldError:
    """A single violated constraint, addressed by its path in the payload."""

    path: Tuple[str, ...]
    message: str
    code: ErrorCode

    def to_dict(self) -> Dict[str, Any]:
        return {"path": list(self.path), "message": self.message, "code": self.code.value}


class ValidationError(Exception):
    """Raised when a payload violates one or more field constraints."""

    def __init__(self, errors: Iterable[FieldError]) -> None:
        self.errors: Tuple[FieldError, ...] = tuple(errors)
        fields = ", ".join(".".join(e.path) or "<root>" for e in self.errors)
        super().__init__(f"Validation failed for: {fields}")


def _to_field_error(error: ErrorDetails, messages: Mapping[str, str]) -> FieldError:
    path = tuple(str(part) for part in error["loc"])
    code = _CODES.get(error["type"], ErrorCode.INVALID)
    message = error["msg"]
    if code is ErrorCode.REQUIRED:
        message = "Required"
    elif code in _CONSTRAINT_CODES and path and path[0] in messages:
        message = messages[path[0]]
    return FieldError(path=path, message=message, code=code)


def validate_payload(payload: Any, form: Type[BaseModel]) -> Dict[str, Any]:
    """
    Validate an untyped payload against a form model.

    Returns:
        A new dict holding only the form's fields, with defaults applied.

    Raises:
        ValidationError: listing every violated field, in field order.
    """

    try:
        model = form.model_validate(payload)
    except PydanticValidationError as e:
        messages = getattr(form, "error_messages", {})
        raise ValidationError(_to_field_error(err, messages) for err in e.errors()) from None
    return model.model_dump(exclude_none=True)
