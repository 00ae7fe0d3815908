"""
Mapping from service results to HTTP responses.

Every router funnels its service result through ``to_response`` so the
envelope and status codes are decided in one place:

- Ok               -> 200, body built by the caller's ``on_ok``
- ValidationFailed -> 400 ``Validation error`` with per-field ``errors``
- NotFound         -> 404 ``<Resource> not found``
- Unexpected       -> 500 ``Internal server error`` (detail stays in the logs)
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from fastapi import Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from api.models import ErrorResponse, FieldErrorModel
from services.results import NotFound, Ok, Result, Unexpected, ValidationFailed

logger = logging.getLogger(__name__)

_FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def _json(model: BaseModel, status_code: int = 200) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=model.model_dump(mode="json", exclude_none=True))


def to_response(result: Result[Any], on_ok: Callable[[Any], BaseModel]) -> JSONResponse:
    if isinstance(result, Ok):
        return _json(on_ok(result.value))

    if isinstance(result, ValidationFailed):
        errors = [FieldErrorModel(**error.to_dict()) for error in result.errors]
        return _json(ErrorResponse(message="Validation error", errors=errors), status_code=400)

    if isinstance(result, NotFound):
        return _json(ErrorResponse(message=f"{result.resource} not found"), status_code=404)

    if isinstance(result, Unexpected):
        return _json(ErrorResponse(message="Internal server error"), status_code=500)

    raise TypeError(f"Unsupported result type: {type(result)!r}")


async def read_payload(request: Request) -> Result[Any]:
    """
    Decode the request body.

    JSON bodies are the norm. URL-encoded and multipart bodies (plain HTML
    form posts) are read as a flat mapping of their fields. An empty body reads
    as an empty object, so it fails field validation rather than parsing. A
    JSON body that does not parse is an Unexpected failure.
    """

    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if content_type in _FORM_CONTENT_TYPES:
        form = await request.form()
        return Ok(dict(form))

    body = await request.body()
    if not body.strip():
        return Ok({})
    try:
        return Ok(await request.json())
    except ValueError as e:
        logger.exception("Malformed request body for %s %s", request.method, request.url.path)
        return Unexpected(detail=str(e))
