"""
Error envelope - Uniform JSON bodies for failed requests.

Every error response has the shape::

    {"status": "Error", "error": "<message>"}

Validation problems are collected per field and joined into a single
comma-separated message. Domain exceptions are mapped to HTTP status
codes here so routes only ever deal with the happy path.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api.models import ErrorResponse
from src.domain.exceptions import StorageError, StudentNotFound

logger = logging.getLogger(__name__)

STATUS_ERROR = "Error"

# pydantic error types reported as a missing required field
_REQUIRED_ERROR_TYPES = frozenset({"missing", "blank"})


def general_error(message: str) -> ErrorResponse:
    """Build an error envelope from a single message."""
    return ErrorResponse(status=STATUS_ERROR, error=message)


def validation_error(messages: Iterable[str]) -> ErrorResponse:
    """Build an error envelope joining per-field messages."""
    return ErrorResponse(status=STATUS_ERROR, error=", ".join(messages))


def describe_validation_errors(errors: Iterable[Mapping[str, Any]]) -> list[str]:
    """
    Turn FastAPI/pydantic error dicts into human-readable messages.

    - empty request body -> ``empty body``
    - undecodable JSON -> ``malformed JSON body: <reason>``
    - non-integer path id -> ``invalid id: <value>``
    - missing or blank field -> ``field <name> is required``
    - anything else on a field -> ``field <name> is invalid``
    """
    messages = []
    for error in errors:
        loc = tuple(error.get("loc", ()))
        error_type = error.get("type")

        if error_type == "json_invalid":
            reason = error.get("ctx", {}).get("error", error.get("msg"))
            messages.append(f"malformed JSON body: {reason}")
        elif loc == ("body",) and error_type == "missing":
            messages.append("empty body")
        elif loc and loc[0] == "path":
            messages.append(f"invalid id: {error.get('input')}")
        elif len(loc) < 2:
            messages.append(f"invalid body: {error.get('msg')}")
        elif error_type in _REQUIRED_ERROR_TYPES:
            messages.append(f"field {loc[-1]} is required")
        else:
            messages.append(f"field {loc[-1]} is invalid")
    return messages


def _envelope(status_code: int, body: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump())


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers that render every failure as an error envelope."""

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        messages = describe_validation_errors(exc.errors())
        logger.info("Rejected %s %s: %s", request.method, request.url.path, messages)
        return _envelope(status.HTTP_400_BAD_REQUEST, validation_error(messages))

    @app.exception_handler(StudentNotFound)
    async def not_found_handler(request: Request, exc: StudentNotFound) -> JSONResponse:
        logger.warning("Student not found: id=%s", exc.student_id)
        return _envelope(status.HTTP_404_NOT_FOUND, general_error(str(exc)))

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
        logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc)
        return _envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, general_error(str(exc)))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=general_error(str(exc.detail)).model_dump(),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _envelope(
            status.HTTP_500_INTERNAL_SERVER_ERROR, general_error("internal server error")
        )
