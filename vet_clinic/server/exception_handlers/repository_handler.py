"""
Exception handlers for repository, validation and HTTP errors.

Every handler renders the failure envelope ``{success: false, message, error}``
(see ``ErrorResponse``) with the status mapped from the error type:

- ``NotFoundError`` -> 404
- ``DuplicateEntryError`` -> 409
- ``InvalidDateError`` -> 400
- ``StorageError`` -> 500
- ``RequestValidationError`` -> 400
"""

from typing import Any, List, Optional

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from vet_clinic.core.errors import (
    DuplicateEntryError,
    InvalidDateError,
    NotFoundError,
    StorageError,
)
from vet_clinic.core.logging_config import get_logger
from vet_clinic.core.models.io import ErrorResponse

logger = get_logger(__name__)


def error_response(
    status_code: int,
    message: str,
    error: Optional[str] = None,
    errors: Optional[List[Any]] = None,
) -> JSONResponse:
    """Build a JSON response holding the failure envelope."""
    body = ErrorResponse(message=message, error=error, errors=errors)
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body.model_dump(exclude_none=True)),
    )


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return error_response(status.HTTP_404_NOT_FOUND, f"{exc.entity.capitalize()} not found", str(exc))


async def duplicate_entry_handler(request: Request, exc: DuplicateEntryError) -> JSONResponse:
    logger.warning(f"Duplicate entry in {request.method} {request.url.path}: {exc.cause}")
    return error_response(status.HTTP_409_CONFLICT, "Duplicate entry", str(exc))


async def invalid_date_handler(request: Request, exc: InvalidDateError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, "Invalid attention date", str(exc))


async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    """Report a store fault without leaking driver details beyond the operation tag."""
    logger.error(f"Storage error in {request.method} {request.url.path}: {exc}")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, f"Failed to {exc.operation}", str(exc))


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    detail = f"{location}: {first.get('msg')}" if location else str(first.get("msg", "Invalid request"))
    return error_response(status.HTTP_400_BAD_REQUEST, "Validation error", detail, errors)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail), str(exc.detail))
