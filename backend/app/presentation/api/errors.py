"""Exception handlers translating domain errors into the response envelope.

Every failure leaves the API as ``{success: false, message, error, data?}``;
field-level validation failures list their violations in ``data``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.domain.exceptions import (
    CapacityError,
    DuplicateEntityError,
    EntityNotFoundError,
    FieldViolation,
    StorageError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def error_response(
    status_code: int, message: str, error: str | None = None, data=None
) -> JSONResponse:
    content = {"success": False, "message": message, "error": error or message}
    if data is not None:
        content["data"] = data
    return JSONResponse(status_code=status_code, content=content)


def _violation_data(violations: list[FieldViolation]) -> list[dict]:
    return [{"field": v.field, "message": v.message} for v in violations]


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        "Validation failed",
        str(exc),
        _violation_data(exc.violations),
    )


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    violations = [
        FieldViolation(
            field=".".join(str(part) for part in error["loc"] if part not in ("body", "query", "path")),
            message=error["msg"],
        )
        for error in exc.errors()
    ]
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        "Validation failed",
        "; ".join(str(v) for v in violations),
        _violation_data(violations),
    )


async def not_found_handler(request: Request, exc: EntityNotFoundError) -> JSONResponse:
    return error_response(status.HTTP_404_NOT_FOUND, f"{exc.entity_type} not found", str(exc))


async def capacity_error_handler(request: Request, exc: CapacityError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, str(exc))


async def duplicate_entity_handler(request: Request, exc: DuplicateEntityError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, str(exc))


async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to store uploaded file", str(exc)
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error", str(exc)
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(EntityNotFoundError, not_found_handler)
    app.add_exception_handler(CapacityError, capacity_error_handler)
    app.add_exception_handler(DuplicateEntityError, duplicate_entity_handler)
    app.add_exception_handler(StorageError, storage_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
