"""Global exception handlers for consistent error responses."""

import traceback
from datetime import datetime, timezone
from typing import Any, Optional, Union

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError

from phenomena.exceptions import BaseAPIException, DatabaseError
from phenomena.schemas.errors import ErrorDetail, ErrorResponse
from phenomena.utils.logger import get_logger, get_request_id

log = get_logger(__name__)


def error_response(
    status_code: int,
    code: str,
    message: str,
    details: Optional[dict[str, Any]] = None,
) -> JSONResponse:
    """Render the shared error envelope."""
    body = ErrorResponse(
        error=ErrorDetail(code=code, message=message, details=details or {}),
        request_id=get_request_id(),
        timestamp=datetime.now(timezone.utc),
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


async def base_exception_handler(request: Request, exc: BaseAPIException) -> JSONResponse:
    """Handle application exceptions (lifecycle rejections, not-found, etc.)."""
    log_method = log.error if exc.status_code >= 500 else log.warning
    log_method(
        "api exception",
        path=request.url.path,
        error_code=exc.error_code,
        message=exc.message,
        status_code=exc.status_code,
        details=exc.details,
    )
    return error_response(exc.status_code, exc.error_code, exc.message, exc.details)


async def validation_exception_handler(
    request: Request, exc: Union[RequestValidationError, PydanticValidationError]
) -> JSONResponse:
    """Handle Pydantic validation errors from request parsing."""
    log.warning("validation error", path=request.url.path, errors=len(exc.errors()))

    # ctx can hold raw exception instances, which are not JSON serializable
    errors = [{k: v for k, v in e.items() if k != "ctx"} for e in exc.errors()]

    return error_response(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "VALIDATION_ERROR",
        "Request validation failed",
        {"errors": errors},
    )


async def sqlalchemy_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Handle SQLAlchemy errors raised out of the repositories."""
    log.error("database error", error=str(exc), traceback=traceback.format_exc())

    db_error = DatabaseError("Database operation failed")
    return error_response(db_error.status_code, db_error.error_code, db_error.message)


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    log.critical(
        "unhandled exception",
        error_type=type(exc).__name__,
        error=str(exc),
        traceback=traceback.format_exc(),
    )
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_SERVER_ERROR",
        "An unexpected error occurred",
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI application."""
    app.add_exception_handler(BaseAPIException, base_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(PydanticValidationError, validation_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, generic_exception_handler)

    log.info("exception handlers registered")
