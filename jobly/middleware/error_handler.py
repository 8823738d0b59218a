"""
Global Error Handling for Jobly

Provides centralized error handling with:
- Structured error responses
- Request IDs bound into every log line of a request
- Environment-specific error details
"""

import time
import uuid
from typing import Dict, Any, Optional

import structlog
from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from jobly.core.config import Settings
from jobly.core.exceptions import BaseApplicationException, ErrorCategory
from jobly.utils.logger import get_logger

logger = get_logger(__name__)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Tags each request with an ID and logs its outcome."""

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        started = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - started) * 1000

        response.headers["X-Request-ID"] = request_id
        logger.info(
            "API request",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round(duration_ms, 2),
        )
        return response


def _request_id(request: Request) -> Optional[str]:
    return getattr(request.state, "request_id", None)


def create_error_response(
    request: Request,
    http_status: int,
    message: Any,
    error_code: str,
    category: str,
    details: Optional[Dict[str, Any]] = None,
) -> JSONResponse:
    """Create standardized error response."""
    error: Dict[str, Any] = {
        "message": message,
        "status": http_status,
        "error_code": error_code,
        "category": category,
        "request_id": _request_id(request),
    }
    if details:
        error["details"] = details

    return JSONResponse(status_code=http_status, content={"error": error})


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """Map application and framework exceptions to JSON error responses."""

    @app.exception_handler(BaseApplicationException)
    async def application_exception_handler(
        request: Request, exc: BaseApplicationException
    ) -> JSONResponse:
        if exc.http_status >= 500:
            logger.error(f"Application error: {exc.error_code}", message=exc.message)
        else:
            logger.info(
                f"Request rejected: {exc.error_code}",
                message=exc.message,
                http_status=exc.http_status,
            )
        return create_error_response(
            request,
            exc.http_status,
            exc.message,
            exc.error_code,
            exc.category.value,
            exc.details,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        messages = []
        field_errors: Dict[str, str] = {}
        for error in exc.errors():
            field = ".".join(str(loc) for loc in error["loc"])
            field_errors[field] = error["msg"]
            messages.append(f"{field}: {error['msg']}")

        logger.warning("Validation error", errors=messages)
        return create_error_response(
            request,
            status.HTTP_400_BAD_REQUEST,
            messages,
            "VALIDATION_ERROR",
            ErrorCategory.VALIDATION.value,
            {"field_errors": field_errors},
        )

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
        logger.warning("Integrity error", error=str(exc.orig))
        details = {} if settings.ENVIRONMENT == "production" else {"error": str(exc.orig)}
        return create_error_response(
            request,
            status.HTTP_400_BAD_REQUEST,
            "Request conflicts with stored data",
            "DATABASE_INTEGRITY_ERROR",
            ErrorCategory.DATABASE.value,
            details,
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        response = create_error_response(
            request,
            exc.status_code,
            exc.detail,
            "HTTP_ERROR",
            ErrorCategory.SYSTEM.value,
        )
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(f"Unhandled exception: {exc}", exc_info=True)

        # Don't expose internal errors in production
        details = {} if settings.ENVIRONMENT == "production" else {
            "error_type": type(exc).__name__,
            "error": str(exc),
        }
        return create_error_response(
            request,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Internal server error",
            "INTERNAL_ERROR",
            ErrorCategory.SYSTEM.value,
            details,
        )
