# 📄 File: findeasily/api/middleware/error_handling.py
# 🧭 Purpose (Layman Explanation):
# Catches problems raised anywhere in the site and turns them into one consistent kind of error
# reply, so the browser always gets a code, a readable message and a request number.
# 🧪 Purpose (Technical Summary):
# Exception handlers for FindEasilyException, request validation errors, slowapi
# RateLimitExceeded and unhandled exceptions, all producing the
# {"error": {code, message, details, timestamp, request_id}} envelope.
# 🔗 Dependencies:
# FastAPI exception handlers, slowapi, findeasily.shared.core.exceptions, settings
# 🔄 Connected Modules / Calls From:
# findeasily.main (register_exception_handlers)

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded

from findeasily.shared.config.settings import get_settings
from findeasily.shared.core.exceptions import FindEasilyException, is_server_error
from findeasily.shared.utils.logging import request_id_var

logger = logging.getLogger(__name__)


def _request_id(request: Request) -> Optional[str]:
    return getattr(request.state, "request_id", None) or request_id_var.get() or None


def create_error_response(
    request: Request,
    error_code: str,
    message: str,
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
    details: Optional[Dict[str, Any]] = None
) -> JSONResponse:
    """
    Create a standardized error response.

    Args:
        request: Request that failed
        error_code: Error code identifier
        message: Human-readable error message
        status_code: HTTP status code
        details: Additional error details
    """
    request_id = _request_id(request)
    response = JSONResponse(
        status_code=status_code,
        content=jsonable_encoder({
            "error": {
                "code": error_code,
                "message": message,
                "details": details or {},
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "request_id": request_id,
            }
        }),
    )
    if request_id:
        response.headers["X-Request-ID"] = request_id
    response.headers["X-Error-Code"] = error_code
    return response


async def findeasily_exception_handler(request: Request, exc: FindEasilyException) -> JSONResponse:
    if is_server_error(exc):
        logger.error(f"{exc.error_code} on {request.method} {request.url.path}: {exc.message}")
    else:
        logger.info(f"{exc.error_code} on {request.method} {request.url.path}: {exc.message}")
    return create_error_response(request, exc.error_code, exc.message, exc.status_code, exc.details)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    validation_errors = [
        {
            "field": ".".join(str(loc) for loc in error.get("loc", [])),
            "message": error.get("msg", "Validation error"),
            "type": error.get("type", "validation_error"),
        }
        for error in exc.errors()
    ]
    return create_error_response(
        request,
        "VALIDATION_ERROR",
        "Request validation failed",
        422,
        {"validation_errors": validation_errors},
    )


async def rate_limit_exception_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    logger.warning(f"Rate limit exceeded on {request.url.path}: {exc.detail}")
    response = create_error_response(
        request,
        "RATE_LIMIT_EXCEEDED",
        f"Rate limit of {exc.detail} exceeded. Please try again later.",
        status.HTTP_429_TOO_MANY_REQUESTS,
        {"rate_limit": exc.detail},
    )
    response.headers["Retry-After"] = "60"
    return response


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    settings = get_settings()
    details = {"error_type": type(exc).__name__, "error": str(exc)} if settings.DEBUG else {}
    return create_error_response(
        request,
        "INTERNAL_SERVER_ERROR",
        "An internal server error occurred",
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        details,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(FindEasilyException, findeasily_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
