"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain and framework
exceptions to JSON failure bodies: every failure carries success=false and
a human-readable error, so clients can tell it apart from a successful
search with zero results.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from loresearch.core.config import get_settings
from loresearch.domain.exceptions import LoreSearchException

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status when applicable
_ERROR_CODE_STATUS: dict[str, int] = {
    "VALIDATION_ERROR": 400,
    "STORE_NOT_FOUND": 503,
    "STORE_READ_ERROR": 503,
    "STORE_FORMAT_ERROR": 500,
}


def _error_body(message: Any, error_code: str, details: Any = None) -> dict[str, Any]:
    return {
        "success": False,
        "error": message,
        "errorCode": error_code,
        "details": details if details is not None else {},
    }


def _loresearch_exception_handler(
    request: Request, exc: LoreSearchException
) -> JSONResponse:
    """Return JSON from LoreSearchException.to_dict() with appropriate status code."""
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    if status >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=status, content=exc.to_dict())


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 422 with validation error details."""
    return JSONResponse(
        status_code=422,
        content=_error_body(
            "Request validation failed",
            "VALIDATION_ERROR",
            jsonable_encoder(exc.errors()),
        ),
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return JSON for Starlette HTTP exceptions (status + detail)."""
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.detail, "HTTP_ERROR"),
    )


def _rate_limit_exception_handler(
    request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Return 429 with the standard failure body (and rate limit headers when enabled)."""
    logger.warning("Rate limit exceeded for %s: %s", request.url.path, exc.detail)
    response = JSONResponse(
        status_code=429,
        content=_error_body(f"Rate limit exceeded: {exc.detail}", "RATE_LIMITED"),
    )
    return request.app.state.limiter._inject_headers(
        response, request.state.view_rate_limit
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include detail only when debug is True."""
    logger.exception("Unhandled exception: %s", exc)
    settings = get_settings()
    detail: Any = str(exc) if settings.debug else "Internal server error"
    return JSONResponse(
        status_code=500,
        content=_error_body(detail, "INTERNAL_ERROR"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: LoreSearchException (and
    subclasses), RequestValidationError, RateLimitExceeded,
    StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(LoreSearchException, _loresearch_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
