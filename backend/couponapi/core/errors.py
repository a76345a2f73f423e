"""HTTP error envelope and the exception handlers that render it."""

import logging
from datetime import UTC, datetime
from http import HTTPStatus
from typing import Any, cast

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from couponapi.core.exceptions import BusinessRuleError, CouponNotFoundError

logger = logging.getLogger(__name__)

VALIDATION_ERROR_MESSAGE = "Validation error."
INTERNAL_ERROR_MESSAGE = "Internal error. Please try again later."
REQUEST_LOCATIONS = ("body", "query", "path", "header", "cookie")


def error_body(
    status_code: int,
    message: str,
    details: dict[str, str] | None = None,
) -> dict[str, Any]:
    """Build the uniform error envelope.

    ``details`` is only included when given, so business and not-found
    errors carry a single message.
    """
    body: dict[str, Any] = {
        "timestamp": datetime.now(UTC).isoformat(),
        "status": status_code,
        "error": HTTPStatus(status_code).phrase,
        "message": message,
    }
    if details is not None:
        body["details"] = details
    return body


def field_errors(exc: RequestValidationError) -> dict[str, str]:
    """Collapse pydantic errors into a field -> message map, first error wins."""
    details: dict[str, str] = {}
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ())]
        if loc and loc[0] in REQUEST_LOCATIONS:
            loc = loc[1:]
        field = "body" if err.get("type") == "json_invalid" else ".".join(loc) or "body"
        details.setdefault(field, str(err.get("msg", "Invalid value")))
    return details


async def request_validation_handler(request: Request, exc: Exception) -> JSONResponse:
    details = field_errors(cast(RequestValidationError, exc))
    logger.info("Rejected %s %s: %s", request.method, request.url.path, details)
    return JSONResponse(
        status_code=400,
        content=error_body(400, VALIDATION_ERROR_MESSAGE, details),
    )


async def business_rule_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.warning("Business rule violated on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=422, content=error_body(422, str(exc)))


async def not_found_handler(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=404, content=error_body(404, str(exc)))


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    http_exc = cast(StarletteHTTPException, exc)
    return JSONResponse(
        status_code=http_exc.status_code,
        content=error_body(http_exc.status_code, str(http_exc.detail)),
        headers=http_exc.headers,
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content=error_body(500, INTERNAL_ERROR_MESSAGE))


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the envelope handlers to an application."""
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(BusinessRuleError, business_rule_handler)
    app.add_exception_handler(CouponNotFoundError, not_found_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
