"""
content_gateway.api.errors

Exception handlers for the gateway.

Responsibilities:
- Render `GatewayError` subclasses as `{"error": {...}}` with their HTTP status.
- Render request validation and framework HTTP errors in the same shape.
- Log each failure once, at a level matching its severity.
"""

from __future__ import annotations

from http import HTTPStatus
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from content_gateway.errors import GatewayError, UpstreamUnavailable
from content_gateway.observability.logging import get_logger

log = get_logger(__name__)

_VALIDATION_STATUS = int(HTTPStatus.UNPROCESSABLE_ENTITY)


def _error_response(
    body: dict[str, Any], status_code: int, headers: dict[str, str] | None = None
) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": body}, headers=headers)


async def gateway_error_handler(_: Request, exc: GatewayError) -> JSONResponse:
    if isinstance(exc, UpstreamUnavailable):
        log.warning("upstream.unavailable", message=exc.message, details=exc.details)
    else:
        log.info("request.rejected", code=exc.code, message=exc.message)
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return _error_response(exc.to_dict(), exc.status_code, headers)


async def validation_error_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    log.info("request.invalid", errors=len(exc.errors()))
    return _error_response(
        {
            "code": "VALIDATION_ERROR",
            "message": "Request validation failed",
            "statusCode": _VALIDATION_STATUS,
            "details": {"errors": jsonable_encoder(exc.errors())},
        },
        _VALIDATION_STATUS,
    )


async def http_error_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error_response(
        {
            "code": HTTPStatus(exc.status_code).name,
            "message": str(exc.detail),
            "statusCode": exc.status_code,
        },
        exc.status_code,
        getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(GatewayError, gateway_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(
        RequestValidationError, validation_error_handler  # type: ignore[arg-type]
    )
    app.add_exception_handler(StarletteHTTPException, http_error_handler)  # type: ignore[arg-type]


# --- Module Notes -----------------------------------------------------------
# Nothing is downgraded here: every GatewayError keeps the status it was raised with.
