"""Exception handlers that render every error as ``{"detail": "<message>"}``."""
from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from groundbooking.repository.booking_repository import BookingRepositoryError

logger = logging.getLogger(__name__)


def _flatten_detail(detail: Any) -> str:
    if isinstance(detail, str):
        return detail
    if detail is None:
        return "An error occurred"
    if isinstance(detail, dict):
        nested = detail.get("detail")
        if isinstance(nested, str):
            return nested
        return "; ".join(f"{key}: {value}" for key, value in detail.items())
    if isinstance(detail, Iterable) and not isinstance(detail, (bytes, bytearray)):
        return "; ".join(_flatten_detail(item) for item in detail)
    return str(detail)


def _format_validation_errors(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        location = [str(loc) for loc in error.get("loc", ()) if loc != "body"]
        message = error.get("msg", "Invalid input")
        messages.append(f"{'.'.join(location)}: {message}" if location else message)
    return "; ".join(messages) or "Invalid request"


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):  # type: ignore[override]
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": _flatten_detail(exc.detail)},
            headers=exc.headers,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:  # type: ignore[override]
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": _format_validation_errors(exc)},
        )

    @app.exception_handler(BookingRepositoryError)
    async def repository_exception_handler(
        request: Request, exc: BookingRepositoryError
    ) -> JSONResponse:  # type: ignore[override]
        logger.error(
            "Booking storage failure on %s %s: %s", request.method, request.url.path, exc
        )
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": "Booking storage is unavailable"},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:  # type: ignore[override]
        logger.exception(
            "Unhandled exception while processing %s %s", request.method, request.url
        )
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})


__all__ = ["register_exception_handlers"]
