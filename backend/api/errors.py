"""
Exception handlers.

Translates every failure into the {"error": ...} envelope (plus
"details" for validation errors), logs it and forwards it to the error
tracker before responding.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from modules.uploads.exceptions import UploadError
from shared.error_tracking import capture_exception
from shared.exceptions import AppError, InternalError

logger = logging.getLogger(__name__)

GENERIC_MESSAGE = "An unexpected error occurred"


def _report(request: Request, exc: BaseException, status_code: int) -> None:
    attributes = {
        "http.method": request.method,
        "http.route": request.url.path,
        "http.status_code": str(status_code),
    }
    if status_code >= 500:
        logger.error(
            f"{request.method} {request.url.path} failed with {status_code}: {exc}",
            exc_info=exc,
        )
    else:
        logger.warning(f"{request.method} {request.url.path} -> {status_code}: {exc}")
    capture_exception(exc, attributes)


def _app_error_body(exc: AppError) -> dict[str, Any]:
    # Internal causes stay in logs; upload failures carry client-facing text.
    if exc.status_code >= 500 and not isinstance(exc, (UploadError, InternalError)):
        return {"error": InternalError().message}
    return exc.to_dict()


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    _report(request, exc, exc.status_code)
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(
        status_code=exc.status_code,
        content=_app_error_body(exc),
        headers=headers,
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = []
    for error in exc.errors():
        # Drop the leading "body"/"query"/"path" segment.
        location = [str(part) for part in error.get("loc", ())[1:]]
        details.append({
            "field": ".".join(location) or str(error.get("loc", ("request",))[0]),
            "message": error.get("msg", "Invalid value"),
        })
    _report(request, exc, 400)
    return JSONResponse(status_code=400, content={"error": "Validation error", "details": details})


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 415:
        logger.warning(
            f"Unsupported media type on {request.url.path}: "
            f"Content-Type={request.headers.get('content-type')!r}"
        )
    _report(request, exc, exc.status_code)
    message = exc.detail if isinstance(exc.detail, str) else GENERIC_MESSAGE
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": message},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    _report(request, exc, 500)
    return JSONResponse(status_code=500, content={"error": GENERIC_MESSAGE})


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error envelope handlers on an application."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
