"""
Global exception handlers. This is the single place that decides the status
code and body a client sees for a failure.

    ApiError                 -> status from errors.status_for(kind)
    RequestValidationError   -> VALIDATION_FAILURE (missing/malformed input)
    HTTPException (routing)  -> same envelope, status kept
    Exception                -> INTERNAL, message never leaked
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from biztime.core.errors import (
    ApiError,
    ErrorKind,
    error_body,
    internal,
    to_response,
    validation_failure,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_api_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _legacy_validation_status(request: Request) -> bool:
    return getattr(request.app.state, "legacy_validation_status", False)


def _reply(request: Request, error: ApiError) -> JSONResponse:
    status_code, body = to_response(error, _legacy_validation_status(request))
    return JSONResponse(status_code=status_code, content=body)


def _register_api_error_handler(app: FastAPI) -> None:

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        level = logging.ERROR if exc.kind is ErrorKind.INTERNAL else logging.INFO
        logger.log(
            level,
            f"{exc.kind.value}: {exc.message}",
            extra={"error_kind": exc.kind.value, "path": request.url.path},
        )
        return _reply(request, exc)


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
        return _reply(request, validation_failure(_describe(exc)))


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(str(exc.detail), exc.status_code),
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.method} {request.url.path}: {exc}",
            exc_info=exc,
        )
        return _reply(request, internal())


def _describe(exc: RequestValidationError) -> str:
    """One line per bad field, e.g. "body.name: Field required"."""
    parts = []
    for e in exc.errors():
        field = ".".join(str(loc) for loc in e["loc"])
        parts.append(f"{field}: {e['msg']}")
    return "; ".join(parts) or "Invalid request data"
