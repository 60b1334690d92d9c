"""Error Handlers - global exception handlers for the roster API.

Invariants:
    - RosterError -> its http_status with the bare reason phrase as text
    - RequestValidationError -> 400 "Bad Request"
    - HTTPException (unknown route, wrong method) -> its status, bare reason phrase
    - Exception (catch-all) -> 500 "Internal Server Error", never leaks internal details

Design Decisions:
    - Plain-text bodies: failures are told apart from success by status only
    - RosterError logged at the level its severity names; tracebacks from ERROR up
    - Unhandled exceptions answered by catch_unhandled_errors, a middleware
      inside CORSMiddleware, so cross-origin clients can read the 500
"""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from roster.core.errors import ErrorSeverity, RosterError, ValidationError

logger = logging.getLogger(__name__)

_TRACEBACK_SEVERITIES = frozenset({ErrorSeverity.ERROR, ErrorSeverity.CRITICAL})


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_roster_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _plain(status_code: int) -> PlainTextResponse:
    return PlainTextResponse(
        HTTPStatus(status_code).phrase, status_code=status_code,
    )


def _register_roster_error_handler(app: FastAPI) -> None:
    """Register roster domain/store error handler."""

    @app.exception_handler(RosterError)
    async def roster_error_handler(request: Request, exc: RosterError):
        extra = {**exc.to_log_extra(), "path": request.url.path}
        message = f"RosterError: {exc.message}"
        if isinstance(exc, ValidationError) and exc.details:
            message = f"{message}: {exc.details}"
        logger.log(
            exc.severity.log_level, message, extra=extra,
            exc_info=exc if exc.severity in _TRACEBACK_SEVERITIES else None,
        )
        return PlainTextResponse(exc.public_message, status_code=exc.http_status)


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register FastAPI request validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return _plain(status.HTTP_400_BAD_REQUEST)


def _register_http_error_handler(app: FastAPI) -> None:
    """Register routing-level HTTP error handler."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        logger.warning(f"HTTP {exc.status_code} on {request.url.path}")
        return PlainTextResponse(
            HTTPStatus(exc.status_code).phrase,
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all - never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return _plain(status.HTTP_500_INTERNAL_SERVER_ERROR)


async def catch_unhandled_errors(request: Request, call_next) -> Response:
    """HTTP middleware answering unexpected exceptions with a plain 500.

    Register it before CORSMiddleware so the response still passes through
    CORS. The Exception handler above stays as the last resort for failures
    raised outside this middleware.
    """
    try:
        return await call_next(request)
    except Exception as exc:
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return _plain(status.HTTP_500_INTERNAL_SERVER_ERROR)
