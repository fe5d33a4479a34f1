"""Error Handlers: map every failure to the DeckPoolError envelope.

Invariants:
    - All error responses share one shape: DeckPoolError.to_response()
    - RequestValidationError becomes RequestValidationFailedError (400, field details)
    - Anything else becomes InternalError (500); the cause is logged, never returned
    - 4xx logged as warnings, 5xx as errors

Design Decisions:
    - Framework exceptions converted into the domain hierarchy instead of
      hand-built dicts: clients parse a single error format
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from deckpool.core.errors import (
    DeckPoolError, InternalError, RequestValidationFailedError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Install the deckpool, validation and catch-all handlers on the app."""

    @app.exception_handler(DeckPoolError)
    async def deckpool_error_handler(request: Request, exc: DeckPoolError):
        return _error_response(request, exc)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        return _error_response(
            request, RequestValidationFailedError(validation_details(exc)),
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=exc,
        )
        return _error_response(request, InternalError())


def validation_details(exc: RequestValidationError) -> list[dict]:
    """Flatten pydantic errors to JSON-safe field/message/type records."""
    return [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]


def _error_response(request: Request, exc: DeckPoolError) -> JSONResponse:
    log = logger.warning if exc.http_status < 500 else logger.error
    log(
        f"{exc.code} on {request.url.path}: {exc.message}",
        extra={"error_code": exc.code, "path": request.url.path},
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())
