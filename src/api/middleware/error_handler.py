"""
Global error handling middleware for the FastAPI application.

Catches VoiceTaskError subclasses, Pydantic validation errors, and
unhandled exceptions, converting them into a ``{"error": ...}`` envelope.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.core.exceptions import VoiceTaskError

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Failed to transcribe audio"


def _describe(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        loc = ".".join(str(p) for p in error.get("loc", ()))
        msg = error.get("msg", "invalid")
        parts.append(f"{loc}: {msg}" if loc else msg)
    if not parts:
        return "Invalid request"
    return "Invalid request: " + "; ".join(parts)


def register_error_handlers(app: FastAPI) -> None:
    """Attach exception handlers to the FastAPI application.

    Registers three handlers in priority order:
    1. ``VoiceTaskError``: domain errors, with their own status code.
    2. ``RequestValidationError``: malformed request (422).
    3. ``Exception``: catch-all for unexpected server errors (500).

    Args:
        app: The FastAPI application instance to register handlers on.
    """

    @app.exception_handler(VoiceTaskError)
    async def voicetask_error_handler(_request: Request, exc: VoiceTaskError) -> JSONResponse:
        """Convert domain-specific errors into the JSON error envelope."""
        if exc.status_code >= 500:
            logger.error("%s: %s", exc.code, exc.detail)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle request validation errors (malformed body/params).

        Only field locations and messages are returned.
        """
        return JSONResponse(status_code=422, content={"error": _describe(exc)})

    @app.exception_handler(Exception)
    async def generic_error_handler(_request: Request, exc: Exception) -> JSONResponse:
        """Catch-all handler: prevents stack traces from leaking to clients."""
        logger.exception("Error transcribing audio: %s", exc)
        return JSONResponse(status_code=500, content={"error": GENERIC_ERROR})
