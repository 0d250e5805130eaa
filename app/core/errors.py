"""
Error handling - domain exceptions and JSON error responses.

Every error leaves the API as {"error": "<message>"}:
- HTTPException          -> its own status code
- RequestValidationError -> 400 "Validation error: ..."
- anything else          -> 500 "Internal server error"
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

# Postgres SQLSTATE codes surfaced by psycopg2
UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"

SESSION_EXPIRED_MESSAGE = "Your session has expired. Please log in again."


class NotFoundError(Exception):
    """Raised by services when a row does not exist or is not owned by the caller."""


class AIServiceError(Exception):
    """Raised when the LLM provider fails or returns an unusable payload."""


class ResumeExtractionError(Exception):
    """Raised when no usable text can be extracted from an uploaded resume."""


def pg_error_code(exc: Exception) -> str:
    """Return the SQLSTATE of a DB error wrapped by SQLAlchemy, if any."""
    orig = getattr(exc, "orig", exc)
    return getattr(orig, "pgcode", None) or ""


def _format_validation_errors(exc: RequestValidationError) -> str:
    messages = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path", "form")]
        field = ".".join(loc)
        msg = err.get("msg", "Invalid value")
        messages.append(f"{field}: {msg}" if field else msg)
    return ", ".join(messages)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"error": f"Validation error: {_format_validation_errors(exc)}"},
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
