"""
Application Exceptions
======================

Translates pipeline exceptions into HTTP errors. Lookup walks the
exception's class hierarchy, so a subclass without its own entry inherits
the status of its nearest mapped parent.
"""

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse

from .logger import get_logger

logger = get_logger(__name__)


# =============================================================================
# STATUS MAPPING
# =============================================================================

# Exception class name -> (status_code, user_message)
EXCEPTION_MAP: dict[str, tuple[int, str]] = {
    # Bad input
    "UnknownTemplateError": (400, "Unknown mock data template."),
    "ArgumentError": (400, "Invalid database connection string."),
    "ValueError": (400, "Invalid request."),

    # Target database
    "SchemaFetchError": (502, "Could not read the database schema."),
    "DatabaseError": (502, "The target database returned an error."),

    # LLM
    "LLMUnavailableError": (503, "Text generation is not configured."),
    "GenerationError": (502, "Text generation failed."),
}

DEFAULT_ERROR = (500, "Internal server error.")


def _lookup(exc: Exception) -> tuple[int, str]:
    for cls in type(exc).__mro__:
        if cls.__name__ in EXCEPTION_MAP:
            return EXCEPTION_MAP[cls.__name__]
    return DEFAULT_ERROR


def get_http_exception(exc: Exception) -> HTTPException:
    """
    Build the HTTPException for a pipeline error.

    The response detail carries a short user-facing message plus the
    original error text.
    """
    status_code, user_message = _lookup(exc)
    return HTTPException(
        status_code=status_code,
        detail={"status": "error", "message": user_message, "detail": str(exc)},
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler registered for ``Exception``."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    http_exc = get_http_exception(exc)
    return JSONResponse(status_code=http_exc.status_code, content=http_exc.detail)
