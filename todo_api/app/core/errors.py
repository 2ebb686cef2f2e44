"""
Exception handlers rendering every error as ``{"error": message}``.

FastAPI's defaults answer with ``{"detail": ...}`` and use 422 for
request validation problems.  The todo API contract is narrower: a
malformed or unparsable request body is a 400, and all error payloads
carry a single ``error`` string.  Unexpected exceptions are logged with
their traceback and answered with a generic 500.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def _error_response(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return _error_response(exc.status_code, message, getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    logger.debug("Rejected request to %s: %s", request.url.path, errors)
    message = "Invalid request body"
    if errors:
        first = errors[0]
        if first.get("type") == "json_invalid":
            message = "Request body is not valid JSON"
        else:
            loc = list(first.get("loc", ()))
            if loc and loc[0] == "body":
                loc = loc[1:]
            location = ".".join(str(part) for part in loc)
            if location:
                message = f"Invalid value for '{location}': {first.get('msg', 'invalid')}"
    return _error_response(status.HTTP_400_BAD_REQUEST, message)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error while processing %s %s", request.method, request.url.path)
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the handlers above to ``app``."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
