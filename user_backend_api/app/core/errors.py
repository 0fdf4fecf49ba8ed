"""
Error taxonomy and error envelope handlers.

The user store reports failures as ``StoreError`` values rather than
raising.  Route handlers translate them into ``HTTPException`` using
``http_status_for``; the handlers registered by
``register_exception_handlers`` then render every error response as
``{"success": false, "error": <message>}``.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INVALID_JSON_MESSAGE = "Invalid JSON format"
INTERNAL_ERROR_MESSAGE = "Internal server error"


class StoreErrorKind(str, Enum):
    """Kinds of failure the user store can report."""

    INVALID_ARGUMENT = "InvalidArgument"
    CONFLICT = "Conflict"
    NOT_FOUND = "NotFound"


@dataclass(frozen=True)
class StoreError:
    """A rejected store operation.

    Attributes:
        kind: Which rule was violated.
        message: Human readable description sent back to API clients.
    """

    kind: StoreErrorKind
    message: str


_STATUS_BY_KIND = {
    StoreErrorKind.INVALID_ARGUMENT: status.HTTP_400_BAD_REQUEST,
    StoreErrorKind.CONFLICT: status.HTTP_400_BAD_REQUEST,
    StoreErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


def http_status_for(error: StoreError) -> int:
    """Return the HTTP status code for a store error kind."""
    return _STATUS_BY_KIND[error.kind]


def to_http_exception(error: StoreError) -> HTTPException:
    return HTTPException(status_code=http_status_for(error), detail=error.message)


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build a JSON error envelope."""
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Covers handler‑raised errors as well as the router's own 404/405.
    response = error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("Rejected request body for %s %s: %s", request.method, request.url.path, exc.errors())
    return error_response(status.HTTP_400_BAD_REQUEST, INVALID_JSON_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error envelope handlers to ``app``."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
