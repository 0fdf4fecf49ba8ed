"""
Cross‑origin headers for every response.

The desktop front end calls the API from a different origin, so every
response carries a permissive ``Access-Control-Allow-*`` set and any
``OPTIONS`` request is answered immediately with an empty 200, before
routing.  Unexpected exceptions are turned into a 500 error envelope
here so that even those responses keep the CORS headers.
"""

import logging
from typing import Awaitable, Callable, Dict, Optional

from fastapi import FastAPI, Request, Response, status

from .config import settings
from .errors import INTERNAL_ERROR_MESSAGE, error_response

logger = logging.getLogger(__name__)

ALLOWED_METHODS = "GET, POST, PUT, DELETE, OPTIONS"
ALLOWED_HEADERS = "Content-Type, Authorization"


def cors_headers(allow_origin: str = "*") -> Dict[str, str]:
    return {
        "Access-Control-Allow-Origin": allow_origin,
        "Access-Control-Allow-Methods": ALLOWED_METHODS,
        "Access-Control-Allow-Headers": ALLOWED_HEADERS,
    }


def install_cors(app: FastAPI, allow_origin: Optional[str] = None) -> None:
    """Register the CORS middleware on ``app``.

    ``allow_origin`` defaults to ``settings.cors_allow_origin``.
    """
    headers = cors_headers(allow_origin or settings.cors_allow_origin)

    @app.middleware("http")
    async def add_cors_headers(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        if request.method == "OPTIONS":
            response = Response(status_code=status.HTTP_200_OK)
        else:
            try:
                response = await call_next(request)
            except Exception:
                logger.exception("Unhandled error while serving %s %s", request.method, request.url.path)
                response = error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)
        response.headers.update(headers)
        return response
