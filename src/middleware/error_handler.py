"""Translate routing misses and unhandled faults into JSON error envelopes.

Two error kinds exist:

* **Route not found**: Starlette raises ``HTTPException(404)`` for an unknown
  path and ``HTTPException(405)`` for a known path with the wrong method.  Both
  are answered with 404 and the requested path echoed back.
* **Internal fault**: any other exception escaping a route handler is logged
  with its traceback and answered with 500 and the exception text.  Plain
  exceptions are caught by :class:`ErrorTranslationMiddleware`; an
  ``HTTPException`` that is not a routing miss reaches
  :func:`http_exception_handler` and takes the same path.
"""

import logging
import traceback

from fastapi import Request, status
from starlette.exceptions import HTTPException
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from src.schemas.common import InternalErrorResponse, RouteNotFoundResponse
from src.utils.responses import CorsJSONResponse
from src.utils.urls import original_url

logger = logging.getLogger(__name__)

_ROUTE_MISS_STATUSES = frozenset({status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED})


async def http_exception_handler(request: Request, exc: HTTPException) -> CorsJSONResponse:
    """Convert routing ``HTTPException``s to the route-not-found envelope.

    A 405 is reported as 404: the route table matches on method and path
    together, so a known path with the wrong method is simply not a route.
    Any other ``HTTPException`` is not a routing miss and gets the 500 envelope.
    """
    if exc.status_code not in _ROUTE_MISS_STATUSES:
        return internal_error_response(request, exc)

    body = RouteNotFoundResponse(path=original_url(request))
    return CorsJSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=body.model_dump())


def internal_error_response(request: Request, exc: Exception) -> CorsJSONResponse:
    """Log *exc* with its traceback and build the 500 envelope for it."""
    logger.error(
        "Unhandled %s on %s %s\n%s",
        type(exc).__name__,
        request.method,
        request.url.path,
        traceback.format_exc(),
    )
    body = InternalErrorResponse(message=str(exc))
    return CorsJSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=body.model_dump(),
    )


class ErrorTranslationMiddleware(BaseHTTPMiddleware):
    """Wrap dispatch so every unexpected exception becomes a 500 JSON response."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            return internal_error_response(request, exc)
