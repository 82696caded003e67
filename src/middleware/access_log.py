"""One JSON access-log line per request.

The ``path`` field is the request target exactly as the client sent it, the
same value a 404 envelope echoes back, so a miss in the log can be matched to
the response the client saw.
"""

import json
import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from src.utils.urls import original_url

logger = logging.getLogger(__name__)


class AccessLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        entry = {
            "method": request.method,
            "path": original_url(request),
            "status": response.status_code,
            "duration_ms": round(elapsed_ms, 2),
        }
        logger.info(json.dumps(entry))
        return response
