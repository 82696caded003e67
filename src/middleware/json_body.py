"""Parse JSON request bodies ahead of routing.

No route reads a body, but a client that sends one with a JSON content type
still gets it parsed: the result lands on ``request.state.json_body`` and a
malformed document raises, which the error-translation layer turns into a 500.
"""

import json

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response


def is_json_content_type(content_type: str) -> bool:
    """Return True for ``application/json`` and ``application/*+json`` media types."""
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or (
        media_type.startswith("application/") and media_type.endswith("+json")
    )


class JsonBodyMiddleware(BaseHTTPMiddleware):
    """Decode a non-empty JSON body into ``request.state.json_body``."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if is_json_content_type(request.headers.get("content-type", "")):
            raw = await request.body()
            if raw:
                request.state.json_body = json.loads(raw)
        return await call_next(request)
