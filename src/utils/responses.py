"""JSON response class used for every response the service produces."""

from collections.abc import Mapping
from typing import Any

from fastapi.responses import JSONResponse
from starlette.background import BackgroundTask

ALLOW_ANY_ORIGIN = {"Access-Control-Allow-Origin": "*"}


class CorsJSONResponse(JSONResponse):
    """``application/json`` response that always allows any origin.

    Starlette's ``CORSMiddleware`` only decorates requests that carry an
    ``Origin`` header; this class puts the header on every response, including
    the 404 and 500 envelopes built by the error handlers.
    """

    def __init__(
        self,
        content: Any,
        status_code: int = 200,
        headers: Mapping[str, str] | None = None,
        media_type: str | None = None,
        background: BackgroundTask | None = None,
    ) -> None:
        merged = {**ALLOW_ANY_ORIGIN, **(headers or {})}
        super().__init__(content, status_code, merged, media_type, background)
