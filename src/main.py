import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException

from src.api.router import api_router, root_router
from src.config import Settings, settings
from src.logging_setup import configure_logging
from src.middleware.access_log import AccessLogMiddleware
from src.middleware.error_handler import ErrorTranslationMiddleware, http_exception_handler
from src.middleware.json_body import JsonBodyMiddleware
from src.runtime import ProcessRuntime
from src.utils.responses import CorsJSONResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    port = app.state.settings.port
    logger.info("Server running on port %d", port)
    logger.info("Health check available at http://localhost:%d/health", port)
    logger.info("Runtime info available at http://localhost:%d/api/info", port)
    yield


def create_app(
    app_settings: Settings | None = None, runtime: ProcessRuntime | None = None
) -> FastAPI:
    """Build the application around the given settings and process runtime.

    Both default to the live environment; tests pass fixed ones.
    """
    app_settings = app_settings if app_settings is not None else settings
    app = FastAPI(
        title=app_settings.app_name,
        version=app_settings.version,
        lifespan=lifespan,
        default_response_class=CorsJSONResponse,
        # The route table is exhaustive; anything else, docs included, is a 404.
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        # "/health/" is not "/health": no 307 hop to the slashless route.
        redirect_slashes=False,
    )
    app.state.settings = app_settings
    app.state.runtime = runtime if runtime is not None else ProcessRuntime()

    # -----------------------------------------------------------------------
    # Exception handlers
    # -----------------------------------------------------------------------

    app.add_exception_handler(HTTPException, http_exception_handler)  # type: ignore[arg-type]

    # -----------------------------------------------------------------------
    # Middleware (Starlette LIFO: last add_middleware call runs outermost)
    # -----------------------------------------------------------------------

    # JsonBodyMiddleware runs innermost so a malformed body surfaces as a fault
    # inside the error-translation layer.
    app.add_middleware(JsonBodyMiddleware)
    app.add_middleware(ErrorTranslationMiddleware)

    # CORSMiddleware answers preflight requests; CorsJSONResponse covers the rest.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # AccessLogMiddleware runs outermost so it records the final status code.
    app.add_middleware(AccessLogMiddleware)

    app.include_router(root_router)
    app.include_router(api_router)
    return app


app = create_app()


def run() -> None:
    """Serve :data:`app` with uvicorn on ``HOST:PORT``."""
    configure_logging(settings.log_level)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        log_config=None,
    )


if __name__ == "__main__":
    run()
