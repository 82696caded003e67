"""Health check endpoint used by container orchestrators as a liveness probe."""

from fastapi import APIRouter, Depends

from src.dependencies import get_runtime
from src.runtime import ProcessRuntime
from src.schemas.health import HealthStatus

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthStatus)
async def health(runtime: ProcessRuntime = Depends(get_runtime)) -> HealthStatus:  # noqa: B008
    """Report that the process is up, with the current time and its uptime."""
    return HealthStatus(timestamp=runtime.now(), uptime_seconds=runtime.uptime_seconds())
