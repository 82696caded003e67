from fastapi import APIRouter, Depends

from src.dependencies import get_runtime
from src.runtime import ProcessRuntime
from src.schemas.info import RuntimeInfo

router = APIRouter(tags=["Runtime"])


@router.get("/info", response_model=RuntimeInfo)
async def runtime_info(runtime: ProcessRuntime = Depends(get_runtime)) -> RuntimeInfo:  # noqa: B008
    """Snapshot the interpreter version, platform, memory and uptime."""
    return RuntimeInfo(
        runtime_version=runtime.runtime_version(),
        platform=runtime.platform_name(),
        memory=runtime.memory_usage(),
        uptime_seconds=runtime.uptime_seconds(),
    )
