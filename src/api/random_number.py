from fastapi import APIRouter, Depends

from src.dependencies import get_runtime
from src.runtime import ProcessRuntime
from src.schemas.sample import RANDOM_UPPER_BOUND, RandomSample

router = APIRouter(tags=["Runtime"])


@router.get("/random", response_model=RandomSample)
async def random_number(runtime: ProcessRuntime = Depends(get_runtime)) -> RandomSample:  # noqa: B008
    return RandomSample(number=runtime.random_int(RANDOM_UPPER_BOUND), timestamp=runtime.now())
