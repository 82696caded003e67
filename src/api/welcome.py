from fastapi import APIRouter, Depends

from src.config import Settings
from src.dependencies import get_settings
from src.schemas.info import WelcomeInfo

router = APIRouter(tags=["Welcome"])


@router.get("/", response_model=WelcomeInfo)
async def welcome(settings: Settings = Depends(get_settings)) -> WelcomeInfo:  # noqa: B008
    """Greet the caller and say which environment and container answered."""
    return WelcomeInfo(
        message=settings.welcome_message,
        version=settings.version,
        environment=settings.app_env,
        container=settings.hostname,
    )
