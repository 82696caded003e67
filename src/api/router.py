"""Route table: ``/`` and ``/health`` at the root, runtime endpoints under ``/api``."""

from fastapi import APIRouter

from src.api.health import router as health_router
from src.api.info import router as info_router
from src.api.random_number import router as random_router
from src.api.welcome import router as welcome_router

root_router = APIRouter()
root_router.include_router(health_router)
root_router.include_router(welcome_router)

api_router = APIRouter(prefix="/api")
api_router.include_router(info_router)
api_router.include_router(random_router)
