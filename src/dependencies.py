"""FastAPI dependencies exposing the settings and runtime bound at app construction."""

from fastapi import Request

from src.config import Settings
from src.runtime import ProcessRuntime

__all__ = ["get_settings", "get_runtime"]


def get_settings(request: Request) -> Settings:
    """Return the :class:`Settings` passed to :func:`src.main.create_app`."""
    settings: Settings = request.app.state.settings
    return settings


def get_runtime(request: Request) -> ProcessRuntime:
    """Return the :class:`ProcessRuntime` passed to :func:`src.main.create_app`."""
    runtime: ProcessRuntime = request.app.state.runtime
    return runtime
