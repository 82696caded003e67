"""Shared pytest fixtures.

Fixture scopes
--------------
* ``clean_env``    : function, unset deployment overrides from the environment.
* ``app_settings`` : function, :class:`Settings` with every override removed.
* ``runtime``      : function, :class:`FixedRuntime` with pinned process facts.
* ``app``          : function, application built around the two above.
* ``async_client`` : function, httpx client wrapping ``app``.
"""

import random
from collections.abc import AsyncGenerator
from datetime import UTC, datetime

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from src.config import Settings
from src.main import create_app
from src.runtime import ProcessRuntime

FIXED_NOW = datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC)
FIXED_UPTIME = 42.5
FIXED_MEMORY = {"rss": 50_331_648, "maxRss": 52_428_800}

_OVERRIDE_VARS = ("APP_ENV", "NODE_ENV", "HOSTNAME", "PORT", "HOST", "LOG_LEVEL")


class FixedRuntime(ProcessRuntime):
    """Runtime whose clock, uptime and memory never move; RNG is seeded."""

    def __init__(self, seed: int = 1234) -> None:
        super().__init__(rng=random.Random(seed))

    def now(self) -> datetime:
        return FIXED_NOW

    def uptime_seconds(self) -> float:
        return FIXED_UPTIME

    def memory_usage(self) -> dict[str, int]:
        return dict(FIXED_MEMORY)

    def runtime_version(self) -> str:
        return "3.12.4"

    def platform_name(self) -> str:
        return "linux"


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove deployment overrides that a container or shell may export."""
    for name in _OVERRIDE_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def app_settings(clean_env: None) -> Settings:  # noqa: ARG001
    return Settings(_env_file=None)


@pytest.fixture
def runtime() -> FixedRuntime:
    return FixedRuntime()


@pytest.fixture
def app(app_settings: Settings, runtime: FixedRuntime) -> FastAPI:
    return create_app(app_settings, runtime)


@pytest.fixture
async def async_client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
