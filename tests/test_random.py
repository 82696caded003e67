"""Tests for GET /api/random: uniform integer sample in [0, 100)."""

import random
from collections import Counter
from datetime import datetime

import pytest
from httpx import AsyncClient

from src.runtime import ProcessRuntime


@pytest.mark.asyncio
async def test_random_returns_200(async_client: AsyncClient) -> None:
    response = await async_client.get("/api/random")
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_random_number_in_range(async_client: AsyncClient) -> None:
    for _ in range(200):
        body = (await async_client.get("/api/random")).json()
        assert isinstance(body["number"], int)
        assert 0 <= body["number"] < 100


@pytest.mark.asyncio
async def test_random_timestamp_is_iso8601(
    async_client: AsyncClient, runtime: ProcessRuntime
) -> None:
    body = (await async_client.get("/api/random")).json()
    assert datetime.fromisoformat(body["timestamp"]) == runtime.now()
    assert set(body) == {"number", "timestamp"}


@pytest.mark.asyncio
async def test_random_follows_runtime_rng(async_client: AsyncClient) -> None:
    """The endpoint draws from the injected RNG, so a seeded runtime is reproducible."""
    expected = random.Random(1234)
    for _ in range(5):
        body = (await async_client.get("/api/random")).json()
        assert body["number"] == expected.randrange(100)


def test_random_int_is_uniform() -> None:
    runtime = ProcessRuntime(rng=random.Random(7))
    samples = [runtime.random_int(100) for _ in range(10_000)]

    assert set(samples) == set(range(100))
    deciles = Counter(n // 10 for n in samples)
    # Expected 1000 per decile; the standard deviation is about 30.
    assert all(850 <= deciles[d] <= 1150 for d in range(10))
