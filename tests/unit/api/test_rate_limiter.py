"""
Unit tests for the rate limiting middleware.
"""

from types import SimpleNamespace

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from skillswapper.api.middleware import rate_limiter as rate_limiter_module
from skillswapper.api.middleware.rate_limiter import RateLimiterMiddleware
from skillswapper.config.settings import Settings


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def time(self) -> float:
        return self.now


class TestRateLimiterMiddleware:
    """Test cases for RateLimiterMiddleware."""

    @pytest.fixture
    def clock(self, monkeypatch):
        clock = FakeClock()
        monkeypatch.setattr(rate_limiter_module, "time", SimpleNamespace(time=clock.time))
        return clock

    @pytest.fixture
    def config(self):
        return Settings(
            ENVIRONMENT="test",
            RATE_LIMIT_WINDOW=60,
            RATE_LIMIT_REQUESTS=2,
            AUTH_RATE_LIMIT_REQUESTS=1,
        )

    @pytest.fixture
    def limiter(self, clock, config):
        return RateLimiterMiddleware(FastAPI(), config)

    def test_blocks_after_limit_until_window_passes(self, limiter, clock):
        assert limiter._is_allowed("api:1.2.3.4", 2)
        assert limiter._is_allowed("api:1.2.3.4", 2)
        assert not limiter._is_allowed("api:1.2.3.4", 2)

        clock.now += 61

        assert limiter._is_allowed("api:1.2.3.4", 2)

    def test_idle_clients_are_forgotten(self, limiter, clock):
        for i in range(50):
            limiter._is_allowed(f"api:10.0.0.{i}", 2)
        assert len(limiter.requests) == 50

        clock.now += 61
        limiter._is_allowed("api:192.168.0.1", 2)

        assert list(limiter.requests) == ["api:192.168.0.1"]

    def test_active_clients_survive_sweep(self, limiter, clock):
        limiter._is_allowed("api:idle", 2)
        clock.now += 30
        limiter._is_allowed("api:active", 2)

        clock.now += 31
        limiter._is_allowed("api:other", 2)

        assert set(limiter.requests) == {"api:active", "api:other"}

    @pytest.mark.asyncio
    async def test_auth_routes_get_stricter_budget(self, clock, config):
        app = FastAPI()

        @app.post("/api/auth/login")
        async def login():
            return {"success": True}

        @app.get("/api/skills")
        async def skills():
            return {"success": True}

        RateLimiterMiddleware(app, config)

        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            first = await client.post("/api/auth/login")
            second = await client.post("/api/auth/login")
            other = await client.get("/api/skills")

        assert first.status_code == 200
        assert second.status_code == 429
        assert second.json()["success"] is False
        assert second.headers["Retry-After"] == "60"
        assert other.status_code == 200
