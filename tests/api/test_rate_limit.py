"""Rate Limiting: per-address budget enforced ahead of every handler."""

from httpx import ASGITransport, AsyncClient
from limits.strategies import MovingWindowRateLimiter

from fieldroutes_relay.main import create_app
from tests.api.conftest import make_settings


def _client(app) -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


async def test_requests_over_limit_get_429():
    app = create_app(make_settings(rate_limit_enabled=True, rate_limit_requests=2))
    async with _client(app) as c:
        assert (await c.get("/health")).status_code == 200
        assert (await c.get("/health")).status_code == 200
        res = await c.get("/health")

    assert res.status_code == 429
    assert res.json() == {
        "error": "Too many requests",
        "message": "Too many requests from this IP",
    }


async def test_rejected_before_credential_check():
    app = create_app(make_settings(rate_limit_enabled=True, rate_limit_requests=1))
    async with _client(app) as c:
        await c.get("/health")
        res = await c.get("/api/customers/c-1")

    assert res.status_code == 429


async def test_each_app_has_its_own_budget():
    settings = make_settings(rate_limit_enabled=True, rate_limit_requests=1)
    for _ in range(2):
        async with _client(create_app(settings)) as c:
            assert (await c.get("/health")).status_code == 200


async def test_disabled_limiter_never_rejects(client):
    for _ in range(5):
        assert (await client.get("/health")).status_code == 200


def test_limiter_uses_moving_window():
    app = create_app(make_settings(rate_limit_enabled=True))

    assert isinstance(app.state.limiter._limiter, MovingWindowRateLimiter)
