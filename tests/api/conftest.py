"""Route test fixtures: app per test + httpx client over ASGI.

Invariants:
    - Every test gets a fresh app (own Settings, own rate-limit store)
    - Rate limiting disabled unless a test builds its own settings
    - Provider calls intercepted by respx (respx_mock fixture)

Design Decisions:
    - raise_app_exceptions=False: the catch-all 500 handler is asserted on,
      not re-raised into the test
"""

import pytest
from httpx import ASGITransport, AsyncClient

from fieldroutes_relay.config import Settings
from fieldroutes_relay.main import create_app

PROVIDER_URL = "https://provider.test/v1"
CREDENTIAL_HEADERS = {"apiKey": "key-123", "apiSecret": "secret-456"}


def make_settings(**overrides) -> Settings:
    values = {
        "fieldroutes_api_url": PROVIDER_URL,
        "app_env": "development",
        "rate_limit_enabled": False,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def auth_headers():
    return dict(CREDENTIAL_HEADERS)
