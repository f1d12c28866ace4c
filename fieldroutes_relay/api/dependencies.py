"""Request Dependencies: settings lookup and the credential-bound provider client.

Invariants:
    - Missing apiKey/apiSecret -> MissingCredentialsError before any provider call
    - The yielded ProviderClient is closed when the request finishes
    - Credentials never logged

Design Decisions:
    - Settings read from app.state (set by create_app) instead of the lru_cache
      singleton, so each test app can carry its own configuration
"""

from collections.abc import AsyncIterator

from fastapi import Depends, Header, Request

from fieldroutes_relay.config import Settings
from fieldroutes_relay.core.errors import MissingCredentialsError
from fieldroutes_relay.infrastructure.provider_client import (
    ProviderClient,
    create_provider_client,
)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


async def get_provider_client(
    api_key: str | None = Header(None, alias="apiKey"),
    api_secret: str | None = Header(None, alias="apiSecret"),
    settings: Settings = Depends(get_app_settings),
) -> AsyncIterator[ProviderClient]:
    """Validate forwarded credentials and yield a client bound to them."""
    if not api_key or not api_secret:
        raise MissingCredentialsError()

    client = create_provider_client(
        api_key,
        api_secret,
        default_base_url=settings.fieldroutes_api_url,
        timeout_seconds=settings.provider_timeout_seconds,
    )
    async with client:
        yield client
