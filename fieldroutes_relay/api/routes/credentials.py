"""Credential Test: checks a key/secret pair with a one-record provider probe.

Invariants:
    - Credentials come from the JSON body, not headers (this route validates them)
    - Missing body or missing apiKey/apiSecret -> 400 without a provider call
    - Provider 401/403 -> 401 "Invalid credentials"
    - Reports the base URL actually probed (override or configured default)
"""

import logging

from fastapi import APIRouter, Depends

from fieldroutes_relay.api.dependencies import get_app_settings
from fieldroutes_relay.config import Settings
from fieldroutes_relay.core.errors import InvalidRequestError, UpstreamError
from fieldroutes_relay.core.normalize_errors import (
    CREDENTIAL_PROBE,
    normalize_provider_error,
)
from fieldroutes_relay.infrastructure.provider_client import create_provider_client
from fieldroutes_relay.schemas.credentials import CredentialTestRequest
from fieldroutes_relay.schemas.envelope import ConnectionStatus, CredentialTestEnvelope

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["credentials"])


@router.post("/test-credentials", response_model=CredentialTestEnvelope)
async def test_credentials(
    body: CredentialTestRequest | None = None,
    settings: Settings = Depends(get_app_settings),
):
    if body is None or not body.api_key or not body.api_secret:
        raise InvalidRequestError(
            "Missing credentials", "API key and secret are required",
        )

    try:
        client = create_provider_client(
            body.api_key,
            body.api_secret,
            body.base_url,
            default_base_url=settings.fieldroutes_api_url,
            timeout_seconds=settings.provider_timeout_seconds,
        )
        async with client:
            await client.get("/customers", params={"limit": 1})
    except UpstreamError as e:
        raise normalize_provider_error(
            e, "Failed to test credentials", CREDENTIAL_PROBE,
        ) from e

    logger.info(f"Credentials verified against {client.base_url}")
    return CredentialTestEnvelope(
        data=ConnectionStatus(connected=True, base_url=client.base_url),
    )
