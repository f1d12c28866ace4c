"""FieldRoutes Provider Client: per-request httpx client with auth headers and error mapping.

Invariants:
    - One client per inbound request, closed when the request ends (never pooled)
    - Every request carries Bearer key, X-API-Secret and a JSON content type
    - Fixed timeout; no retry, no backoff
    - All failures mapped to UpstreamError (core/errors.py), including an unusable base URL

Design Decisions:
    - Fresh client per request over a shared pool: credentials are per caller,
      so a shared client could leak one tenant's headers to another
    - Wrapper over raw httpx: routes see dicts and UpstreamError, never httpx types
"""

import logging
from typing import Any

import httpx

from fieldroutes_relay.core.errors import UpstreamError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.fieldroutes.com/v1"
DEFAULT_TIMEOUT_SECONDS = 10.0
SECRET_HEADER = "X-API-Secret"


class ProviderClient:
    """Async FieldRoutes API client bound to one set of credentials."""

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        self.base_url = base_url
        self.timeout_seconds = timeout_seconds
        try:
            self._client = httpx.AsyncClient(
                base_url=base_url,
                timeout=timeout_seconds,
                headers={
                    "Authorization": f"Bearer {api_key}",
                    SECRET_HEADER: api_secret,
                    "Content-Type": "application/json",
                },
            )
        except httpx.InvalidURL as e:
            raise UpstreamError(f"Invalid provider base URL: {base_url}") from e

    async def __aenter__(self) -> "ProviderClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """GET a provider resource and return its decoded JSON body."""
        return await self._request("GET", path, params=params)

    async def _request(
        self, method: str, path: str, params: dict[str, Any] | None = None,
    ) -> Any:
        try:
            response = await self._client.request(method, path, params=params)
        except httpx.TimeoutException as e:
            raise UpstreamError(str(e) or "Provider request timed out") from e
        except httpx.RequestError as e:
            raise UpstreamError(str(e) or "Provider connection failed") from e

        if not response.is_success:
            raise UpstreamError(
                f"Request failed with status code {response.status_code}",
                status_code=response.status_code,
                body=_decode_body(response),
            )

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError(
                "Provider returned an invalid JSON body",
            ) from e


def _decode_body(response: httpx.Response) -> Any:
    """Error bodies: JSON when possible, raw text otherwise, None when empty."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def create_provider_client(
    api_key: str,
    api_secret: str,
    base_url: str | None = None,
    *,
    default_base_url: str = DEFAULT_BASE_URL,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
) -> ProviderClient:
    """Build a client for one request; base_url overrides the configured endpoint."""
    return ProviderClient(
        api_key,
        api_secret,
        base_url=base_url or default_base_url,
        timeout_seconds=timeout_seconds,
    )
