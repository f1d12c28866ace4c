"""Customer Search: lookup by email, by phone, and free-text search.

Invariants:
    - Input validated before the provider is contacted (400 otherwise)
    - Exactly one provider call per request
    - email/phone lookups fixed at limit=10; free-text limit capped at 50
    - Response always {success, data, total} (+ query for free-text)

Design Decisions:
    - Registered before customer_records so /search is never read as an id
"""

import logging

from fastapi import APIRouter, Depends, Query

from fieldroutes_relay.api.dependencies import get_provider_client
from fieldroutes_relay.core.errors import InvalidRequestError, UpstreamError
from fieldroutes_relay.core.normalize_errors import normalize_provider_error
from fieldroutes_relay.core.validate_inputs import (
    clamp_limit,
    clamp_offset,
    is_valid_email,
    normalize_phone,
    normalize_query,
)
from fieldroutes_relay.infrastructure.provider_client import ProviderClient
from fieldroutes_relay.schemas.envelope import ListEnvelope, SearchEnvelope
from fieldroutes_relay.schemas.provider import CustomerPage

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/customers/search", tags=["customers"])

LOOKUP_LIMIT = 10
SEARCH_LIMIT_CAP = 50


@router.get("/email/{email}", response_model=ListEnvelope)
async def search_by_email(
    email: str, client: ProviderClient = Depends(get_provider_client),
):
    """Customers whose email matches exactly."""
    if not is_valid_email(email):
        raise InvalidRequestError(
            "Invalid email address",
            "Please provide a valid email address",
            field="email",
        )

    try:
        payload = await client.get(
            "/customers", params={"email": email, "limit": LOOKUP_LIMIT},
        )
    except UpstreamError as e:
        raise normalize_provider_error(
            e, "Failed to search customers by email",
        ) from e

    page = CustomerPage.parse(payload)
    return ListEnvelope(data=page.customers, total=page.total)


@router.get("/phone/{phone}", response_model=ListEnvelope)
async def search_by_phone(
    phone: str, client: ProviderClient = Depends(get_provider_client),
):
    """Customers by phone number; formatting characters are ignored."""
    if not phone:
        raise InvalidRequestError(
            "Phone number required",
            "Please provide a phone number",
            field="phone",
        )

    try:
        payload = await client.get(
            "/customers",
            params={"phone": normalize_phone(phone), "limit": LOOKUP_LIMIT},
        )
    except UpstreamError as e:
        raise normalize_provider_error(
            e, "Failed to search customers by phone",
        ) from e

    page = CustomerPage.parse(payload)
    return ListEnvelope(data=page.customers, total=page.total)


@router.get("", response_model=SearchEnvelope)
async def search_customers(
    q: str | None = Query(None),
    limit: int = Query(10),
    offset: int = Query(0),
    client: ProviderClient = Depends(get_provider_client),
):
    """Free-text search across customer records."""
    query = normalize_query(q)
    if query is None:
        raise InvalidRequestError(
            "Invalid search query",
            "Search query must be at least 2 characters long",
            field="q",
        )

    try:
        payload = await client.get(
            "/customers/search",
            params={
                "q": query,
                "limit": clamp_limit(limit, SEARCH_LIMIT_CAP),
                "offset": clamp_offset(offset),
            },
        )
    except UpstreamError as e:
        raise normalize_provider_error(e, "Failed to search customers") from e

    page = CustomerPage.parse(payload)
    return SearchEnvelope(data=page.customers, total=page.total, query=query)
