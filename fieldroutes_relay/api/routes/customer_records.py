"""Customer Records: a customer by id, its service history and appointments.

Invariants:
    - Customer id checked against settings.customer_id_pattern (400 otherwise)
    - Provider 404 on /customers/{id} and /customers/{id}/services -> "Customer not found"
    - services: limit <= 100, newest first; appointments: limit <= 50
    - status=all never forwarded to the provider
"""

import logging

from fastapi import APIRouter, Depends, Query

from fieldroutes_relay.api.dependencies import get_app_settings, get_provider_client
from fieldroutes_relay.config import Settings
from fieldroutes_relay.core.errors import InvalidRequestError, UpstreamError
from fieldroutes_relay.core.normalize_errors import (
    CUSTOMER_SCOPED,
    normalize_provider_error,
)
from fieldroutes_relay.core.validate_inputs import (
    clamp_limit,
    clamp_offset,
    is_valid_customer_id,
)
from fieldroutes_relay.infrastructure.provider_client import ProviderClient
from fieldroutes_relay.schemas.envelope import ListEnvelope, RecordEnvelope
from fieldroutes_relay.schemas.provider import AppointmentPage, ServicePage

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/customers", tags=["customers"])

SERVICES_LIMIT_CAP = 100
APPOINTMENTS_LIMIT_CAP = 50
ALL_STATUSES = "all"


def _require_customer_id(customer_id: str, settings: Settings) -> None:
    if not is_valid_customer_id(customer_id, settings.customer_id_pattern):
        raise InvalidRequestError(
            "Invalid customer ID",
            "Please provide a valid customer ID",
            field="id",
        )


@router.get("/{customer_id}", response_model=RecordEnvelope)
async def get_customer(
    customer_id: str,
    client: ProviderClient = Depends(get_provider_client),
    settings: Settings = Depends(get_app_settings),
):
    _require_customer_id(customer_id, settings)

    try:
        payload = await client.get(f"/customers/{customer_id}")
    except UpstreamError as e:
        raise normalize_provider_error(
            e, "Failed to fetch customer", CUSTOMER_SCOPED,
        ) from e

    return RecordEnvelope(data=payload)


@router.get("/{customer_id}/services", response_model=ListEnvelope)
async def get_customer_services(
    customer_id: str,
    limit: int = Query(20),
    offset: int = Query(0),
    client: ProviderClient = Depends(get_provider_client),
    settings: Settings = Depends(get_app_settings),
):
    """Service history, most recent first."""
    _require_customer_id(customer_id, settings)

    try:
        payload = await client.get(
            f"/customers/{customer_id}/services",
            params={
                "limit": clamp_limit(limit, SERVICES_LIMIT_CAP),
                "offset": clamp_offset(offset),
                "sort": "date_desc",
            },
        )
    except UpstreamError as e:
        raise normalize_provider_error(
            e, "Failed to fetch service history", CUSTOMER_SCOPED,
        ) from e

    page = ServicePage.parse(payload)
    return ListEnvelope(data=page.services, total=page.total)


@router.get("/{customer_id}/appointments", response_model=ListEnvelope)
async def get_customer_appointments(
    customer_id: str,
    status: str = Query(ALL_STATUSES),
    limit: int = Query(10),
    client: ProviderClient = Depends(get_provider_client),
    settings: Settings = Depends(get_app_settings),
):
    _require_customer_id(customer_id, settings)

    params: dict[str, str | int] = {
        "customer_id": customer_id,
        "limit": clamp_limit(limit, APPOINTMENTS_LIMIT_CAP),
    }
    if status != ALL_STATUSES:
        params["status"] = status

    try:
        payload = await client.get("/appointments", params=params)
    except UpstreamError as e:
        raise normalize_provider_error(e, "Failed to fetch appointments") from e

    page = AppointmentPage.parse(payload)
    return ListEnvelope(data=page.appointments, total=page.total)
