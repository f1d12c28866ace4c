"""Provider Payloads: FieldRoutes response bodies parsed with explicit defaults.

Invariants:
    - List fields that are absent, null or not a list -> []
    - total absent, null or not an integer (or digit string) -> 0
    - Non-object bodies parse as empty pages; parse() never raises
    - Unknown provider fields are ignored; records pass through untouched

Design Decisions:
    - Defaults declared on the model instead of `or []` at each call site,
      so missing-field behaviour is one tested contract
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


def _as_list(v: Any) -> list:
    return v if isinstance(v, list) else []


def _as_total(v: Any) -> int:
    if isinstance(v, int) and not isinstance(v, bool):
        return v
    if isinstance(v, str) and v.strip().isdigit():
        return int(v.strip())
    return 0


class ProviderPage(BaseModel):
    """Common shape of every paged provider response."""
    model_config = ConfigDict(extra="ignore")

    total: int = 0

    @field_validator("total", mode="before")
    @classmethod
    def default_total(cls, v: Any) -> int:
        return _as_total(v)

    @classmethod
    def parse(cls, payload: Any):
        """Parse a provider body, treating anything but an object as empty."""
        return cls.model_validate(payload if isinstance(payload, dict) else {})


class CustomerPage(ProviderPage):
    customers: list[Any] = []

    @field_validator("customers", mode="before")
    @classmethod
    def default_customers(cls, v: Any) -> list:
        return _as_list(v)


class ServicePage(ProviderPage):
    services: list[Any] = []

    @field_validator("services", mode="before")
    @classmethod
    def default_services(cls, v: Any) -> list:
        return _as_list(v)


class AppointmentPage(ProviderPage):
    appointments: list[Any] = []

    @field_validator("appointments", mode="before")
    @classmethod
    def default_appointments(cls, v: Any) -> list:
        return _as_list(v)
