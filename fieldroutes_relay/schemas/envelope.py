"""Response Envelopes: uniform success shapes returned by every customer route.

Invariants:
    - success is always True here (errors use RelayError.to_response())
    - data passes provider records through unchanged
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RecordEnvelope(BaseModel):
    """Single provider record."""
    success: bool = True
    data: Any = None


class ListEnvelope(BaseModel):
    """Page of provider records with the provider's total."""
    success: bool = True
    data: list[Any] = []
    total: int = 0


class SearchEnvelope(ListEnvelope):
    """Free-text search page, echoing the trimmed query."""
    query: str


class ConnectionStatus(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    connected: bool = True
    base_url: str = Field(serialization_alias="baseUrl")


class CredentialTestEnvelope(BaseModel):
    success: bool = True
    message: str = "Credentials are valid"
    data: ConnectionStatus
