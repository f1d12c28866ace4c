"""Credential Test Request: body of POST /api/test-credentials.

Invariants:
    - Fields optional at the schema level: the route reports missing
      credentials with its own 400 body instead of a generic validation error
    - Wire names are camelCase (apiKey, apiSecret, baseUrl)
"""

from pydantic import BaseModel, ConfigDict, Field


class CredentialTestRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    api_key: str | None = Field(None, alias="apiKey")
    api_secret: str | None = Field(None, alias="apiSecret")
    base_url: str | None = Field(None, alias="baseUrl")
