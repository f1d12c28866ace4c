"""Error Hierarchy: typed exceptions for every failure the relay reports.

Invariants:
    - Every RelayError has an error label (str), a message and an http_status
    - to_response() produces the flat {error, message, details?} envelope
    - details (raw provider body) only emitted when include_details=True
    - UpstreamError is raised by the provider client, never sent as-is

Design Decisions:
    - Single hierarchy with RelayError base: one FastAPI handler serializes all
      of them (ADR: uniform error shape)
    - UpstreamError kept outside the hierarchy: it describes what the provider
      did, the normalizer decides what the caller sees
"""

from typing import Any


class RelayError(Exception):
    """Base exception for all errors returned to relay callers."""

    def __init__(
        self,
        message: str,
        error: str,
        http_status: int = 500,
        details: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.error = error
        self.http_status = http_status
        self.details = details

    def to_response(self, include_details: bool = False) -> dict:
        """Convert to the flat REST error envelope."""
        body: dict[str, Any] = {"error": self.error, "message": self.message}
        if include_details and self.details is not None:
            body["details"] = self.details
        return body


# ─── Caller errors (400-level) ──────────────────────────────────

class MissingCredentialsError(RelayError):
    """apiKey or apiSecret header absent."""
    def __init__(self):
        super().__init__(
            "API key and secret are required",
            "Missing API credentials", 401,
        )


class InvalidRequestError(RelayError):
    """Input failed validation before any provider call."""
    def __init__(self, error: str, message: str, field: str | None = None):
        super().__init__(message, error, 400)
        self.field = field


class CustomerNotFoundError(RelayError):
    """Provider reported 404 on an identifier-scoped route."""
    def __init__(self):
        super().__init__(
            "No customer found with the provided ID",
            "Customer not found", 404,
        )


class InvalidCredentialsError(RelayError):
    """Provider rejected the credentials under test."""
    def __init__(self):
        super().__init__(
            "The provided API credentials are invalid",
            "Invalid credentials", 401,
        )


class RateLimitedError(RelayError):
    """Caller exceeded the per-address request budget."""
    def __init__(self):
        super().__init__(
            "Too many requests from this IP", "Too many requests", 429,
        )


# ─── Provider errors ────────────────────────────────────────────

class ProviderError(RelayError):
    """Normalized provider or network failure."""
    def __init__(self, message: str, http_status: int = 500, details: Any = None):
        super().__init__(message, "API Error", http_status, details)


class UpstreamError(Exception):
    """Raw outcome of a failed provider call.

    status_code is None for network-level failures (timeout, connection
    refused) where the provider never answered.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body

    @property
    def provider_message(self) -> str | None:
        """The provider's own `message` field, when its body carries one."""
        if isinstance(self.body, dict):
            message = self.body.get("message")
            if message:
                return str(message)
        return None
