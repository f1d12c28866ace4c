"""Error Normalization: maps provider and network failures onto RelayError.

Invariants:
    - Status mirrors the provider status when present, else 500
    - Message precedence: provider body `message` > error message > route default
    - Override statuses bypass the generic path (and its error log)
    - Every generic normalization is logged with status, body and stack trace

Design Decisions:
    - Route-specific status handling passed in as an override table instead of
      per-route if/else on status codes (ADR: one place to test the mapping)
    - Returns the error instead of raising it: callers `raise ... from exc` so
      the upstream cause stays chained
"""

import logging
from collections.abc import Callable, Mapping

from fieldroutes_relay.core.errors import (
    CustomerNotFoundError,
    InvalidCredentialsError,
    ProviderError,
    RelayError,
    UpstreamError,
)

logger = logging.getLogger(__name__)

StatusOverrides = Mapping[int, Callable[[], RelayError]]

# Identifier-scoped routes: provider 404 means the customer does not exist
CUSTOMER_SCOPED: StatusOverrides = {404: CustomerNotFoundError}

# Credential probe: provider auth failures mean the credentials are bad
CREDENTIAL_PROBE: StatusOverrides = {
    401: InvalidCredentialsError,
    403: InvalidCredentialsError,
}


def normalize_provider_error(
    error: UpstreamError,
    default_message: str,
    overrides: StatusOverrides | None = None,
) -> RelayError:
    """Convert a failed provider call into the error returned to the caller."""
    if overrides and error.status_code in overrides:
        logger.info(
            f"Provider status {error.status_code} mapped to route-specific error",
            extra={"upstream_status": error.status_code},
        )
        return overrides[error.status_code]()

    status = error.status_code or 500
    message = error.provider_message or error.message or default_message

    logger.error(
        f"API Error: {message}",
        extra={
            "status_code": status,
            "upstream_status": error.status_code,
            "upstream_body": error.body,
        },
        exc_info=error,
    )
    return ProviderError(message, http_status=status, details=error.body)
