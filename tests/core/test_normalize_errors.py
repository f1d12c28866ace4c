"""Error Normalization: tests for the provider failure -> RelayError mapping.

Tests cover:
    - status mirrors provider, falls back to 500
    - message precedence: provider message > error message > default
    - overrides short-circuit the generic path
    - generic normalizations are logged at ERROR with the stack trace
"""

import logging

from fieldroutes_relay.core.errors import (
    CustomerNotFoundError,
    InvalidCredentialsError,
    ProviderError,
    UpstreamError,
)
from fieldroutes_relay.core.normalize_errors import (
    CREDENTIAL_PROBE,
    CUSTOMER_SCOPED,
    normalize_provider_error,
)


def test_mirrors_provider_status_and_message():
    error = UpstreamError(
        "Request failed with status code 422", 422, {"message": "limit too large"},
    )
    result = normalize_provider_error(error, "default")
    assert isinstance(result, ProviderError)
    assert result.http_status == 422
    assert result.message == "limit too large"
    assert result.details == {"message": "limit too large"}


def test_falls_back_to_error_message():
    error = UpstreamError("Request failed with status code 502", 502, "<html>")
    result = normalize_provider_error(error, "default")
    assert result.http_status == 502
    assert result.message == "Request failed with status code 502"


def test_network_failure_is_500():
    result = normalize_provider_error(UpstreamError("timed out"), "default")
    assert result.http_status == 500
    assert result.message == "timed out"
    assert result.details is None


def test_default_message_when_nothing_else():
    result = normalize_provider_error(UpstreamError(""), "Failed to fetch customer")
    assert result.message == "Failed to fetch customer"


def test_customer_scoped_404_override():
    result = normalize_provider_error(
        UpstreamError("nope", 404), "default", CUSTOMER_SCOPED,
    )
    assert isinstance(result, CustomerNotFoundError)


def test_customer_scoped_other_statuses_stay_generic():
    result = normalize_provider_error(
        UpstreamError("nope", 500), "default", CUSTOMER_SCOPED,
    )
    assert isinstance(result, ProviderError)
    assert result.http_status == 500


def test_credential_probe_maps_401_and_403():
    for status in (401, 403):
        result = normalize_provider_error(
            UpstreamError("denied", status), "default", CREDENTIAL_PROBE,
        )
        assert isinstance(result, InvalidCredentialsError)
        assert result.http_status == 401


def test_404_without_override_is_generic():
    result = normalize_provider_error(UpstreamError("missing", 404), "default")
    assert isinstance(result, ProviderError)
    assert result.http_status == 404


def test_generic_path_logs_error_with_trace(caplog):
    error = UpstreamError("Request failed with status code 500", 500, {"message": "db down"})
    with caplog.at_level(logging.ERROR, logger="fieldroutes_relay.core.normalize_errors"):
        normalize_provider_error(error, "default")
    record = caplog.records[-1]
    assert record.levelno == logging.ERROR
    assert record.exc_info is not None
    assert record.status_code == 500
    assert record.upstream_body == {"message": "db down"}


def test_override_path_does_not_log_error(caplog):
    with caplog.at_level(logging.INFO, logger="fieldroutes_relay.core.normalize_errors"):
        normalize_provider_error(UpstreamError("x", 404), "default", CUSTOMER_SCOPED)
    assert not [r for r in caplog.records if r.levelno >= logging.ERROR]
