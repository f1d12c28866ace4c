"""Settings: env parsing and derived properties."""

from fieldroutes_relay.config import Settings


def test_defaults():
    settings = Settings(_env_file=None, fieldroutes_api_url="https://api.fieldroutes.com/v1")
    assert settings.provider_timeout_seconds == 10.0
    assert settings.rate_limit == "100 per 15 minutes"
    assert settings.cors_origins == ["https://app.missiveapp.com"]


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.test, https://b.test,")
    monkeypatch.setenv("APP_ENV", " Production ")
    monkeypatch.setenv("RATE_LIMIT_REQUESTS", "5")
    settings = Settings(_env_file=None)

    assert settings.cors_origins == ["https://a.test", "https://b.test"]
    assert settings.is_production
    assert settings.rate_limit == "5 per 15 minutes"


def test_non_production_modes():
    for env in ("development", "test", "staging"):
        assert not Settings(_env_file=None, app_env=env).is_production
