"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - Provider credentials never live here (they arrive per request)
    - get_settings() is cached (lru_cache): single instance per process

Design Decisions:
    - allowed_origins kept as a comma-separated string: the env format used by
      existing deployments, split by the cors_origins property
    - create_app() also accepts an explicit Settings so tests never touch env vars
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Runtime
    app_env: str = "development"
    host: str = "0.0.0.0"
    port: int = 3000

    # Provider
    fieldroutes_api_url: str = "https://api.fieldroutes.com/v1"
    provider_timeout_seconds: float = 10.0

    # Placeholder until the provider documents its identifier format
    customer_id_pattern: str = r"[A-Za-z0-9_-]+"

    # API
    allowed_origins: str = "https://app.missiveapp.com"

    # Rate limiting (per caller address)
    rate_limit_enabled: bool = True
    rate_limit_requests: int = 100
    rate_limit_window_minutes: int = 15

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("app_env", mode="before")
    @classmethod
    def normalize_app_env(cls, v: str) -> str:
        return v.strip().lower() if isinstance(v, str) else v

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]

    @property
    def rate_limit(self) -> str:
        """Limit string in the `limits` notation, e.g. '100 per 15 minutes'."""
        return (
            f"{self.rate_limit_requests} per "
            f"{self.rate_limit_window_minutes} minutes"
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
