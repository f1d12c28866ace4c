"""Root conftest: shared test configuration."""

import os

# Ensure tests never reach the real provider or pick up a developer .env
os.environ.setdefault("FIELDROUTES_API_URL", "https://provider.test/v1")
os.environ.setdefault("APP_ENV", "test")
