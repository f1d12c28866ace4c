"""Rate Limiting: per-address request budget over a rolling window (slowapi).

Invariants:
    - Keyed by caller address
    - One limiter per app instance: tests get a fresh store with every create_app()
    - Disabled limiter lets every request through
    - Moving window: no burst of twice the budget across a window boundary

Design Decisions:
    - In-memory storage: single-process uvicorn deployment, counts reset on restart
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from fieldroutes_relay.config import Settings


def build_limiter(settings: Settings) -> Limiter:
    """Limiter applying settings.rate_limit to every route via SlowAPIMiddleware."""
    return Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit],
        enabled=settings.rate_limit_enabled,
        storage_uri="memory://",
        strategy="moving-window",
    )
