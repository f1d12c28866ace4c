"""Health Probe: liveness endpoint for load balancers.

Invariants:
    - GET /health always returns 200 if the process is up
    - No credentials required
"""

from datetime import datetime, timezone

from fastapi import APIRouter, status

router = APIRouter(tags=["health"])


def utc_timestamp() -> str:
    """ISO-8601 UTC with millisecond precision, e.g. 2024-05-01T12:00:00.000Z."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check():
    return {"status": "OK", "timestamp": utc_timestamp()}
