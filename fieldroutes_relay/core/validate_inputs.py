"""Input Validation: pure checks and normalizers for route parameters.

Invariants:
    - Every function is pure and total (no I/O, never raises on str input)
    - clamp_limit() result always in [0, cap]; clamp_offset() result always >= 0
    - normalize_phone() is idempotent

Design Decisions:
    - Coarse syntactic email check, not RFC 5322: the provider does the real lookup
    - Customer id pattern passed in by callers so deployments can widen it
"""

import re

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
DEFAULT_CUSTOMER_ID_PATTERN = r"[A-Za-z0-9_-]+"
MAX_CUSTOMER_ID_LENGTH = 99
MIN_QUERY_LENGTH = 2

_NON_DIGITS = re.compile(r"\D")


def is_valid_email(value: str | None) -> bool:
    if not value:
        return False
    return EMAIL_PATTERN.fullmatch(value) is not None


def is_valid_customer_id(
    value: str | None, pattern: str = DEFAULT_CUSTOMER_ID_PATTERN,
) -> bool:
    if not value or len(value) > MAX_CUSTOMER_ID_LENGTH:
        return False
    return re.fullmatch(pattern, value) is not None


def normalize_phone(value: str) -> str:
    """Strip everything but digits: '(555) 123-4567' -> '5551234567'."""
    return _NON_DIGITS.sub("", value)


def normalize_query(value: str | None) -> str | None:
    """Trimmed query, or None when absent or shorter than MIN_QUERY_LENGTH."""
    if value is None:
        return None
    value = value.strip()
    if len(value) < MIN_QUERY_LENGTH:
        return None
    return value


def clamp_limit(limit: int, cap: int) -> int:
    return max(0, min(limit, cap))


def clamp_offset(offset: int) -> int:
    return max(offset, 0)
