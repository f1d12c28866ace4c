"""Core: pure validation, error taxonomy and error normalization.

Invariants:
    - No I/O here (provider calls live in infrastructure/)
"""
