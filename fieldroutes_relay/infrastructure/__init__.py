"""Infrastructure Layer: provider client, rate limiting and logging setup.

Invariants:
    - All provider failures surface as UpstreamError (core/errors.py)
"""
