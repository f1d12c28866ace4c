"""Pydantic Schemas: request bodies, provider payloads and response envelopes.

Design Decisions:
    - Provider payloads parsed with explicit defaults at the reshaping boundary
"""
