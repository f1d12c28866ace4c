"""FieldRoutes Relay: customer lookup API in front of the FieldRoutes REST API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
