"""Route Modules: one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter
    - Each handler issues at most one provider call
"""
