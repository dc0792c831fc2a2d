"""Route Modules — one file per resource.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Each handler issues exactly one query and delegates outcome handling to core/lookup.py
"""
