"""Core Layer — error hierarchy and lookup result translation.

Invariants:
    - Core never imports from api/ or infrastructure/
    - No direct I/O: queries reach the datastore only through a QueryBackend
"""
