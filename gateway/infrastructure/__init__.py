"""Infrastructure Layer — datastore access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/
    - Every driver/pool exception is mapped to DatabaseError (core/errors.py)
"""
