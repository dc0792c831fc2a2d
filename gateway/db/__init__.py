"""Database Metadata — declarative base for the external table contract.

Invariants:
    - The gateway never issues DDL against the production datastore
"""
