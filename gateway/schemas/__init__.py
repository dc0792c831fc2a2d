"""Pydantic Schemas — request/response contracts for the gateway endpoints.

Invariants:
    - Schemas validate at the system boundary (request bodies, response shapes)
    - Field names match the JSON the CRM and front-end clients already consume
"""
