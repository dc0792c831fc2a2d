"""Response Schemas — explicit shapes for every JSON body the gateway returns.

Invariants:
    - Error bodies are flat: {"error": message}
    - Warranty rows have no schema: every column is returned as stored

Design Decisions:
    - Decimal for base_price: exact money value, serialized without float rounding
"""

from datetime import datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    db_time: datetime


class CustomerIdentity(BaseModel):
    """Safe projection of a verified customer record."""
    customer_external_id: str
    full_name: str | None = None
    email: str
    account_status: str | None = None


class VerifyUserResponse(BaseModel):
    verified: Literal[True] = True
    customer: CustomerIdentity


class VerificationFailure(BaseModel):
    verified: Literal[False] = False
    message: str


class QuoteResponse(BaseModel):
    """Five-column projection of a parts_pricing row."""
    part_id: str | int
    part_name: str | None = None
    base_price: Decimal | None = None
    stock_quantity: int | None = None
    compatibility_notes: str | None = None


class ErrorResponse(BaseModel):
    error: str
