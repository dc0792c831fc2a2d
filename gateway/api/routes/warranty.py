"""Warranty Lookup — autonomous warranty check by product serial number.

Invariants:
    - serialNumber is opaque: bound as a parameter, never validated or rewritten
    - 200 returns the stored row verbatim; 404 when no row matches
    - NUMERIC columns serialize as strings, same as base_price on /api/quote
"""

from decimal import Decimal

from fastapi import APIRouter, Depends
from fastapi.encoders import jsonable_encoder

from gateway.core.errors import ResourceNotFoundError
from gateway.core.lookup import LookupPolicy, resolve, run_lookup
from gateway.infrastructure.database import ConnectionProvider, get_db
from gateway.schemas.responses import ErrorResponse

router = APIRouter(prefix="/api/warranty", tags=["warranty"])

WARRANTY_QUERY = (
    "SELECT * FROM external_warranties WHERE serial_number = :serial_number"
)

WARRANTY_POLICY = LookupPolicy(
    operation="fetching warranty",
    not_found=lambda: ResourceNotFoundError(
        "Warranty not found for this serial number.",
    ),
    failure_message="Internal server error while fetching warranty.",
)


@router.get(
    "/{serial_number}",
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_warranty(
    serial_number: str, db: ConnectionProvider = Depends(get_db),
):
    """Fetch the warranty record registered for a serial number."""
    result = await run_lookup(
        db, WARRANTY_QUERY, {"serial_number": serial_number},
    )
    row = resolve(result, WARRANTY_POLICY)
    return jsonable_encoder(row, custom_encoder={Decimal: str})
