"""Repair Quote — real-time price and stock for a replacement part.

Invariants:
    - partId bound as a parameter; response is the fixed five-column projection
    - 404 when the part is not in inventory
"""

from fastapi import APIRouter, Depends

from gateway.core.errors import ResourceNotFoundError
from gateway.core.lookup import LookupPolicy, resolve, run_lookup
from gateway.infrastructure.database import ConnectionProvider, get_db
from gateway.schemas.responses import ErrorResponse, QuoteResponse

router = APIRouter(prefix="/api/quote", tags=["quote"])

QUOTE_QUERY = (
    "SELECT part_id, part_name, base_price, stock_quantity, compatibility_notes "
    "FROM parts_pricing WHERE part_id = :part_id"
)

QUOTE_POLICY = LookupPolicy(
    operation="fetching repair quote",
    not_found=lambda: ResourceNotFoundError("Part not found in inventory."),
    failure_message="Internal server error while fetching repair quote.",
)


@router.get(
    "/{part_id}", response_model=QuoteResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_repair_quote(
    part_id: str, db: ConnectionProvider = Depends(get_db),
):
    """Fetch current pricing and stock for a part."""
    result = await run_lookup(db, QUOTE_QUERY, {"part_id": part_id})
    return QuoteResponse(**resolve(result, QUOTE_POLICY))
