"""Health Probe — proves the gateway can reach the datastore.

Invariants:
    - GET /api/health runs one "current time" query per call
    - 500 with a generic message when the datastore is unreachable

Design Decisions:
    - CURRENT_TIMESTAMP over NOW(): same value on PostgreSQL, also valid on SQLite test schemas
"""

from fastapi import APIRouter, Depends

from gateway.config import Settings, get_app_settings
from gateway.core.errors import LookupFailedError
from gateway.core.lookup import LookupPolicy, resolve, run_lookup
from gateway.infrastructure.database import ConnectionProvider, get_db
from gateway.schemas.responses import ErrorResponse, HealthResponse

router = APIRouter(prefix="/api/health", tags=["health"])

HEALTH_QUERY = "SELECT CURRENT_TIMESTAMP AS now"
FAILURE_MESSAGE = "Failed to connect to the database."

HEALTH_POLICY = LookupPolicy(
    operation="during health check",
    not_found=lambda: LookupFailedError(FAILURE_MESSAGE),
    failure_message=FAILURE_MESSAGE,
)


@router.get(
    "", response_model=HealthResponse,
    responses={500: {"model": ErrorResponse}},
)
async def health_check(
    db: ConnectionProvider = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    """Report datastore connectivity with the database's current time."""
    row = resolve(await run_lookup(db, HEALTH_QUERY), HEALTH_POLICY)
    return HealthResponse(
        status=f"{settings.service_name} is connected to the database!",
        db_time=row["now"],
    )
