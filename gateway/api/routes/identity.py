"""Identity Verification — confirms a caller-supplied account id and email belong together.

Invariants:
    - Missing or empty field → 400 before any query runs
    - Both fields must match the same row (AND), compared exactly
    - No match → 401 {verified: false}, distinct from a malformed request
    - Only the safe customer projection is ever returned

Design Decisions:
    - Body optional at the FastAPI level: an absent body is a missing-fields 400,
      not a validation envelope
"""

import logging

from fastapi import APIRouter, Depends

from gateway.core.errors import IdentityNotVerifiedError, MissingFieldsError
from gateway.core.lookup import LookupPolicy, resolve, run_lookup
from gateway.infrastructure.database import ConnectionProvider, get_db
from gateway.schemas.identity import VerifyUserRequest
from gateway.schemas.responses import (
    CustomerIdentity, ErrorResponse, VerificationFailure, VerifyUserResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["identity"])

VERIFY_QUERY = (
    "SELECT customer_external_id, full_name, email, account_status "
    "FROM external_customers "
    "WHERE customer_external_id = :external_account_id AND email = :email"
)

VERIFY_POLICY = LookupPolicy(
    operation="during verification",
    not_found=IdentityNotVerifiedError,
    failure_message="Internal server error during user verification.",
)


@router.post(
    "/verify-user", response_model=VerifyUserResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": VerificationFailure},
        500: {"model": ErrorResponse},
    },
)
async def verify_user(
    body: VerifyUserRequest | None = None,
    db: ConnectionProvider = Depends(get_db),
):
    """Verify that an external account id and email identify one customer."""
    if body is None or not body.is_complete():
        raise MissingFieldsError("externalAccountId", "email")

    result = await run_lookup(db, VERIFY_QUERY, {
        "external_account_id": body.external_account_id,
        "email": body.email,
    })
    customer = resolve(result, VERIFY_POLICY)
    logger.info(
        f"Identity verified for {customer['customer_external_id']}",
        extra={"operation": "verify_user"},
    )
    return VerifyUserResponse(customer=CustomerIdentity(**customer))
