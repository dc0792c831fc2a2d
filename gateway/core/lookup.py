"""Lookup Results — uniform outcome of a single-row query and its translation.

Invariants:
    - Every lookup ends in exactly one of FOUND, NOT_FOUND, FAILED
    - FOUND always carries the first row; extra rows are ignored
    - resolve() either returns the row or raises a GatewayError — never both
    - FAILED logs the underlying error server-side; clients only see policy.failure_message

Design Decisions:
    - One resolve() for every endpoint: the found / not-found / failed branch is
      written once instead of per handler
    - Not-found builds its error through a factory: warranty and quote answer 404,
      identity verification answers 401
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Mapping, Protocol

from gateway.core.errors import DatabaseError, GatewayError, LookupFailedError

logger = logging.getLogger(__name__)

Row = dict[str, Any]


class QueryBackend(Protocol):
    """Anything that runs one parameterized query and returns its rows."""

    async def fetch_all(
        self, sql: str, params: Mapping[str, Any] | None = None,
    ) -> list[Row]: ...


class LookupStatus(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    FAILED = "failed"


@dataclass(frozen=True)
class LookupResult:
    status: LookupStatus
    row: Row | None = None
    error: DatabaseError | None = None

    @classmethod
    def from_rows(cls, rows: list[Row]) -> "LookupResult":
        if not rows:
            return cls(LookupStatus.NOT_FOUND)
        return cls(LookupStatus.FOUND, row=rows[0])


@dataclass(frozen=True)
class LookupPolicy:
    """How one endpoint answers each lookup outcome."""
    operation: str
    not_found: Callable[[], GatewayError]
    failure_message: str


async def run_lookup(
    db: QueryBackend, sql: str, params: Mapping[str, Any] | None = None,
) -> LookupResult:
    """Run one parameterized query and classify its outcome."""
    try:
        rows = await db.fetch_all(sql, params)
    except DatabaseError as e:
        return LookupResult(LookupStatus.FAILED, error=e)
    return LookupResult.from_rows(rows)


def resolve(result: LookupResult, policy: LookupPolicy) -> Row:
    """Return the found row or raise the endpoint's error for this outcome."""
    if result.status is LookupStatus.FOUND:
        return result.row
    if result.status is LookupStatus.NOT_FOUND:
        raise policy.not_found()
    logger.error(
        f"Database error {policy.operation}: {result.error.__cause__ or result.error}",
        extra={"operation": policy.operation, "error_code": result.error.code},
    )
    raise LookupFailedError(policy.failure_message) from result.error
