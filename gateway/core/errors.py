"""Error Hierarchy — typed, categorized exceptions for every gateway failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) never touch the datastore; datastore errors are 500
    - to_response() produces the flat JSON body the gateway's clients expect
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with GatewayError base: FastAPI global handler catches all
    - IdentityNotVerifiedError overrides to_response(): a failed verification is an
      answer ({verified: false}), not an error envelope
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    UNAUTHORIZED = "unauthorized"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


class GatewayError(Exception):
    """Base exception for all gateway errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the gateway's JSON error body."""
        return {"error": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class MissingFieldsError(GatewayError):
    """Required request fields absent or empty."""
    def __init__(self, *fields: str):
        super().__init__(
            f"Missing required fields: {' or '.join(fields)}.",
            "MISSING_FIELDS", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.fields = fields


class ResourceNotFoundError(GatewayError):
    """Lookup succeeded but matched no row."""
    def __init__(self, message: str):
        super().__init__(
            message, "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, 404,
        )


class IdentityNotVerifiedError(GatewayError):
    """No customer record matches both identity fields."""
    def __init__(
        self,
        message: str = "Identity verification failed. No match found in external system.",
    ):
        super().__init__(
            message, "IDENTITY_NOT_VERIFIED", ErrorCategory.UNAUTHORIZED,
            ErrorSeverity.WARNING, 401,
        )

    def to_response(self) -> dict:
        return {"verified": False, "message": self.message}


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(GatewayError):
    """Connection, authentication or query failure inside the datastore."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation


class LookupFailedError(GatewayError):
    """Endpoint-level failure carrying the generic message shown to clients."""
    def __init__(self, message: str):
        super().__init__(
            message, "LOOKUP_FAILED", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500,
        )
