"""Identity Schemas — request body for cross-system identity verification.

Invariants:
    - Both fields optional at parse time: presence is checked by the handler so
      missing fields answer the gateway's own 400 body
    - Only the camelCase wire names are read; snake_case keys are ignored
    - Values kept verbatim (no strip, no lowercasing) for exact matching
"""

from pydantic import BaseModel, Field


class VerifyUserRequest(BaseModel):
    external_account_id: str | None = Field(None, alias="externalAccountId")
    email: str | None = None

    def is_complete(self) -> bool:
        return bool(self.external_account_id) and bool(self.email)
