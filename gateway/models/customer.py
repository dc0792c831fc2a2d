"""Customer Identity ORM — external account record used for identity verification.

Invariants:
    - (customer_external_id, email) must both match for a positive verification
    - Comparison is exact: no case folding, no trimming
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from gateway.db.base import Base


class ExternalCustomer(Base):
    __tablename__ = "external_customers"

    customer_external_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    full_name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    account_status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="active",
    )
