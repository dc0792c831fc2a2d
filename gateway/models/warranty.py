"""Warranty ORM — one registered product warranty, keyed by serial number.

Invariants:
    - serial_number is the lookup key
    - Clients receive every column, so new columns surface without code changes
"""

from datetime import date

from sqlalchemy import Date, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from gateway.db.base import Base


class ExternalWarranty(Base):
    __tablename__ = "external_warranties"

    serial_number: Mapped[str] = mapped_column(String(64), primary_key=True)
    product_name: Mapped[str] = mapped_column(String(200), nullable=False)
    customer_external_id: Mapped[str | None] = mapped_column(String(64))
    purchase_date: Mapped[date | None] = mapped_column(Date)
    warranty_expiration: Mapped[date | None] = mapped_column(Date)
    coverage_status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="active",
    )
    coverage_notes: Mapped[str | None] = mapped_column(Text)
