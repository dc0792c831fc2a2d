"""Part Pricing ORM — one replacement part with its current price and stock."""

from decimal import Decimal

from sqlalchemy import Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from gateway.db.base import Base


class PartPricing(Base):
    __tablename__ = "parts_pricing"

    part_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    part_name: Mapped[str] = mapped_column(String(200), nullable=False)
    base_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    stock_quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    compatibility_notes: Mapped[str | None] = mapped_column(Text)
