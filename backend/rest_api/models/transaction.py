"""
Transaction Model: a monetary movement, optionally priced from a price list.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from sqlalchemy import ForeignKey, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin, UTCDateTime

if TYPE_CHECKING:
    from .pricing import PriceList


class Transaction(TimestampMixin, Base):
    """
    Monetary transaction.
    Inherits: created_at, updated_at from TimestampMixin.
    """

    __tablename__ = "financial_transaction"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    reference: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    description: Mapped[Optional[str]] = mapped_column(Text)
    amount: Mapped[Decimal] = mapped_column(Numeric(18, 4), nullable=False)
    currency: Mapped[str] = mapped_column(String(3), nullable=False, default="USD")
    transaction_date: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="pending", index=True)
    price_list_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid, ForeignKey("price_list.id", ondelete="SET NULL"), nullable=True, index=True
    )

    # Relationships (read-only; the database clears price_list_id on delete)
    price_list: Mapped[Optional["PriceList"]] = relationship(viewonly=True)
