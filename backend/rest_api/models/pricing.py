"""
Pricing Models: PriceList, PriceListVersionComponent.
"""

from __future__ import annotations

import uuid
from datetime import date
from decimal import Decimal
from typing import Optional

from sqlalchemy import Boolean, Date, ForeignKey, Index, Integer, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin


class PriceList(TimestampMixin, Base):
    """
    A named list of prices valid over a date range.
    Inherits: created_at, updated_at from TimestampMixin.
    """

    __tablename__ = "price_list"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    code: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    description: Mapped[Optional[str]] = mapped_column(Text)
    currency: Mapped[str] = mapped_column(String(3), nullable=False, default="USD")
    is_default: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    valid_from: Mapped[date] = mapped_column(Date, nullable=False)
    valid_to: Mapped[Optional[date]] = mapped_column(Date)

    # Relationships
    components: Mapped[list["PriceListVersionComponent"]] = relationship(
        back_populates="price_list",
        cascade="all, delete-orphan",
    )


class PriceListVersionComponent(TimestampMixin, Base):
    """
    One priced component of a given price list version.
    Inherits: created_at, updated_at from TimestampMixin.
    """

    __tablename__ = "price_list_version_component"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    price_list_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("price_list.id", ondelete="CASCADE"), nullable=False, index=True
    )
    version_number: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    component_name: Mapped[str] = mapped_column(String(200), nullable=False)
    component_type: Mapped[Optional[str]] = mapped_column(String(50))
    amount: Mapped[Decimal] = mapped_column(Numeric(18, 4), nullable=False)
    effective_date: Mapped[date] = mapped_column(Date, nullable=False)
    notes: Mapped[Optional[str]] = mapped_column(Text)

    # Relationships
    price_list: Mapped["PriceList"] = relationship(back_populates="components")

    __table_args__ = (
        Index("ix_component_price_list_version", "price_list_id", "version_number"),
    )
