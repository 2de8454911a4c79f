"""
Pydantic schemas for transactions.

``transaction_date`` is normalised to UTC on input. A value without an
offset is taken to be UTC.
"""

from datetime import datetime, timezone
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from shared.config.constants import Limits

from .pricing import PriceListSummary


class TransactionBase(BaseModel):
    reference: str = Field(min_length=1, max_length=Limits.MAX_CODE_LENGTH)
    description: str | None = Field(default=None, max_length=Limits.MAX_DESCRIPTION_LENGTH)
    amount: Decimal
    currency: str = Field(
        default="USD",
        min_length=Limits.CURRENCY_CODE_LENGTH,
        max_length=Limits.CURRENCY_CODE_LENGTH,
    )
    transaction_date: datetime
    status: str = Field(default="pending", min_length=1, max_length=20)
    price_list_id: UUID | None = None

    @field_validator("transaction_date")
    @classmethod
    def _to_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class TransactionCreate(TransactionBase):
    pass


class TransactionUpdate(TransactionBase):
    id: UUID


class TransactionOutput(TransactionBase):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    price_list: PriceListSummary | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
