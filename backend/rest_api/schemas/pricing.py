"""
Pydantic schemas for price lists and their version components.

Create schemas carry no ``id`` (it is assigned by the service); update
schemas require it so it can be checked against the path.
"""

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator

from shared.config.constants import Limits


# =============================================================================
# PriceList Schemas
# =============================================================================


class PriceListBase(BaseModel):
    name: str = Field(min_length=1, max_length=Limits.MAX_NAME_LENGTH)
    code: str = Field(min_length=1, max_length=Limits.MAX_CODE_LENGTH)
    description: str | None = Field(default=None, max_length=Limits.MAX_DESCRIPTION_LENGTH)
    currency: str = Field(
        default="USD",
        min_length=Limits.CURRENCY_CODE_LENGTH,
        max_length=Limits.CURRENCY_CODE_LENGTH,
    )
    is_default: bool = False
    valid_from: date
    valid_to: date | None = None

    @model_validator(mode="after")
    def _check_validity_range(self):
        if self.valid_to is not None and self.valid_to < self.valid_from:
            raise ValueError("valid_to must not be earlier than valid_from")
        return self


class PriceListCreate(PriceListBase):
    pass


class PriceListUpdate(PriceListBase):
    id: UUID


class PriceListOutput(PriceListBase):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    created_at: datetime | None = None
    updated_at: datetime | None = None


class PriceListSummary(BaseModel):
    """Parent price list embedded in component and transaction responses."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    code: str
    currency: str


# =============================================================================
# PriceListVersionComponent Schemas
# =============================================================================


class PriceListVersionComponentBase(BaseModel):
    price_list_id: UUID
    version_number: int = Field(default=1, ge=1)
    component_name: str = Field(min_length=1, max_length=Limits.MAX_NAME_LENGTH)
    component_type: str | None = Field(default=None, max_length=Limits.MAX_CODE_LENGTH)
    amount: Decimal
    effective_date: date
    notes: str | None = Field(default=None, max_length=Limits.MAX_DESCRIPTION_LENGTH)


class PriceListVersionComponentCreate(PriceListVersionComponentBase):
    pass


class PriceListVersionComponentUpdate(PriceListVersionComponentBase):
    id: UUID


class PriceListVersionComponentOutput(PriceListVersionComponentBase):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    price_list: PriceListSummary | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
