"""
Price List Service.

Usage:
    from rest_api.services.domain import PriceListService

    service = PriceListService(db)
    price_list_id = service.create(PriceListCreate(name="Retail", code="RET", valid_from=today))
"""

from __future__ import annotations

import uuid
from datetime import date, datetime

from sqlalchemy.orm import Session

from rest_api.models import PriceList
from rest_api.schemas import PriceListCreate, PriceListOutput, PriceListUpdate
from rest_api.services.crud import CRUDConfig, CRUDService
from rest_api.services.query import FieldSpec, FieldTable
from shared.config.constants import Resources

PRICE_LIST_FIELDS = FieldTable(Resources.PRICE_LIST, [
    FieldSpec("id", PriceList.id, uuid.UUID, patchable=False),
    FieldSpec("name", PriceList.name, str, searchable=True),
    FieldSpec("code", PriceList.code, str, searchable=True),
    FieldSpec("description", PriceList.description, str, searchable=True, nullable=True),
    FieldSpec("currency", PriceList.currency, str),
    FieldSpec("is_default", PriceList.is_default, bool),
    FieldSpec("valid_from", PriceList.valid_from, date),
    FieldSpec("valid_to", PriceList.valid_to, date, nullable=True),
    FieldSpec("created_at", PriceList.created_at, datetime, patchable=False),
    FieldSpec("updated_at", PriceList.updated_at, datetime, patchable=False, nullable=True),
])

PRICE_LIST_CONFIG = CRUDConfig(
    model=PriceList,
    output_schema=PriceListOutput,
    create_schema=PriceListCreate,
    update_schema=PriceListUpdate,
    entity_name=Resources.PRICE_LIST,
    fields=PRICE_LIST_FIELDS,
)


class PriceListService(CRUDService[PriceList, PriceListOutput, PriceListCreate, PriceListUpdate]):
    """Price lists. Deleting one removes its version components."""

    def __init__(self, db: Session):
        super().__init__(db, PRICE_LIST_CONFIG)
