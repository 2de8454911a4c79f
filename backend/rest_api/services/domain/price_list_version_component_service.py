"""
Price List Version Component Service.
"""

from __future__ import annotations

import uuid
from datetime import date, datetime
from decimal import Decimal

from sqlalchemy.orm import Session, joinedload

from rest_api.models import PriceListVersionComponent
from rest_api.schemas import (
    PriceListVersionComponentCreate,
    PriceListVersionComponentOutput,
    PriceListVersionComponentUpdate,
)
from rest_api.services.crud import CRUDConfig, CRUDService
from rest_api.services.query import FieldSpec, FieldTable
from shared.config.constants import Resources

_Component = PriceListVersionComponent

PRICE_LIST_VERSION_COMPONENT_FIELDS = FieldTable(Resources.PRICE_LIST_VERSION_COMPONENT, [
    FieldSpec("id", _Component.id, uuid.UUID, patchable=False),
    FieldSpec("price_list_id", _Component.price_list_id, uuid.UUID),
    FieldSpec("version_number", _Component.version_number, int),
    FieldSpec("component_name", _Component.component_name, str, searchable=True),
    FieldSpec("component_type", _Component.component_type, str, searchable=True, nullable=True),
    FieldSpec("amount", _Component.amount, Decimal),
    FieldSpec("effective_date", _Component.effective_date, date),
    FieldSpec("notes", _Component.notes, str, searchable=True, nullable=True),
    FieldSpec("created_at", _Component.created_at, datetime, patchable=False),
    FieldSpec("updated_at", _Component.updated_at, datetime, patchable=False, nullable=True),
])

PRICE_LIST_VERSION_COMPONENT_CONFIG = CRUDConfig(
    model=PriceListVersionComponent,
    output_schema=PriceListVersionComponentOutput,
    create_schema=PriceListVersionComponentCreate,
    update_schema=PriceListVersionComponentUpdate,
    entity_name=Resources.PRICE_LIST_VERSION_COMPONENT,
    fields=PRICE_LIST_VERSION_COMPONENT_FIELDS,
    load_options=(joinedload(_Component.price_list),),
)


class PriceListVersionComponentService(
    CRUDService[
        PriceListVersionComponent,
        PriceListVersionComponentOutput,
        PriceListVersionComponentCreate,
        PriceListVersionComponentUpdate,
    ]
):
    def __init__(self, db: Session):
        super().__init__(db, PRICE_LIST_VERSION_COMPONENT_CONFIG)
