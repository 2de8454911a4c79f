"""
Transaction Service.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal

from sqlalchemy.orm import Session, joinedload

from rest_api.models import Transaction
from rest_api.schemas import TransactionCreate, TransactionOutput, TransactionUpdate
from rest_api.services.crud import CRUDConfig, CRUDService
from rest_api.services.query import FieldSpec, FieldTable
from shared.config.constants import Resources

TRANSACTION_FIELDS = FieldTable(Resources.TRANSACTION, [
    FieldSpec("id", Transaction.id, uuid.UUID, patchable=False),
    FieldSpec("reference", Transaction.reference, str, searchable=True),
    FieldSpec("description", Transaction.description, str, searchable=True, nullable=True),
    FieldSpec("amount", Transaction.amount, Decimal),
    FieldSpec("currency", Transaction.currency, str),
    FieldSpec("transaction_date", Transaction.transaction_date, datetime),
    FieldSpec("status", Transaction.status, str, searchable=True),
    FieldSpec("price_list_id", Transaction.price_list_id, uuid.UUID, nullable=True),
    FieldSpec("created_at", Transaction.created_at, datetime, patchable=False),
    FieldSpec("updated_at", Transaction.updated_at, datetime, patchable=False, nullable=True),
])

TRANSACTION_CONFIG = CRUDConfig(
    model=Transaction,
    output_schema=TransactionOutput,
    create_schema=TransactionCreate,
    update_schema=TransactionUpdate,
    entity_name=Resources.TRANSACTION,
    fields=TRANSACTION_FIELDS,
    load_options=(joinedload(Transaction.price_list),),
)


class TransactionService(CRUDService[Transaction, TransactionOutput, TransactionCreate, TransactionUpdate]):
    def __init__(self, db: Session):
        super().__init__(db, TRANSACTION_CONFIG)
