"""
Domain Services - one CRUDService per entity type.

Structure:
    Router (thin controller)
        ↓
    Service (filters, sort, paging, mutations)  ← YOU ARE HERE
        ↓
    Session (SQLAlchemy)
        ↓
    Model (entity)

Usage:
    from rest_api.services.domain import PriceListService

    service = PriceListService(db)
    price_lists = service.get(search_term="retail", sort_field="name")
"""

from .price_list_service import PRICE_LIST_CONFIG, PriceListService
from .price_list_version_component_service import (
    PRICE_LIST_VERSION_COMPONENT_CONFIG,
    PriceListVersionComponentService,
)
from .transaction_service import TRANSACTION_CONFIG, TransactionService

__all__ = [
    "PRICE_LIST_CONFIG",
    "PriceListService",
    "PRICE_LIST_VERSION_COMPONENT_CONFIG",
    "PriceListVersionComponentService",
    "TRANSACTION_CONFIG",
    "TransactionService",
]
