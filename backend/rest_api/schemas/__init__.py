"""
Request/response schemas for the pricing resources.
"""

from .pricing import (
    PriceListCreate,
    PriceListUpdate,
    PriceListOutput,
    PriceListSummary,
    PriceListVersionComponentCreate,
    PriceListVersionComponentUpdate,
    PriceListVersionComponentOutput,
)
from .transaction import TransactionCreate, TransactionUpdate, TransactionOutput

__all__ = [
    "PriceListCreate",
    "PriceListUpdate",
    "PriceListOutput",
    "PriceListSummary",
    "PriceListVersionComponentCreate",
    "PriceListVersionComponentUpdate",
    "PriceListVersionComponentOutput",
    "TransactionCreate",
    "TransactionUpdate",
    "TransactionOutput",
]
