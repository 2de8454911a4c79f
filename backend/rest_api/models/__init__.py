"""
SQLAlchemy ORM Models Package.

- base: Base class, UTCDateTime and TimestampMixin
- pricing: PriceList, PriceListVersionComponent
- transaction: Transaction
"""

from .base import Base, TimestampMixin, UTCDateTime
from .pricing import PriceList, PriceListVersionComponent
from .transaction import Transaction

__all__ = [
    "Base",
    "TimestampMixin",
    "UTCDateTime",
    "PriceList",
    "PriceListVersionComponent",
    "Transaction",
]
