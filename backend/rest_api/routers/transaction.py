"""
Transaction endpoints: /api/transaction
"""

from rest_api.routers.crud import build_crud_router
from rest_api.services.domain import TRANSACTION_CONFIG, TransactionService
from shared.config.constants import Resources

router = build_crud_router(
    TRANSACTION_CONFIG,
    TransactionService,
    prefix="/api/transaction",
    resource=Resources.TRANSACTION,
)
