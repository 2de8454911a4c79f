"""
Price list endpoints: /api/pricelist
"""

from rest_api.routers.crud import build_crud_router
from rest_api.services.domain import PRICE_LIST_CONFIG, PriceListService
from shared.config.constants import Resources

router = build_crud_router(
    PRICE_LIST_CONFIG,
    PriceListService,
    prefix="/api/pricelist",
    resource=Resources.PRICE_LIST,
)
