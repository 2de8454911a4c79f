"""
Price list version component endpoints: /api/pricelistversioncomponent
"""

from rest_api.routers.crud import build_crud_router
from rest_api.services.domain import (
    PRICE_LIST_VERSION_COMPONENT_CONFIG,
    PriceListVersionComponentService,
)
from shared.config.constants import Resources

router = build_crud_router(
    PRICE_LIST_VERSION_COMPONENT_CONFIG,
    PriceListVersionComponentService,
    prefix="/api/pricelistversioncomponent",
    resource=Resources.PRICE_LIST_VERSION_COMPONENT,
)
