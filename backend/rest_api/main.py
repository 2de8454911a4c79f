"""
REST API main application.
Entry point for the FastAPI REST server.
"""

from fastapi import FastAPI

from rest_api.core.cors import configure_cors
from rest_api.core.errors import register_exception_handlers
from rest_api.core.lifespan import lifespan
from rest_api.core.middlewares import register_middlewares
from rest_api.routers.price_list import router as price_list_router
from rest_api.routers.price_list_version_component import (
    router as price_list_version_component_router,
)
from rest_api.routers.public import health_router
from rest_api.routers.transaction import router as transaction_router
from shared.config.settings import settings


# Create FastAPI application
app = FastAPI(
    title="Pricing REST API",
    description="Price lists, price list version components and transactions",
    version="1.0.0",
    lifespan=lifespan,
)

register_exception_handlers(app)
register_middlewares(app)
configure_cors(app)


# =============================================================================
# Include Routers
# =============================================================================

app.include_router(health_router)
app.include_router(price_list_router)
app.include_router(price_list_version_component_router)
app.include_router(transaction_router)


# =============================================================================
# Development entry point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "rest_api.main:app",
        host="0.0.0.0",
        port=settings.rest_api_port,
        reload=True,
    )
