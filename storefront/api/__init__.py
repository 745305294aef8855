# storefront/api/__init__.py
from fastapi import FastAPI

from storefront.api.routers import carts, health, items, orders
from storefront.services.store_service import StoreService, build_store
from storefront.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


def create_app(store: StoreService | None = None) -> FastAPI:
    setup_logging()

    app = FastAPI(
        title="Storefront Service",
        version="1.0.0",
    )
    app.state.store = store or build_store()

    # Include routers
    app.include_router(health.router)
    app.include_router(items.router)
    app.include_router(carts.router)
    app.include_router(orders.router)

    logger.info("Storefront app created")
    return app
