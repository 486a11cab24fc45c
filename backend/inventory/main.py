"""FastAPI application factory and composition root."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from inventory.config import Settings, get_settings
from inventory.application.services import (
    ImageSelectionService,
    ProductService,
    SSEManager,
    UserService,
)
from inventory.domain.entities import ProductRecord, UserRecord
from inventory.infrastructure.logging.log_config import setup_logging
from inventory.infrastructure.memory import InMemoryRecordStore
from inventory.infrastructure.storage import LocalImageStorage
from inventory.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging, close SSE streams on shutdown."""
    setup_logging(app.state.settings)
    logger.info(
        "%s %s started (%s)",
        app.state.settings.app_title,
        app.state.settings.app_version,
        app.state.settings.app_env,
    )

    yield

    # Shutdown
    for subscription in app.state.store_subscriptions:
        subscription.close()
    await app.state.sse_manager.shutdown()


def _wire_state(app: FastAPI, settings: Settings) -> None:
    """Build the single user store and product store and the services around them."""
    user_store: InMemoryRecordStore[UserRecord] = InMemoryRecordStore(UserRecord, name="users")
    product_store: InMemoryRecordStore[ProductRecord] = InMemoryRecordStore(
        ProductRecord, name="products"
    )
    image_storage = LocalImageStorage(
        upload_dir=settings.image_upload_dir,
        max_size_bytes=settings.max_image_size_bytes,
    )
    sse_manager = SSEManager()

    app.state.settings = settings
    app.state.user_service = UserService(user_store)
    app.state.product_service = ProductService(product_store)
    app.state.image_storage = image_storage
    app.state.image_selection_service = ImageSelectionService(image_storage)
    app.state.sse_manager = sse_manager
    app.state.store_subscriptions = [
        user_store.subscribe(sse_manager.relay("users")),
        product_store.subscribe(sse_manager.relay("products")),
    ]


def create_app(settings: Settings | None = None) -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    _wire_state(app, settings)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "inventory.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
