"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from src.inventoflow import __version__
from src.inventoflow.auth import AuthSessionManager, SessionStore
from src.inventoflow.auth.supabase_provider import create_supabase_provider
from src.inventoflow.config import settings
from src.inventoflow.dependencies import set_services
from src.inventoflow.features.dashboard import router as dashboard_router
from src.inventoflow.features.items import router as items_router
from src.inventoflow.features.session import router as session_router
from src.inventoflow.inventory import InventoryAPIClient
from src.inventoflow.logging_config import configure_logging

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle (startup and shutdown)."""
    # Startup
    try:
        logger.info("Initializing identity provider and inventory client")

        provider = await create_supabase_provider(settings)
        store = SessionStore(provider)
        session_manager = AuthSessionManager(provider, store)
        inventory_client = InventoryAPIClient(
            settings.inventory_api_url, store, timeout=settings.http_timeout_seconds
        )
        set_services(session_manager, inventory_client)

        snapshot = await session_manager.restore_session()
        logger.info(
            "Services initialized",
            extra={
                "inventory_api_url": settings.inventory_api_url,
                "is_authenticated": snapshot.is_authenticated,
            },
        )

    except Exception as e:
        logger.error(
            f"Failed to initialize services: {e}",
            exc_info=True,
            extra={"error_type": "startup_failed"},
        )
        raise

    yield

    # Shutdown
    try:
        await inventory_client.aclose()
        logger.info("Inventory client closed")
    except Exception as e:
        logger.error(f"Error during inventory client cleanup: {e}", exc_info=True)
    finally:
        set_services(None, None)


app = FastAPI(
    title="InventoFlow API",
    description="Session and inventory API for the InventoFlow dashboard",
    version=__version__,
    debug=settings.debug,
    lifespan=lifespan,
)

origins = settings.cors_origins.split(",")
logger.info(f"Origins : {origins}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type", "Authorization"],
)

app.include_router(session_router, prefix=settings.api_v1_prefix)
app.include_router(items_router, prefix=settings.api_v1_prefix)
app.include_router(dashboard_router, prefix=settings.api_v1_prefix, tags=["dashboard"])


class HealthCheckResponse(BaseModel):
    """Health check response."""

    status: str


@app.get("/health", response_model=HealthCheckResponse)
async def health_check() -> HealthCheckResponse:
    """Health check endpoint."""
    return HealthCheckResponse(status="healthy")
