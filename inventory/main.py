"""
inventory/main.py

FastAPI application entry point for the inventory service.
Creates the active mobility profile provider and registers routers.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI

from config import settings
from inventory.routers.mobility import router as mobility_router
from inventory.services.mobility_profile import ActiveProfileProvider

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Manage application lifecycle: startup and shutdown."""
    provider = ActiveProfileProvider(settings)
    provider.get_active_profile()
    app.state.profile_provider = provider
    logger.info(
        "inventory_starting",
        base_profile=settings.mobility_profile_base_profile,
    )
    yield
    logger.info("inventory_shutting_down")


app = FastAPI(
    title="Inventory Mobility Service",
    description="Mobility profile resolution and read weight computation",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(mobility_router)
