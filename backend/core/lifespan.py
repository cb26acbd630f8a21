"""
Application lifespan management
Handles startup and shutdown events
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manages application lifecycle events"""
    settings = app.state.settings
    store = app.state.store

    # STARTUP
    logger.info("=" * 60)
    logger.info("STARTING LUMA SERVER")
    logger.info("=" * 60)
    logger.info(f"Data stored in: {store.data_dir}")
    logger.info(f"Users: {len(store.list_users())}, artworks: {len(store.list_artworks())}")
    logger.info("=" * 60)
    logger.info(f"SERVICE READY - Listening on port {settings.SERVICE_PORT}")
    logger.info("=" * 60)

    yield

    # SHUTDOWN
    logger.info("Shutting down LUMA server...")
