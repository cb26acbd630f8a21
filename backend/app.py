"""
LUMA Server
FastAPI application factory
"""
from typing import Optional

from fastapi import FastAPI

from backend.config import Settings, settings as default_settings
from backend.core import RecordStore, lifespan, setup_exception_handlers, setup_middleware
from backend.routes import art, system, users


def create_app(settings: Optional[Settings] = None, store: Optional[RecordStore] = None) -> FastAPI:
    """
    Build the API application

    The store is initialized here, so the data directory and seed files exist
    before the first request is served.

    Args:
        settings: Settings to use, defaults to the environment-loaded ones
        store: Record store to serve, defaults to one rooted at settings.DATA_DIR

    Returns:
        Configured FastAPI application
    """
    settings = settings or default_settings
    store = store or RecordStore(settings.DATA_DIR)
    store.initialize()

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="JSON record store for the LUMA art marketplace",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store

    setup_middleware(app, settings)
    setup_exception_handlers(app)

    app.include_router(system.router)
    app.include_router(users.router)
    app.include_router(art.router)

    return app
