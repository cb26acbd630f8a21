"""
System routes (health check, root)
"""
from fastapi import APIRouter, Depends, Request

from backend.core import RecordStore, get_store
from backend.schemas import HealthResponse

router = APIRouter(tags=["System"])


@router.get("/api/health", response_model=HealthResponse)
def health_check(store: RecordStore = Depends(get_store)):
    """
    Liveness probe
    Reports the storage location, does not touch the files
    """
    return HealthResponse(data_dir=str(store.data_dir))


@router.get("/")
def root(request: Request):
    """Root endpoint - basic info"""
    settings = request.app.state.settings
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "endpoints": {
            "health": "/api/health",
            "docs": "/docs",
            "users": "/api/users",
            "art": "/api/art",
        },
    }
