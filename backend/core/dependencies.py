"""
FastAPI dependencies
"""
from fastapi import Request

from .storage import RecordStore


def get_store(request: Request) -> RecordStore:
    """Record store created with the app, see backend.app.create_app"""
    return request.app.state.store
