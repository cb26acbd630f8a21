"""Core functionality package"""
from .ids import IdAllocator, parse_record_id
from .storage import RecordStore, RecordNotFoundError, SEED_ARTWORKS
from .middleware import setup_middleware
from .errors import setup_exception_handlers
from .lifespan import lifespan
from .dependencies import get_store

__all__ = [
    "IdAllocator", "parse_record_id",
    "RecordStore", "RecordNotFoundError", "SEED_ARTWORKS",
    "setup_middleware", "setup_exception_handlers",
    "lifespan", "get_store",
]
