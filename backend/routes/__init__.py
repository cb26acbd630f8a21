"""API routers"""
from . import art, system, users

__all__ = ["art", "system", "users"]
