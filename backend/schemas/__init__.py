"""Pydantic schemas package"""
from .responses import SuccessResponse, ErrorResponse, HealthResponse

__all__ = ["SuccessResponse", "ErrorResponse", "HealthResponse"]
