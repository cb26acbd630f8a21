"""
Pydantic schemas for API responses
Records themselves are returned as stored, these cover the fixed-shape replies
"""
from pydantic import BaseModel, ConfigDict, Field


class SuccessResponse(BaseModel):
    """Reply to a delete, sent whether or not anything was removed"""
    success: bool = True


class ErrorResponse(BaseModel):
    error: str

    model_config = ConfigDict(json_schema_extra={"example": {"error": "User not found"}})


class HealthResponse(BaseModel):
    """
    Liveness probe reply
    Reports where the collections are stored
    """
    status: str = "Server running"
    data_dir: str = Field(..., alias="dataDir")

    model_config = ConfigDict(populate_by_name=True)
