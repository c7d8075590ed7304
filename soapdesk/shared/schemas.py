from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import datetime


class StrictSchema(BaseModel):
    """Request body base: unknown fields are rejected."""

    model_config = ConfigDict(extra="forbid")


class ErrorResponse(BaseModel):
    """Error response model."""

    success: bool = False
    message: str
    field: Optional[str] = None


class TimestampSchema(BaseModel):
    """Schema for timestamp fields."""

    created_at: datetime
    updated_at: datetime


class RecordResponse(TimestampSchema):
    """Base response for every provider-owned record."""

    id: str
    user_id: str
