# CE Credits Feature - Schemas

from typing import Optional
from datetime import datetime
from pydantic import Field, field_validator
from soapdesk.features.ce_credits.models import CE_CATEGORIES, CeStatus
from soapdesk.shared.schemas import RecordResponse, StrictSchema


class _Category(StrictSchema):

    @field_validator("category", check_fields=False)
    @classmethod
    def validate_category(cls, v):
        if v is not None and v not in CE_CATEGORIES:
            raise ValueError(f"category must be one of: {', '.join(CE_CATEGORIES)}")
        return v


class CeCreditCreate(_Category):
    title: str = Field(..., min_length=1, max_length=200)
    provider: Optional[str] = None
    category: str = "general"
    hours: float = Field(1.0, gt=0, le=100)
    completion_date: Optional[datetime] = None
    expiration_date: Optional[datetime] = None
    certificate_number: Optional[str] = None
    certificate_url: Optional[str] = None
    status: CeStatus = "completed"
    notes: Optional[str] = None


class CeCreditUpdate(_Category):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    provider: Optional[str] = None
    category: Optional[str] = None
    hours: Optional[float] = Field(None, gt=0, le=100)
    completion_date: Optional[datetime] = None
    expiration_date: Optional[datetime] = None
    certificate_number: Optional[str] = None
    certificate_url: Optional[str] = None
    status: Optional[CeStatus] = None
    notes: Optional[str] = None


class CeCreditResponse(RecordResponse):
    title: str
    provider: Optional[str] = None
    category: str
    hours: float
    completion_date: Optional[datetime] = None
    expiration_date: Optional[datetime] = None
    certificate_number: Optional[str] = None
    certificate_url: Optional[str] = None
    status: str
    notes: Optional[str] = None
