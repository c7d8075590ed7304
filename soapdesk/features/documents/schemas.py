# Documents Feature - Schemas

from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field, field_validator
from soapdesk.features.documents.models import DOCUMENT_CATEGORIES
from soapdesk.shared.schemas import RecordResponse, StrictSchema


def _check_category(v):
    if v is not None and v not in DOCUMENT_CATEGORIES:
        raise ValueError(f"category must be one of: {', '.join(DOCUMENT_CATEGORIES)}")
    return v


class DocumentUpdate(StrictSchema):
    """Metadata edits. The file itself cannot be replaced; upload a new document instead."""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    client_id: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
    shared_with_client: Optional[bool] = None

    _validate_category = field_validator("category")(_check_category)


class DocumentResponse(RecordResponse):
    client_id: Optional[str] = None
    name: str
    original_name: str
    mime_type: str
    size: int
    category: str
    description: Optional[str] = None
    shared_with_client: bool


class PortalDocumentResponse(BaseModel):
    """Document as the client sees it."""
    id: str
    name: str
    mime_type: str
    size: int
    category: str
    description: Optional[str] = None
    created_at: datetime
