# Consents Feature - Schemas

from typing import Optional
from datetime import datetime
from pydantic import Field, field_validator
from soapdesk.features.consents.models import CONSENT_DOCUMENT_TYPES, ConsentStatus
from soapdesk.shared.schemas import RecordResponse, StrictSchema


class _DocumentType(StrictSchema):

    @field_validator("document_type", check_fields=False)
    @classmethod
    def validate_document_type(cls, v):
        if v is not None and v not in CONSENT_DOCUMENT_TYPES:
            raise ValueError(f"document_type must be one of: {', '.join(CONSENT_DOCUMENT_TYPES)}")
        return v


class ConsentDocumentCreate(_DocumentType):
    client_id: str
    document_type: str
    version: str = Field("1.0", max_length=20)
    signed_at: Optional[datetime] = None
    expires_at: Optional[datetime] = None
    witness_name: Optional[str] = None
    roi_signed: bool = False
    status: ConsentStatus = "pending"
    notes: Optional[str] = None


class ConsentDocumentUpdate(_DocumentType):
    client_id: Optional[str] = None
    document_type: Optional[str] = None
    version: Optional[str] = Field(None, max_length=20)
    signed_at: Optional[datetime] = None
    expires_at: Optional[datetime] = None
    witness_name: Optional[str] = None
    roi_signed: Optional[bool] = None
    status: Optional[ConsentStatus] = None
    notes: Optional[str] = None


class ConsentDocumentResponse(RecordResponse):
    client_id: str
    document_type: str
    version: str
    signed_at: Optional[datetime] = None
    expires_at: Optional[datetime] = None
    witness_name: Optional[str] = None
    roi_signed: bool
    status: str
    notes: Optional[str] = None
