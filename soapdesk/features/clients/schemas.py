# Clients Feature - Schemas

from typing import Optional
from datetime import datetime
from pydantic import BaseModel, EmailStr, Field
from soapdesk.features.clients.models import ClientStatus
from soapdesk.shared.schemas import RecordResponse, StrictSchema


class ClientCreate(StrictSchema):
    """Schema for creating a client."""
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=30)
    date_of_birth: Optional[datetime] = None
    address: Optional[str] = None
    insurance_provider: Optional[str] = None
    insurance_id: Optional[str] = None
    emergency_contact_name: Optional[str] = None
    emergency_contact_phone: Optional[str] = None
    status: ClientStatus = "active"
    notes: Optional[str] = None


class ClientUpdate(StrictSchema):
    """Schema for updating a client. Only provided fields change."""
    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=30)
    date_of_birth: Optional[datetime] = None
    address: Optional[str] = None
    insurance_provider: Optional[str] = None
    insurance_id: Optional[str] = None
    emergency_contact_name: Optional[str] = None
    emergency_contact_phone: Optional[str] = None
    status: Optional[ClientStatus] = None
    notes: Optional[str] = None


class ClientResponse(RecordResponse):
    """Schema for client response."""
    first_name: str
    last_name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    date_of_birth: Optional[datetime] = None
    address: Optional[str] = None
    insurance_provider: Optional[str] = None
    insurance_id: Optional[str] = None
    emergency_contact_name: Optional[str] = None
    emergency_contact_phone: Optional[str] = None
    status: str
    notes: Optional[str] = None


class PortalAccountCreate(StrictSchema):
    """Credentials for a client's portal login."""
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=72)


class PortalAccountResponse(BaseModel):
    id: str
    client_id: str
    email: str
    status: str
    created_at: datetime
