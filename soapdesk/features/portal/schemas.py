# Portal Feature - Schemas

from typing import Optional
from datetime import datetime
from pydantic import BaseModel, EmailStr
from soapdesk.shared.schemas import StrictSchema


class PortalLoginRequest(StrictSchema):
    """Schema for client portal login."""
    email: EmailStr
    password: str


class PortalMeResponse(BaseModel):
    """The signed-in client and the provider they belong to."""
    account_id: str
    client_id: str
    user_id: str
    email: str
    first_name: str
    last_name: str
    provider_name: Optional[str] = None
    last_login_at: Optional[datetime] = None


class PortalLoginResponse(BaseModel):
    """Schema for portal login response."""
    access_token: str
    token_type: str = "bearer"
    me: PortalMeResponse
