from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional
from datetime import datetime


# Request Schemas
class RegisterRequest(BaseModel):
    """Provider registration request schema."""

    name: str = Field(..., min_length=2, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=72)
    credentials: Optional[str] = Field(None, max_length=50)
    license_number: Optional[str] = Field(None, max_length=50)

    @field_validator('password')
    @classmethod
    def validate_password(cls, v: str) -> str:
        if not any(c.isupper() for c in v):
            raise ValueError('Password must contain at least one uppercase letter')
        if not any(c.islower() for c in v):
            raise ValueError('Password must contain at least one lowercase letter')
        if not any(c.isdigit() for c in v):
            raise ValueError('Password must contain at least one digit')
        return v


class LoginRequest(BaseModel):
    """Login request schema."""

    email: EmailStr
    password: str


# Response Schemas
class UserResponse(BaseModel):
    """Provider account response schema."""

    id: str
    email: EmailStr
    name: str
    credentials: Optional[str] = None
    license_number: Optional[str] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime


class TokenResponse(BaseModel):
    """Bearer token plus the account it was issued for."""

    access_token: str
    token_type: str = "bearer"
    user: UserResponse
