from beanie import Document, Indexed
from pydantic import EmailStr
from typing import Optional
from soapdesk.shared.models import TimestampMixin


class User(Document, TimestampMixin):
    """Provider (clinician) account. Owns every clinical record it creates."""

    email: Indexed(EmailStr, unique=True)
    password_hash: str
    name: str
    credentials: Optional[str] = None  # e.g. "LCSW"
    license_number: Optional[str] = None
    is_active: bool = True

    class Settings:
        name = "users"
        use_state_management = True

    class Config:
        json_schema_extra = {
            "example": {
                "email": "therapist@example.com",
                "name": "Jordan Reyes",
                "credentials": "LCSW",
            }
        }
