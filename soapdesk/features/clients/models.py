# Clients Feature - Models

from typing import Literal, Optional
from datetime import datetime
from pydantic import EmailStr
from soapdesk.shared.models import OwnedDocument


ClientStatus = Literal["active", "inactive", "discharged"]


class Client(OwnedDocument):
    """A patient record owned by exactly one provider."""

    first_name: str
    last_name: str
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    date_of_birth: Optional[datetime] = None
    address: Optional[str] = None

    insurance_provider: Optional[str] = None
    insurance_id: Optional[str] = None

    emergency_contact_name: Optional[str] = None
    emergency_contact_phone: Optional[str] = None

    status: ClientStatus = "active"
    notes: Optional[str] = None

    class Settings:
        name = "clients"
        use_state_management = True
        indexes = [
            [("user_id", 1), ("status", 1)],
        ]

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    class Config:
        json_schema_extra = {
            "example": {
                "first_name": "Sarah",
                "last_name": "Johnson",
                "email": "sarah@example.com",
                "phone": "+1 555 0100",
                "insurance_provider": "Aetna",
                "status": "active",
            }
        }
