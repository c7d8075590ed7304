# Consents Feature - Models

from typing import Literal, Optional
from datetime import datetime
from soapdesk.shared.models import OwnedDocument


ConsentStatus = Literal["pending", "signed", "expired"]

CONSENT_DOCUMENT_TYPES = [
    "informed_consent",
    "telehealth_consent",
    "release_of_information",
    "hipaa_notice",
    "financial_agreement",
    "minor_consent",
]


class ConsentDocument(OwnedDocument):
    """A consent or release form on file for a client."""

    client_id: str
    document_type: str
    version: str = "1.0"
    signed_at: Optional[datetime] = None
    expires_at: Optional[datetime] = None
    witness_name: Optional[str] = None
    roi_signed: bool = False
    status: ConsentStatus = "pending"
    notes: Optional[str] = None

    class Settings:
        name = "consent_documents"
        use_state_management = True
