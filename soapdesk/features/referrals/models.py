# Referrals Feature - Models

from typing import List, Literal, Optional
from pydantic import Field
from soapdesk.shared.models import OwnedDocument


ReferralStatus = Literal["pending", "sent", "accepted", "declined", "completed"]


class Referral(OwnedDocument):
    """An outside provider a client is referred to. The client link is optional."""

    client_id: Optional[str] = None
    provider_name: str
    provider_type: str = "psychiatrist"
    specialty: Optional[str] = None
    phone: Optional[str] = None
    fax: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    insurances_accepted: List[str] = Field(default_factory=list)
    accepting_new_patients: bool = True
    telehealth: bool = False
    reason_for_referral: Optional[str] = None
    roi_signed: bool = False
    status: ReferralStatus = "pending"
    notes: Optional[str] = None

    class Settings:
        name = "referrals"
        use_state_management = True
