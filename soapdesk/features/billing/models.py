# Billing Feature - Models

from typing import List, Literal, Optional
from datetime import datetime
from pydantic import Field
from soapdesk.data.instruments import DEFAULT_CPT_CODE
from soapdesk.shared.models import OwnedDocument


ClaimStatus = Literal["unbilled", "submitted", "paid", "denied", "appealed"]


class BillingRecord(OwnedDocument):
    """One billable session. Money is stored in integer cents."""

    client_id: str
    note_id: Optional[str] = None
    service_date: datetime = Field(default_factory=datetime.utcnow)
    cpt_code: str = DEFAULT_CPT_CODE
    icd_codes: List[str] = Field(default_factory=list)
    amount_cents: int = 0
    insurance_provider: Optional[str] = None
    claim_status: ClaimStatus = "unbilled"
    payment_received_cents: int = 0
    notes: Optional[str] = None

    class Settings:
        name = "billing_records"
        use_state_management = True
        indexes = [
            [("user_id", 1), ("claim_status", 1)],
        ]
