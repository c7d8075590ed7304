# Billing Feature - Schemas

from typing import List, Optional
from datetime import datetime
from pydantic import Field
from soapdesk.data.instruments import DEFAULT_CPT_CODE
from soapdesk.features.billing.models import ClaimStatus
from soapdesk.shared.schemas import RecordResponse, StrictSchema


class BillingRecordCreate(StrictSchema):
    """Schema for creating a billing record."""
    client_id: str
    note_id: Optional[str] = None
    service_date: datetime = Field(default_factory=datetime.utcnow)
    cpt_code: str = Field(DEFAULT_CPT_CODE, min_length=1, max_length=10)
    icd_codes: List[str] = Field(default_factory=list)
    amount_cents: int = Field(0, ge=0)
    insurance_provider: Optional[str] = None
    claim_status: ClaimStatus = "unbilled"
    payment_received_cents: int = Field(0, ge=0)
    notes: Optional[str] = None


class BillingRecordUpdate(StrictSchema):
    """Schema for updating a billing record. Only provided fields change."""
    client_id: Optional[str] = None
    note_id: Optional[str] = None
    service_date: Optional[datetime] = None
    cpt_code: Optional[str] = Field(None, min_length=1, max_length=10)
    icd_codes: Optional[List[str]] = None
    amount_cents: Optional[int] = Field(None, ge=0)
    insurance_provider: Optional[str] = None
    claim_status: Optional[ClaimStatus] = None
    payment_received_cents: Optional[int] = Field(None, ge=0)
    notes: Optional[str] = None


class BillingRecordResponse(RecordResponse):
    client_id: str
    note_id: Optional[str] = None
    service_date: datetime
    cpt_code: str
    icd_codes: List[str]
    amount_cents: int
    insurance_provider: Optional[str] = None
    claim_status: str
    payment_received_cents: int
    notes: Optional[str] = None
