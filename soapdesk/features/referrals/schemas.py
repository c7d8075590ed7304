# Referrals Feature - Schemas

from typing import List, Optional
from pydantic import EmailStr, Field
from soapdesk.features.referrals.models import ReferralStatus
from soapdesk.shared.schemas import RecordResponse, StrictSchema


class ReferralCreate(StrictSchema):
    client_id: Optional[str] = None
    provider_name: str = Field(..., min_length=1, max_length=200)
    provider_type: str = Field("psychiatrist", max_length=50)
    specialty: Optional[str] = None
    phone: Optional[str] = Field(None, max_length=30)
    fax: Optional[str] = Field(None, max_length=30)
    email: Optional[EmailStr] = None
    address: Optional[str] = None
    insurances_accepted: List[str] = Field(default_factory=list)
    accepting_new_patients: bool = True
    telehealth: bool = False
    reason_for_referral: Optional[str] = None
    roi_signed: bool = False
    status: ReferralStatus = "pending"
    notes: Optional[str] = None


class ReferralUpdate(StrictSchema):
    client_id: Optional[str] = None
    provider_name: Optional[str] = Field(None, min_length=1, max_length=200)
    provider_type: Optional[str] = Field(None, max_length=50)
    specialty: Optional[str] = None
    phone: Optional[str] = Field(None, max_length=30)
    fax: Optional[str] = Field(None, max_length=30)
    email: Optional[EmailStr] = None
    address: Optional[str] = None
    insurances_accepted: Optional[List[str]] = None
    accepting_new_patients: Optional[bool] = None
    telehealth: Optional[bool] = None
    reason_for_referral: Optional[str] = None
    roi_signed: Optional[bool] = None
    status: Optional[ReferralStatus] = None
    notes: Optional[str] = None


class ReferralResponse(RecordResponse):
    client_id: Optional[str] = None
    provider_name: str
    provider_type: str
    specialty: Optional[str] = None
    phone: Optional[str] = None
    fax: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    insurances_accepted: List[str]
    accepting_new_patients: bool
    telehealth: bool
    reason_for_referral: Optional[str] = None
    roi_signed: bool
    status: str
    notes: Optional[str] = None
