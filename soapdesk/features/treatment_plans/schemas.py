# Treatment Plans Feature - Schemas

from typing import List, Optional
from datetime import datetime
from pydantic import Field
from soapdesk.features.notes.models import Diagnosis
from soapdesk.features.treatment_plans.models import TreatmentGoal, TreatmentPlanStatus
from soapdesk.shared.schemas import RecordResponse, StrictSchema


class TreatmentPlanCreate(StrictSchema):
    client_id: str
    diagnoses: List[Diagnosis] = Field(default_factory=list)
    presenting_problems: List[str] = Field(default_factory=list)
    goals: List[TreatmentGoal] = Field(default_factory=list)
    frequency: str = "Weekly"
    estimated_duration: Optional[str] = None
    start_date: datetime = Field(default_factory=datetime.utcnow)
    review_date: Optional[datetime] = None
    status: TreatmentPlanStatus = "draft"
    notes: Optional[str] = None


class TreatmentPlanUpdate(StrictSchema):
    client_id: Optional[str] = None
    diagnoses: Optional[List[Diagnosis]] = None
    presenting_problems: Optional[List[str]] = None
    goals: Optional[List[TreatmentGoal]] = None
    frequency: Optional[str] = None
    estimated_duration: Optional[str] = None
    start_date: Optional[datetime] = None
    review_date: Optional[datetime] = None
    status: Optional[TreatmentPlanStatus] = None
    notes: Optional[str] = None


class TreatmentPlanResponse(RecordResponse):
    client_id: str
    diagnoses: List[Diagnosis]
    presenting_problems: List[str]
    goals: List[TreatmentGoal]
    frequency: str
    estimated_duration: Optional[str] = None
    start_date: datetime
    review_date: Optional[datetime] = None
    status: str
    notes: Optional[str] = None
