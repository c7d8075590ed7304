# Safety Plans Feature - Schemas

from typing import List, Optional
from pydantic import Field
from soapdesk.features.safety_plans.models import PlanContact, SafetyPlanStatus, default_crisis_resources
from soapdesk.shared.schemas import RecordResponse, StrictSchema


class SafetyPlanCreate(StrictSchema):
    client_id: str
    client_name: Optional[str] = None
    warning_signals: List[str] = Field(default_factory=list)
    coping_strategies: List[str] = Field(default_factory=list)
    social_distractions: List[PlanContact] = Field(default_factory=list)
    emergency_contacts: List[PlanContact] = Field(default_factory=list)
    professional_contacts: List[PlanContact] = Field(default_factory=list)
    crisis_resources: List[PlanContact] = Field(default_factory=default_crisis_resources)
    environment_safety: List[str] = Field(default_factory=list)
    reasons_for_living: List[str] = Field(default_factory=list)
    status: SafetyPlanStatus = "active"


class SafetyPlanUpdate(StrictSchema):
    client_id: Optional[str] = None
    client_name: Optional[str] = None
    warning_signals: Optional[List[str]] = None
    coping_strategies: Optional[List[str]] = None
    social_distractions: Optional[List[PlanContact]] = None
    emergency_contacts: Optional[List[PlanContact]] = None
    professional_contacts: Optional[List[PlanContact]] = None
    crisis_resources: Optional[List[PlanContact]] = None
    environment_safety: Optional[List[str]] = None
    reasons_for_living: Optional[List[str]] = None
    status: Optional[SafetyPlanStatus] = None


class SafetyPlanResponse(RecordResponse):
    client_id: str
    client_name: Optional[str] = None
    warning_signals: List[str]
    coping_strategies: List[str]
    social_distractions: List[PlanContact]
    emergency_contacts: List[PlanContact]
    professional_contacts: List[PlanContact]
    crisis_resources: List[PlanContact]
    environment_safety: List[str]
    reasons_for_living: List[str]
    status: str
