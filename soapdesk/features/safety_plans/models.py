# Safety Plans Feature - Models

from typing import List, Literal, Optional
from pydantic import BaseModel, Field
from soapdesk.shared.models import OwnedDocument


SafetyPlanStatus = Literal["active", "archived"]


class PlanContact(BaseModel):
    """A person or service listed on a safety plan."""
    name: str = Field(..., min_length=1, max_length=200)
    phone: Optional[str] = None
    role: Optional[str] = None
    relationship: Optional[str] = None


def default_crisis_resources() -> List[PlanContact]:
    return [
        PlanContact(name="988 Suicide & Crisis Lifeline", phone="988"),
        PlanContact(name="Crisis Text Line", phone="Text HOME to 741741"),
        PlanContact(name="Emergency Services", phone="911"),
    ]


class SafetyPlan(OwnedDocument):
    """Stanley-Brown style safety plan for one client."""

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

    class Settings:
        name = "safety_plans"
        use_state_management = True
