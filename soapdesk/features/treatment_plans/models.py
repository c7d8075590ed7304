# Treatment Plans Feature - Models

from typing import List, Literal, Optional
from datetime import datetime
from pydantic import BaseModel, Field
from soapdesk.features.notes.models import Diagnosis
from soapdesk.shared.models import OwnedDocument


TreatmentPlanStatus = Literal["draft", "active", "completed", "discontinued"]
GoalStatus = Literal["not_started", "in_progress", "met", "discontinued"]


class TreatmentGoal(BaseModel):
    goal: str = Field(..., min_length=1)
    objectives: List[str] = Field(default_factory=list)
    interventions: List[str] = Field(default_factory=list)
    target_date: Optional[datetime] = None
    status: GoalStatus = "not_started"


class TreatmentPlan(OwnedDocument):
    """Goals and interventions agreed with a client, reviewed periodically."""

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

    class Settings:
        name = "treatment_plans"
        use_state_management = True
