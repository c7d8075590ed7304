# Notes Feature - Models

from typing import List, Literal, Optional
from datetime import datetime
from pydantic import BaseModel, Field
from soapdesk.data.instruments import DEFAULT_CPT_CODE
from soapdesk.shared.models import OwnedDocument


RiskLevel = Literal["Denied", "Passive", "Active"]


class Diagnosis(BaseModel):
    """An ICD-10 diagnosis attached to a note."""
    code: str = Field(..., min_length=1, max_length=20)
    name: str = Field(..., min_length=1, max_length=200)


class SuggestedDiagnosis(BaseModel):
    code: str
    name: str
    confidence: float = Field(..., ge=0.0, le=1.0)


class CodingSuggestion(BaseModel):
    """Model-generated coding suggestion stored on the note for later display."""
    suggested_diagnoses: List[SuggestedDiagnosis] = Field(default_factory=list, max_length=3)
    suggested_cpt: str
    reasoning: str = ""
    generated_at: datetime = Field(default_factory=datetime.utcnow)


class SoapNote(OwnedDocument):
    """
    SOAP note for one therapy session.

    The client is referenced by name, not id. ``phq9_score`` and ``gad7_score``
    always equal the sum of their item lists and are only ever written by the
    service layer.
    """

    # Session info
    client_name: str
    client_dob: Optional[datetime] = None
    provider_name: Optional[str] = None
    session_date: datetime = Field(default_factory=datetime.utcnow)
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    location: str = "Office"
    is_telehealth: bool = False
    cpt_code: str = DEFAULT_CPT_CODE

    # SOAP content
    subjective: str = ""
    objective: str = ""
    assessment: str = ""
    plan: str = ""

    # Questionnaires
    phq9_items: List[int] = Field(default_factory=list)
    phq9_score: int = 0
    gad7_items: List[int] = Field(default_factory=list)
    gad7_score: int = 0

    # Risk assessment
    risk_suicidal: RiskLevel = "Denied"
    risk_homicidal: RiskLevel = "Denied"
    risk_safety_plan: bool = False
    risk_resources: bool = False

    diagnoses: List[Diagnosis] = Field(default_factory=list)

    ai_suggestion: Optional[CodingSuggestion] = None

    class Settings:
        name = "soap_notes"
        use_state_management = True
        indexes = [
            [("user_id", 1), ("updated_at", -1)],
            [("user_id", 1), ("session_date", -1)],
        ]

    class Config:
        json_schema_extra = {
            "example": {
                "client_name": "Sarah Johnson",
                "session_date": "2024-01-15T10:00:00Z",
                "cpt_code": "90837",
                "subjective": "Client reports low mood for two weeks.",
                "phq9_items": [3, 2, 1, 0, 2, 1, 0, 1, 2],
                "phq9_score": 12,
                "risk_suicidal": "Denied",
                "risk_homicidal": "Denied",
            }
        }
