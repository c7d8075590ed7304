# Notes Feature - Schemas

from typing import Annotated, List, Optional
from datetime import datetime
from pydantic import Field, field_validator
from soapdesk.data.instruments import DEFAULT_CPT_CODE, GAD7, ITEM_MAX, ITEM_MIN, PHQ9, get_instrument
from soapdesk.features.notes.models import CodingSuggestion, Diagnosis, RiskLevel
from soapdesk.shared.schemas import RecordResponse, StrictSchema


ItemResponse = Annotated[int, Field(ge=ITEM_MIN, le=ITEM_MAX)]


class _InstrumentItems(StrictSchema):
    """Item lists are either empty (not administered) or complete."""

    @field_validator("phq9_items", "gad7_items", check_fields=False)
    @classmethod
    def validate_item_count(cls, v, info):
        if v is None or len(v) == 0:
            return v
        instrument = get_instrument(PHQ9 if info.field_name == "phq9_items" else GAD7)
        if len(v) != instrument["item_count"]:
            raise ValueError(
                f"{instrument['name']} requires exactly {instrument['item_count']} item responses"
            )
        return v


class NoteCreate(_InstrumentItems):
    """Schema for creating a SOAP note. Scores are derived, never accepted."""
    client_name: str = Field(..., min_length=1, max_length=200)
    client_dob: Optional[datetime] = None
    provider_name: Optional[str] = Field(None, max_length=200)
    session_date: datetime = Field(default_factory=datetime.utcnow)
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    location: str = "Office"
    is_telehealth: bool = False
    cpt_code: str = Field(DEFAULT_CPT_CODE, min_length=1, max_length=10)

    subjective: str = ""
    objective: str = ""
    assessment: str = ""
    plan: str = ""

    phq9_items: List[ItemResponse] = Field(default_factory=list)
    gad7_items: List[ItemResponse] = Field(default_factory=list)

    risk_suicidal: RiskLevel = "Denied"
    risk_homicidal: RiskLevel = "Denied"
    risk_safety_plan: bool = False
    risk_resources: bool = False

    diagnoses: List[Diagnosis] = Field(default_factory=list)


class NoteUpdate(_InstrumentItems):
    """Schema for updating a SOAP note. Only provided fields change."""
    client_name: Optional[str] = Field(None, min_length=1, max_length=200)
    client_dob: Optional[datetime] = None
    provider_name: Optional[str] = Field(None, max_length=200)
    session_date: Optional[datetime] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    location: Optional[str] = None
    is_telehealth: Optional[bool] = None
    cpt_code: Optional[str] = Field(None, min_length=1, max_length=10)

    subjective: Optional[str] = None
    objective: Optional[str] = None
    assessment: Optional[str] = None
    plan: Optional[str] = None

    phq9_items: Optional[List[ItemResponse]] = None
    gad7_items: Optional[List[ItemResponse]] = None

    risk_suicidal: Optional[RiskLevel] = None
    risk_homicidal: Optional[RiskLevel] = None
    risk_safety_plan: Optional[bool] = None
    risk_resources: Optional[bool] = None

    diagnoses: Optional[List[Diagnosis]] = None


class NoteResponse(RecordResponse):
    """Schema for note response, including derived severity and risk fields."""
    client_name: str
    client_dob: Optional[datetime] = None
    provider_name: Optional[str] = None
    session_date: datetime
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    location: str
    is_telehealth: bool
    cpt_code: str

    subjective: str
    objective: str
    assessment: str
    plan: str

    phq9_items: List[int]
    phq9_score: int
    phq9_severity: str
    gad7_items: List[int]
    gad7_score: int
    gad7_severity: str

    risk_suicidal: str
    risk_homicidal: str
    risk_safety_plan: bool
    risk_resources: bool
    risk_flagged: bool

    diagnoses: List[Diagnosis]
    ai_suggestion: Optional[CodingSuggestion] = None
