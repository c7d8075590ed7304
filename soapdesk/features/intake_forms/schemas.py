# Intake Forms Feature - Schemas

from typing import Any, Dict, List, Literal, Optional
from datetime import datetime
from pydantic import BaseModel, Field, field_validator
from soapdesk.features.intake_forms.models import IntakeQuestion
from soapdesk.shared.schemas import RecordResponse, StrictSchema


class _Questions(StrictSchema):

    @field_validator("questions", check_fields=False)
    @classmethod
    def validate_unique_ids(cls, v):
        if v is not None:
            ids = [q.id for q in v]
            if len(ids) != len(set(ids)):
                raise ValueError("question ids must be unique")
        return v


class IntakeFormCreate(_Questions):
    client_id: str
    title: str = Field(..., min_length=1, max_length=200)
    form_type: str = Field("intake", max_length=50)
    questions: List[IntakeQuestion] = Field(default_factory=list)


class IntakeFormUpdate(_Questions):
    """Provider edits. ``status`` may only be used to mark a submitted form reviewed."""
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    form_type: Optional[str] = Field(None, max_length=50)
    questions: Optional[List[IntakeQuestion]] = None
    status: Optional[Literal["reviewed"]] = None


class IntakeFormSubmit(StrictSchema):
    """Client answers, keyed by question id."""
    responses: Dict[str, Any]


class IntakeFormResponse(RecordResponse):
    client_id: str
    title: str
    form_type: str
    questions: List[IntakeQuestion]
    responses: Dict[str, Any]
    status: str
    submitted_at: Optional[datetime] = None
    reviewed_at: Optional[datetime] = None


class PortalIntakeFormResponse(BaseModel):
    """Intake form as the client sees it."""
    id: str
    title: str
    form_type: str
    questions: List[IntakeQuestion]
    responses: Dict[str, Any]
    status: str
    submitted_at: Optional[datetime] = None
    created_at: datetime
