# Intake Forms Feature - Models

from typing import Any, Dict, List, Literal, Optional
from datetime import datetime
from pydantic import BaseModel, Field
from soapdesk.shared.models import OwnedDocument


IntakeStatus = Literal["pending", "submitted", "reviewed"]
QuestionType = Literal["text", "textarea", "yes_no", "select", "scale", "date"]


class IntakeQuestion(BaseModel):
    id: str = Field(..., min_length=1, max_length=50)
    text: str = Field(..., min_length=1)
    type: QuestionType = "text"
    options: List[str] = Field(default_factory=list)
    required: bool = False


class IntakeForm(OwnedDocument):
    """
    Paperwork sent to a client through the portal.

    The provider writes the questions; the client fills in ``responses``
    (keyed by question id) once, moving the form from pending to submitted.
    """

    client_id: str
    title: str
    form_type: str = "intake"
    questions: List[IntakeQuestion] = Field(default_factory=list)
    responses: Dict[str, Any] = Field(default_factory=dict)
    status: IntakeStatus = "pending"
    submitted_at: Optional[datetime] = None
    reviewed_at: Optional[datetime] = None

    class Settings:
        name = "intake_forms"
        use_state_management = True
        indexes = [
            [("client_id", 1), ("status", 1)],
        ]
