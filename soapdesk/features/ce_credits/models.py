# CE Credits Feature - Models

from typing import Literal, Optional
from datetime import datetime
from soapdesk.shared.models import OwnedDocument


CeStatus = Literal["planned", "in-progress", "completed"]

CE_CATEGORIES = [
    "general",
    "ethics",
    "suicide_prevention",
    "cultural_competency",
    "clinical_skills",
    "substance_use",
    "trauma",
]


class CeCredit(OwnedDocument):
    """Continuing education hours logged by the provider for licensure."""

    title: str
    provider: Optional[str] = None
    category: str = "general"
    hours: float = 1.0
    completion_date: Optional[datetime] = None
    expiration_date: Optional[datetime] = None
    certificate_number: Optional[str] = None
    certificate_url: Optional[str] = None
    status: CeStatus = "completed"
    notes: Optional[str] = None

    class Settings:
        name = "ce_credits"
        use_state_management = True
