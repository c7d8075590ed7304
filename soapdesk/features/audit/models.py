# Audit Feature - Models

from datetime import datetime
from typing import Literal, Optional
from beanie import Document, Indexed
from pydantic import Field


AuditAction = Literal["create", "update", "delete", "ai_suggest", "portal_submit"]


class AuditLog(Document):
    """
    Append-only record of a write performed against a clinical record.
    Entries are never updated or deleted by the application.
    """

    user_id: Indexed(str)  # owning provider
    actor: str  # "provider:<id>" or "portal:<account id>"
    action: AuditAction
    resource_type: str
    resource_id: str
    details: Optional[str] = None
    timestamp: datetime = Field(default_factory=datetime.utcnow)

    class Settings:
        name = "audit_logs"
        indexes = [
            [("user_id", 1), ("timestamp", -1)],
        ]
