# Audit Feature - Schemas

from datetime import datetime
from typing import Optional
from pydantic import BaseModel


class AuditLogResponse(BaseModel):
    """Schema for a single audit entry."""
    id: str
    actor: str
    action: str
    resource_type: str
    resource_id: str
    details: Optional[str] = None
    timestamp: datetime
