# Tasks Feature - Models

from typing import Literal, Optional
from datetime import datetime
from soapdesk.shared.models import OwnedDocument


TaskPriority = Literal["low", "medium", "high"]
TaskStatus = Literal["pending", "completed"]


class Task(OwnedDocument):
    """A practice to-do item."""

    title: str
    description: Optional[str] = None
    priority: TaskPriority = "medium"
    category: str = "general"
    due_date: Optional[datetime] = None
    status: TaskStatus = "pending"
    completed_at: Optional[datetime] = None

    class Settings:
        name = "tasks"
        use_state_management = True
        indexes = [
            [("user_id", 1), ("status", 1), ("due_date", 1)],
        ]
