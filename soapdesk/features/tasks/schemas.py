# Tasks Feature - Schemas

from typing import Optional
from datetime import datetime
from pydantic import Field
from soapdesk.features.tasks.models import TaskPriority, TaskStatus
from soapdesk.shared.schemas import RecordResponse, StrictSchema


class TaskCreate(StrictSchema):
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    priority: TaskPriority = "medium"
    category: str = Field("general", max_length=50)
    due_date: Optional[datetime] = None
    status: TaskStatus = "pending"


class TaskUpdate(StrictSchema):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    priority: Optional[TaskPriority] = None
    category: Optional[str] = Field(None, max_length=50)
    due_date: Optional[datetime] = None
    status: Optional[TaskStatus] = None


class TaskResponse(RecordResponse):
    title: str
    description: Optional[str] = None
    priority: str
    category: str
    due_date: Optional[datetime] = None
    status: str
    completed_at: Optional[datetime] = None
