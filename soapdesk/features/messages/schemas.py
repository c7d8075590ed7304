# Messages Feature - Schemas

from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel, Field
from soapdesk.features.messages.models import ThreadStatus
from soapdesk.shared.schemas import RecordResponse, StrictSchema


class ThreadCreate(StrictSchema):
    """Schema for opening a thread with a client, optionally with a first message."""
    client_id: str
    subject: str = Field(..., min_length=1, max_length=200)
    body: Optional[str] = Field(None, min_length=1, max_length=10000)


class ThreadUpdate(StrictSchema):
    subject: Optional[str] = Field(None, min_length=1, max_length=200)
    status: Optional[ThreadStatus] = None


class MessageCreate(StrictSchema):
    """Schema for sending a message."""
    body: str = Field(..., min_length=1, max_length=10000)


class MessageResponse(BaseModel):
    """Schema for message response."""
    id: str
    thread_id: str
    sender_type: str
    body: str
    read_by_provider: bool
    read_by_client: bool
    created_at: datetime


class ThreadResponse(RecordResponse):
    """Schema for thread response. ``unread_count`` is from the reader's side."""
    client_id: str
    subject: str
    last_message: Optional[str] = None
    last_message_at: Optional[datetime] = None
    last_message_sender: Optional[str] = None
    status: str
    unread_count: int = 0


class ThreadDetailResponse(ThreadResponse):
    messages: List[MessageResponse]


class ReadReceiptResponse(BaseModel):
    """Schema for mark-as-read response."""
    marked_read: int
