# Messages Feature - Models

from typing import Literal, Optional
from datetime import datetime
from beanie import Document, Indexed
from pydantic import Field
from soapdesk.shared.models import OwnedDocument, TimestampMixin


SenderType = Literal["provider", "client"]
ThreadStatus = Literal["open", "closed"]


class MessageThread(OwnedDocument):
    """
    Secure message thread between a provider and one of their clients.
    Unread counts are derived from the messages, not stored here.
    """

    client_id: Indexed(str)
    subject: str

    # Last message preview for thread lists
    last_message: Optional[str] = None
    last_message_at: Optional[datetime] = None
    last_message_sender: Optional[SenderType] = None

    status: ThreadStatus = "open"

    class Settings:
        name = "message_threads"
        use_state_management = True
        indexes = [
            [("user_id", 1), ("last_message_at", -1)],
            [("client_id", 1), ("last_message_at", -1)],
        ]

    class Config:
        json_schema_extra = {
            "example": {
                "client_id": "65a1b2c3d4e5f6a7b8c9d0e1",
                "subject": "Rescheduling next week",
                "last_message": "Would Thursday at 3pm work?",
                "last_message_sender": "provider",
                "status": "open",
            }
        }


class Message(Document, TimestampMixin):
    """
    A single message in a thread.
    Each side tracks its own read flag; the sender's flag starts as read.
    """

    thread_id: Indexed(str)
    user_id: Indexed(str)
    client_id: str

    sender_type: SenderType
    body: str

    read_by_provider: bool = False
    read_by_client: bool = False

    class Settings:
        name = "messages"
        use_state_management = True
        indexes = [
            [("thread_id", 1), ("created_at", 1)],
        ]
