from beanie import Document, Indexed
from pydantic import Field
from datetime import datetime


class TimestampMixin:
    """Mixin for adding timestamp fields to documents."""

    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    def update_timestamp(self):
        """Update the updated_at timestamp."""
        self.updated_at = datetime.utcnow()


class OwnedDocument(Document, TimestampMixin):
    """
    Base for every record owned by a single provider.

    ``user_id`` is the owning provider's id and is never taken from a
    request payload.
    """

    user_id: Indexed(str)

    class Settings:
        use_state_management = True
