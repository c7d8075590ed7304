# Documents Feature - Models

from typing import Optional
from soapdesk.shared.models import OwnedDocument


DOCUMENT_CATEGORIES = ["general", "assessment", "consent", "insurance", "correspondence", "homework", "other"]


class ClientDocument(OwnedDocument):
    """
    An uploaded file. The bytes live in file storage under ``storage_key``;
    the client only sees it in the portal when ``shared_with_client`` is set.
    """

    client_id: Optional[str] = None
    name: str
    original_name: str
    mime_type: str = "application/octet-stream"
    size: int = 0
    category: str = "general"
    description: Optional[str] = None
    shared_with_client: bool = False
    storage_key: str

    class Settings:
        name = "documents"
        use_state_management = True
        indexes = [
            [("client_id", 1), ("shared_with_client", 1)],
        ]
