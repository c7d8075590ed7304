"""Business logic services."""

from soapdesk.services.coding_assistant import CodingAssistant, CodingAssistantError, get_coding_assistant
from soapdesk.services.file_storage import FileStorage, file_storage

__all__ = [
    "CodingAssistant",
    "CodingAssistantError",
    "get_coding_assistant",
    "FileStorage",
    "file_storage",
]
