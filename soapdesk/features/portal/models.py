# Portal Feature - Models

from datetime import datetime
from typing import Literal, Optional
from beanie import Document, Indexed
from pydantic import EmailStr
from soapdesk.shared.models import TimestampMixin


class PortalAccount(Document, TimestampMixin):
    """
    Client-facing login, distinct from provider accounts.
    Scoped to exactly one client record and that client's provider.
    """

    email: Indexed(EmailStr, unique=True)
    password_hash: str

    client_id: Indexed(str, unique=True)
    user_id: Indexed(str)  # owning provider

    status: Literal["active", "disabled"] = "active"
    last_login_at: Optional[datetime] = None

    class Settings:
        name = "portal_accounts"
        use_state_management = True
