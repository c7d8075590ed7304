from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from soapdesk.features.auth.models import User
from soapdesk.features.auth.service import AuthService
from soapdesk.core.ownership import ProviderIdentity
from soapdesk.core.security import PROVIDER_TOKEN, decode_token
from soapdesk.shared.exceptions import CredentialsException


# HTTP Bearer security scheme; missing headers are reported as 401 below
security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> User:
    """
    Dependency to get current authenticated provider.

    Args:
        credentials: HTTP Bearer credentials

    Returns:
        User: Current authenticated provider

    Raises:
        CredentialsException: If credentials are missing or invalid
    """
    if credentials is None:
        raise CredentialsException("Not authenticated")

    payload = decode_token(credentials.credentials)
    if payload is None:
        raise CredentialsException("Invalid authentication credentials")

    if payload.get("type") != PROVIDER_TOKEN:
        raise CredentialsException("Invalid token type. This endpoint requires provider authentication.")

    user_id: str = payload.get("sub")
    if user_id is None:
        raise CredentialsException("Invalid authentication credentials")

    user = await AuthService.get_user_by_id(user_id)
    if user is None:
        raise CredentialsException("User not found")

    if not user.is_active:
        raise CredentialsException("Inactive user")

    return user


async def get_provider_identity(
    current_user: User = Depends(get_current_user)
) -> ProviderIdentity:
    """Dependency resolving the request to the acting provider's identity."""
    return ProviderIdentity(user_id=str(current_user.id), name=current_user.name)
