# Portal Feature - Dependencies

from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from soapdesk.core.logging import logger
from soapdesk.core.ownership import PortalIdentity
from soapdesk.core.security import PORTAL_TOKEN, decode_token
from soapdesk.features.portal.service import PortalService
from soapdesk.shared.exceptions import CredentialsException


# HTTP Bearer security scheme for clients
portal_security = HTTPBearer(auto_error=False)


async def get_portal_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(portal_security)
) -> PortalIdentity:
    """
    Dependency to get the current portal session.

    Raises:
        CredentialsException: Missing or invalid token, a provider token, or
            an account that no longer exists or is disabled.
    """
    if credentials is None:
        raise CredentialsException("Not authenticated")

    payload = decode_token(credentials.credentials)
    if payload is None:
        logger.warning("Failed to decode portal token")
        raise CredentialsException("Invalid authentication credentials")

    token_type = payload.get("type")
    if token_type != PORTAL_TOKEN:
        logger.warning(f"Invalid token type: {token_type}, expected '{PORTAL_TOKEN}'")
        raise CredentialsException("Invalid token type. This endpoint requires portal authentication.")

    account_id = payload.get("sub")
    if account_id is None:
        raise CredentialsException("Invalid authentication credentials")

    # The account is the source of truth for which client the session may see
    account = await PortalService.get_active_account(account_id)

    return PortalIdentity(
        account_id=str(account.id),
        client_id=account.client_id,
        user_id=account.user_id,
    )
