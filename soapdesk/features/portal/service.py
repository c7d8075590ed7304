# Portal Feature - Service

from datetime import datetime
from soapdesk.core.logging import logger
from soapdesk.core.ownership import PortalIdentity, fetch_document
from soapdesk.core.security import create_portal_token, verify_password
from soapdesk.features.auth.models import User
from soapdesk.features.clients.models import Client
from soapdesk.features.portal.models import PortalAccount
from soapdesk.features.portal.schemas import PortalLoginRequest, PortalLoginResponse, PortalMeResponse
from soapdesk.shared.exceptions import CredentialsException, NotFoundException


class PortalService:
    """Client portal authentication and profile."""

    @staticmethod
    async def login(request: PortalLoginRequest) -> PortalLoginResponse:
        """
        Authenticate a client.

        Every failure gives the same message so the response does not reveal
        which emails have accounts.
        """
        account = await PortalAccount.find_one(PortalAccount.email == request.email)
        if not account or not verify_password(request.password, account.password_hash):
            logger.warning(f"Failed portal login for {request.email}")
            raise CredentialsException("Invalid email or password")

        if account.status != "active":
            logger.warning(f"Disabled portal account attempted login: {account.id}")
            raise CredentialsException("Invalid email or password")

        account.last_login_at = datetime.utcnow()
        await account.save()

        token = create_portal_token(str(account.id), account.client_id, account.user_id)
        logger.info(f"Portal login for client {account.client_id}")

        identity = PortalIdentity(
            account_id=str(account.id), client_id=account.client_id, user_id=account.user_id
        )
        return PortalLoginResponse(access_token=token, me=await PortalService.me(identity))

    @staticmethod
    async def get_active_account(account_id: str) -> PortalAccount:
        account = await fetch_document(PortalAccount, account_id)
        if account is None:
            raise CredentialsException("Portal account not found")
        if account.status != "active":
            raise CredentialsException("Portal account is disabled")
        return account

    @staticmethod
    async def me(identity: PortalIdentity) -> PortalMeResponse:
        account = await fetch_document(PortalAccount, identity.account_id)
        client = await fetch_document(Client, identity.client_id)
        if account is None or client is None:
            raise NotFoundException("Client not found")

        provider = await fetch_document(User, identity.user_id)

        return PortalMeResponse(
            account_id=identity.account_id,
            client_id=identity.client_id,
            user_id=identity.user_id,
            email=account.email,
            first_name=client.first_name,
            last_name=client.last_name,
            provider_name=provider.name if provider else None,
            last_login_at=account.last_login_at,
        )
