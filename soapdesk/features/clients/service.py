# Clients Feature - Service

from soapdesk.core.logging import logger
from soapdesk.core.ownership import ProviderIdentity
from soapdesk.core.security import get_password_hash
from soapdesk.features.audit.service import AuditService
from soapdesk.features.clients.models import Client
from soapdesk.features.clients.schemas import (
    ClientResponse,
    PortalAccountCreate,
    PortalAccountResponse,
)
from soapdesk.features.portal.models import PortalAccount
from soapdesk.shared.crud import OwnedResourceService
from soapdesk.shared.exceptions import ConflictException


class ClientService(OwnedResourceService[Client]):
    """Client records plus their portal credentials."""

    async def after_delete(self, record: Client) -> None:
        # A deleted client must not keep a working portal login
        account = await PortalAccount.find_one(PortalAccount.client_id == str(record.id))
        if account:
            await account.delete()
            logger.info(f"Removed portal account for deleted client {record.id}")

    async def create_portal_account(
        self,
        client_id: str,
        request: PortalAccountCreate,
        identity: ProviderIdentity,
    ) -> PortalAccountResponse:
        """Create the portal login for one of the provider's clients."""
        client = await self.get_record(client_id, identity)

        if await PortalAccount.find_one(PortalAccount.client_id == str(client.id)):
            raise ConflictException("Client already has a portal account")

        if await PortalAccount.find_one(PortalAccount.email == request.email):
            raise ConflictException("Email already registered")

        account = PortalAccount(
            email=request.email,
            password_hash=get_password_hash(request.password),
            client_id=str(client.id),
            user_id=identity.user_id,
        )
        await account.insert()

        logger.info(f"Created portal account {account.id} for client {client.id}")
        await AuditService.record(
            identity.user_id, "create", "portal_account", str(account.id),
            details=f"client {client.id}",
        )

        return PortalAccountResponse(
            id=str(account.id),
            client_id=account.client_id,
            email=account.email,
            status=account.status,
            created_at=account.created_at,
        )


client_service = ClientService(Client, ClientResponse, label="Client", resource_type="client")
