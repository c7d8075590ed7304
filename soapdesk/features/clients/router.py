# Clients Feature - Router

from fastapi import APIRouter, Depends, status
from soapdesk.core.ownership import ProviderIdentity
from soapdesk.features.auth.dependencies import get_provider_identity
from soapdesk.features.clients.schemas import (
    ClientCreate,
    ClientUpdate,
    PortalAccountCreate,
    PortalAccountResponse,
)
from soapdesk.features.clients.service import client_service
from soapdesk.shared.crud import build_crud_router


router = APIRouter(prefix="/clients", tags=["Clients"])


@router.post(
    "/{client_id}/portal-account",
    response_model=PortalAccountResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_portal_account(
    client_id: str,
    request: PortalAccountCreate,
    identity: ProviderIdentity = Depends(get_provider_identity)
):
    """
    Give a client a portal login.

    - **email**: Login email for the client
    - **password**: Initial password (min 8 characters)
    """
    return await client_service.create_portal_account(client_id, request, identity)


build_crud_router(
    client_service,
    ClientCreate,
    ClientUpdate,
    prefix="/clients",
    tags=["Clients"],
    router=router,
)
