# Portal Feature - Router

from typing import List
from fastapi import APIRouter, Depends, status
from soapdesk.core.ownership import PortalIdentity
from soapdesk.features.documents.router import file_response
from soapdesk.features.documents.schemas import PortalDocumentResponse
from soapdesk.features.documents.service import document_service
from soapdesk.features.intake_forms.schemas import IntakeFormSubmit, PortalIntakeFormResponse
from soapdesk.features.intake_forms.service import intake_form_service
from soapdesk.features.messages.schemas import MessageCreate, MessageResponse, ThreadDetailResponse, ThreadResponse
from soapdesk.features.messages.service import message_service
from soapdesk.features.portal.dependencies import get_portal_identity
from soapdesk.features.portal.schemas import PortalLoginRequest, PortalLoginResponse, PortalMeResponse
from soapdesk.features.portal.service import PortalService


router = APIRouter(prefix="/portal", tags=["Client Portal"])


# ==================== Auth ====================

@router.post("/login", response_model=PortalLoginResponse)
async def portal_login(request: PortalLoginRequest):
    """
    Client portal login.

    - **email**: Portal account email
    - **password**: Portal account password
    """
    return await PortalService.login(request)


@router.get("/me", response_model=PortalMeResponse)
async def get_me(identity: PortalIdentity = Depends(get_portal_identity)):
    """Get the signed-in client's profile."""
    return await PortalService.me(identity)


# ==================== Documents ====================

@router.get("/documents", response_model=List[PortalDocumentResponse])
async def list_documents(identity: PortalIdentity = Depends(get_portal_identity)):
    """Get documents your provider has shared with you."""
    return await document_service.list_for_portal(identity)


@router.get("/documents/{document_id}/download")
async def download_document(
    document_id: str,
    identity: PortalIdentity = Depends(get_portal_identity)
):
    """Download a shared document."""
    document, content = await document_service.download_for_portal(document_id, identity)
    return file_response(document, content)


# ==================== Intake forms ====================

@router.get("/intake-forms", response_model=List[PortalIntakeFormResponse])
async def list_intake_forms(identity: PortalIdentity = Depends(get_portal_identity)):
    """Get your intake forms, newest first."""
    return await intake_form_service.list_for_portal(identity)


@router.get("/intake-forms/{form_id}", response_model=PortalIntakeFormResponse)
async def get_intake_form(
    form_id: str,
    identity: PortalIdentity = Depends(get_portal_identity)
):
    """Get one intake form with its questions."""
    return await intake_form_service.get_for_portal(form_id, identity)


@router.put("/intake-forms/{form_id}", response_model=PortalIntakeFormResponse)
async def submit_intake_form(
    form_id: str,
    request: IntakeFormSubmit,
    identity: PortalIdentity = Depends(get_portal_identity)
):
    """
    Submit answers to a pending intake form.

    - **responses**: Answers keyed by question id

    A form can only be submitted once.
    """
    return await intake_form_service.submit(form_id, request, identity)


# ==================== Messages ====================

@router.get("/messages", response_model=List[ThreadResponse])
async def list_threads(identity: PortalIdentity = Depends(get_portal_identity)):
    """Get your message threads with unread counts."""
    return await message_service.list_for_portal(identity)


@router.get("/messages/{thread_id}", response_model=ThreadDetailResponse)
async def open_thread(
    thread_id: str,
    identity: PortalIdentity = Depends(get_portal_identity)
):
    """Open a thread. Your provider's messages are marked as read."""
    return await message_service.open_for_portal(thread_id, identity)


@router.post("/messages/{thread_id}", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def send_message(
    thread_id: str,
    request: MessageCreate,
    identity: PortalIdentity = Depends(get_portal_identity)
):
    """
    Reply in a thread.

    - **body**: Message text
    """
    return await message_service.send_as_client(thread_id, request, identity)
