# Messages Feature - Router

from typing import List
from fastapi import APIRouter, Depends, Response, status
from soapdesk.core.ownership import ProviderIdentity
from soapdesk.features.auth.dependencies import get_provider_identity
from soapdesk.features.messages.schemas import (
    MessageCreate,
    MessageResponse,
    ReadReceiptResponse,
    ThreadCreate,
    ThreadResponse,
    ThreadUpdate,
)
from soapdesk.features.messages.service import message_service


router = APIRouter(prefix="/message-threads", tags=["Messages"])


@router.get("", response_model=List[ThreadResponse])
async def list_threads(identity: ProviderIdentity = Depends(get_provider_identity)):
    """
    Get all message threads for the current provider, most recent first.

    Each thread carries the number of client messages not yet read.
    """
    return await message_service.list_records(identity)


@router.post("", response_model=ThreadResponse, status_code=status.HTTP_201_CREATED)
async def create_thread(
    request: ThreadCreate,
    identity: ProviderIdentity = Depends(get_provider_identity)
):
    """
    Open a thread with one of your clients.

    - **client_id**: Client the thread is with
    - **subject**: Thread subject
    - **body**: Optional first message
    """
    thread = await message_service.create(request, identity)
    return await message_service.thread_response(thread)


@router.get("/{thread_id}", response_model=ThreadResponse)
async def get_thread(
    thread_id: str,
    identity: ProviderIdentity = Depends(get_provider_identity)
):
    """Get a thread summary."""
    return await message_service.get(thread_id, identity)


@router.put("/{thread_id}", response_model=ThreadResponse)
async def update_thread(
    thread_id: str,
    request: ThreadUpdate,
    identity: ProviderIdentity = Depends(get_provider_identity)
):
    """Rename a thread or close it. Closed threads accept no new messages."""
    thread = await message_service.update(thread_id, request, identity)
    return await message_service.thread_response(thread)


@router.delete("/{thread_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_thread(
    thread_id: str,
    identity: ProviderIdentity = Depends(get_provider_identity)
):
    """Delete a thread and all of its messages."""
    await message_service.delete(thread_id, identity)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{thread_id}/messages", response_model=List[MessageResponse])
async def get_messages(
    thread_id: str,
    identity: ProviderIdentity = Depends(get_provider_identity)
):
    """Get messages in a thread, oldest first."""
    return await message_service.list_messages(thread_id, identity)


@router.post("/{thread_id}/messages", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def send_message(
    thread_id: str,
    request: MessageCreate,
    identity: ProviderIdentity = Depends(get_provider_identity)
):
    """
    Send a message to the client.

    - **body**: Message text
    """
    return await message_service.send_as_provider(thread_id, request, identity)


@router.put("/{thread_id}/read", response_model=ReadReceiptResponse)
async def mark_thread_read(
    thread_id: str,
    identity: ProviderIdentity = Depends(get_provider_identity)
):
    """Mark all client messages in the thread as read."""
    count = await message_service.mark_read_by_provider(thread_id, identity)
    return ReadReceiptResponse(marked_read=count)
