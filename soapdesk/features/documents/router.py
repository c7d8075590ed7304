# Documents Feature - Router

from typing import List, Optional
from urllib.parse import quote
from fastapi import APIRouter, Depends, File, Form, Response, UploadFile, status
from soapdesk.core.ownership import ProviderIdentity
from soapdesk.features.auth.dependencies import get_provider_identity
from soapdesk.features.documents.models import ClientDocument
from soapdesk.features.documents.schemas import DocumentResponse, DocumentUpdate
from soapdesk.features.documents.service import document_service
from soapdesk.services.file_storage import sanitize_filename


router = APIRouter(prefix="/documents", tags=["Documents"])


def file_response(document: ClientDocument, content: bytes) -> Response:
    """
    Return stored bytes as an attachment download.

    Header values are latin-1, so the real name goes in the RFC 5987
    ``filename*`` parameter with an ASCII ``filename`` fallback.
    """
    original = document.original_name
    disposition = f'attachment; filename="{sanitize_filename(original)}"'
    if quote(original) != original:
        disposition += f"; filename*=utf-8''{quote(original)}"
    return Response(
        content=content,
        media_type=document.mime_type,
        headers={"Content-Disposition": disposition},
    )


@router.get("", response_model=List[DocumentResponse])
async def list_documents(identity: ProviderIdentity = Depends(get_provider_identity)):
    """Get all documents uploaded by the current provider."""
    return await document_service.list_records(identity)


@router.post("", response_model=DocumentResponse, status_code=status.HTTP_201_CREATED)
async def upload_document(
    file: UploadFile = File(...),
    name: Optional[str] = Form(None),
    client_id: Optional[str] = Form(None),
    category: str = Form("general"),
    description: Optional[str] = Form(None),
    shared_with_client: bool = Form(False),
    identity: ProviderIdentity = Depends(get_provider_identity)
):
    """
    Upload a document.

    - **file**: The file (multipart, size limited by MAX_UPLOAD_SIZE_MB)
    - **name**: Display name (defaults to the file name)
    - **client_id**: Optional client the document belongs to
    - **category**: Document category
    - **shared_with_client**: Make it visible in the client's portal
    """
    document = await document_service.upload(
        file,
        identity,
        name=name,
        client_id=client_id,
        category=category,
        description=description,
        shared_with_client=shared_with_client,
    )
    return document_service.to_response(document)


@router.get("/{document_id}", response_model=DocumentResponse)
async def get_document(
    document_id: str,
    identity: ProviderIdentity = Depends(get_provider_identity)
):
    """Get document metadata."""
    return await document_service.get(document_id, identity)


@router.get("/{document_id}/download")
async def download_document(
    document_id: str,
    identity: ProviderIdentity = Depends(get_provider_identity)
):
    """Download the stored file."""
    document, content = await document_service.download(document_id, identity)
    return file_response(document, content)


@router.put("/{document_id}", response_model=DocumentResponse)
async def update_document(
    document_id: str,
    request: DocumentUpdate,
    identity: ProviderIdentity = Depends(get_provider_identity)
):
    """Update document metadata or sharing."""
    document = await document_service.update(document_id, request, identity)
    return document_service.to_response(document)


@router.delete("/{document_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_document(
    document_id: str,
    identity: ProviderIdentity = Depends(get_provider_identity)
):
    """Delete a document and its stored file."""
    await document_service.delete(document_id, identity)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
