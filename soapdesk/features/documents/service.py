# Documents Feature - Service

from typing import List, Optional, Tuple
from fastapi import UploadFile
from soapdesk.core.logging import logger
from soapdesk.core.ownership import PortalIdentity, ProviderIdentity, get_linked, portal_scope
from soapdesk.features.audit.service import AuditService
from soapdesk.features.documents.models import DOCUMENT_CATEGORIES, ClientDocument
from soapdesk.features.documents.schemas import DocumentResponse, PortalDocumentResponse
from soapdesk.services.file_storage import FileStorage, file_storage
from soapdesk.shared.crud import OwnedResourceService
from soapdesk.shared.exceptions import BadRequestException, NotFoundException


class DocumentService(OwnedResourceService[ClientDocument]):
    """Document metadata in MongoDB, bytes in file storage."""

    def __init__(self, *args, storage: FileStorage = file_storage, **kwargs):
        super().__init__(*args, **kwargs)
        self.storage = storage

    def apply_derived_fields(self, record: ClientDocument) -> None:
        # Nothing to share with when no client is attached
        if record.client_id is None:
            record.shared_with_client = False

    async def after_delete(self, record: ClientDocument) -> None:
        await self.storage.delete(record.storage_key)

    async def upload(
        self,
        file: UploadFile,
        identity: ProviderIdentity,
        name: Optional[str] = None,
        client_id: Optional[str] = None,
        category: str = "general",
        description: Optional[str] = None,
        shared_with_client: bool = False,
    ) -> ClientDocument:
        """
        Store an uploaded file and its metadata.

        Raises:
            BadRequestException: No file, unknown category, empty or oversized content.
            NotFoundException / ForbiddenException: ``client_id`` is not one of the provider's clients.
        """
        if not file.filename:
            raise BadRequestException("No file provided", field="file")
        if category not in DOCUMENT_CATEGORIES:
            raise BadRequestException(
                f"category must be one of: {', '.join(DOCUMENT_CATEGORIES)}", field="category"
            )

        await self.validate_references({"client_id": client_id}, identity)

        content = await file.read()
        key = await self.storage.save(identity.user_id, file.filename, content)

        document = ClientDocument(
            user_id=identity.user_id,
            client_id=client_id,
            name=name or file.filename,
            original_name=file.filename,
            mime_type=file.content_type or "application/octet-stream",
            size=len(content),
            category=category,
            description=description,
            shared_with_client=shared_with_client,
            storage_key=key,
        )
        self.apply_derived_fields(document)

        try:
            await document.insert()
        except Exception:
            # Do not leave an orphaned blob behind
            await self.storage.delete(key)
            raise

        logger.info(f"Uploaded document {document.id} ({document.size} bytes) for provider {identity.user_id}")
        await AuditService.record(
            identity.user_id, "create", self.resource_type, str(document.id), details=document.original_name
        )
        return document

    async def download(self, document_id: str, identity: ProviderIdentity) -> Tuple[ClientDocument, bytes]:
        document = await self.get_record(document_id, identity)
        return document, await self.storage.read(document.storage_key)

    # Portal side

    @staticmethod
    def to_portal_response(document: ClientDocument) -> PortalDocumentResponse:
        return PortalDocumentResponse(
            id=str(document.id),
            name=document.name,
            mime_type=document.mime_type,
            size=document.size,
            category=document.category,
            description=document.description,
            created_at=document.created_at,
        )

    async def list_for_portal(self, identity: PortalIdentity) -> List[PortalDocumentResponse]:
        documents = await ClientDocument.find(
            {**portal_scope(identity), "shared_with_client": True}
        ).sort([("created_at", -1), ("_id", -1)]).to_list()
        return [self.to_portal_response(d) for d in documents]

    async def get_shared(self, document_id: str, identity: PortalIdentity) -> ClientDocument:
        document = await get_linked(ClientDocument, document_id, identity, self.label)
        # Unshared documents are invisible to the client
        if not document.shared_with_client:
            raise NotFoundException(f"{self.label} not found")
        return document

    async def download_for_portal(self, document_id: str, identity: PortalIdentity) -> Tuple[ClientDocument, bytes]:
        document = await self.get_shared(document_id, identity)
        return document, await self.storage.read(document.storage_key)


document_service = DocumentService(
    ClientDocument, DocumentResponse, label="Document", resource_type="document"
)
