# Consents Feature - Router

from soapdesk.features.consents.models import ConsentDocument
from soapdesk.features.consents.schemas import (
    ConsentDocumentCreate,
    ConsentDocumentResponse,
    ConsentDocumentUpdate,
)
from soapdesk.shared.crud import OwnedResourceService, build_crud_router


class ConsentService(OwnedResourceService[ConsentDocument]):

    def apply_derived_fields(self, record: ConsentDocument) -> None:
        # Recording a signature date marks a pending form signed
        if record.signed_at is not None and record.status == "pending":
            record.status = "signed"


consent_service = ConsentService(
    ConsentDocument, ConsentDocumentResponse, label="Consent document", resource_type="consent_document"
)

router = build_crud_router(
    consent_service,
    ConsentDocumentCreate,
    ConsentDocumentUpdate,
    prefix="/consent-documents",
    tags=["Consent Documents"],
)
