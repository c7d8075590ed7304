# Billing Feature - Service

from typing import Any, Dict
from soapdesk.core.ownership import ProviderIdentity, get_owned
from soapdesk.features.billing.models import BillingRecord
from soapdesk.features.billing.schemas import BillingRecordResponse
from soapdesk.features.notes.models import SoapNote
from soapdesk.shared.crud import OwnedResourceService


class BillingService(OwnedResourceService[BillingRecord]):
    """Billing records may also point at one of the provider's notes."""

    async def validate_references(self, data: Dict[str, Any], identity: ProviderIdentity) -> None:
        await super().validate_references(data, identity)
        if data.get("note_id") is not None:
            await get_owned(SoapNote, data["note_id"], identity, "Note")


billing_service = BillingService(
    BillingRecord, BillingRecordResponse, label="Billing record", resource_type="billing_record"
)
