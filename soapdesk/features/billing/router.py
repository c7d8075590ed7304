# Billing Feature - Router

from soapdesk.features.billing.schemas import BillingRecordCreate, BillingRecordUpdate
from soapdesk.features.billing.service import billing_service
from soapdesk.shared.crud import build_crud_router


router = build_crud_router(
    billing_service,
    BillingRecordCreate,
    BillingRecordUpdate,
    prefix="/billing-records",
    tags=["Billing"],
)
