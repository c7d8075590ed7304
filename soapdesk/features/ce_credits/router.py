# CE Credits Feature - Router

from soapdesk.features.ce_credits.models import CeCredit
from soapdesk.features.ce_credits.schemas import CeCreditCreate, CeCreditResponse, CeCreditUpdate
from soapdesk.shared.crud import OwnedResourceService, build_crud_router


ce_credit_service = OwnedResourceService(
    CeCredit, CeCreditResponse, label="CE credit", resource_type="ce_credit"
)

router = build_crud_router(
    ce_credit_service,
    CeCreditCreate,
    CeCreditUpdate,
    prefix="/ce-credits",
    tags=["CE Credits"],
)
