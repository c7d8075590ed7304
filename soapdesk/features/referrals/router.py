# Referrals Feature - Router

from soapdesk.features.referrals.models import Referral
from soapdesk.features.referrals.schemas import ReferralCreate, ReferralResponse, ReferralUpdate
from soapdesk.shared.crud import OwnedResourceService, build_crud_router


referral_service = OwnedResourceService(
    Referral, ReferralResponse, label="Referral", resource_type="referral"
)

router = build_crud_router(
    referral_service,
    ReferralCreate,
    ReferralUpdate,
    prefix="/referrals",
    tags=["Referrals"],
)
