# Treatment Plans Feature - Router

from soapdesk.features.treatment_plans.models import TreatmentPlan
from soapdesk.features.treatment_plans.schemas import (
    TreatmentPlanCreate,
    TreatmentPlanResponse,
    TreatmentPlanUpdate,
)
from soapdesk.shared.crud import OwnedResourceService, build_crud_router


treatment_plan_service = OwnedResourceService(
    TreatmentPlan, TreatmentPlanResponse, label="Treatment plan", resource_type="treatment_plan"
)

router = build_crud_router(
    treatment_plan_service,
    TreatmentPlanCreate,
    TreatmentPlanUpdate,
    prefix="/treatment-plans",
    tags=["Treatment Plans"],
)
