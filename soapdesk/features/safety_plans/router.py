# Safety Plans Feature - Router

from soapdesk.features.safety_plans.models import SafetyPlan
from soapdesk.features.safety_plans.schemas import SafetyPlanCreate, SafetyPlanResponse, SafetyPlanUpdate
from soapdesk.shared.crud import OwnedResourceService, build_crud_router


safety_plan_service = OwnedResourceService(
    SafetyPlan, SafetyPlanResponse, label="Safety plan", resource_type="safety_plan"
)

router = build_crud_router(
    safety_plan_service,
    SafetyPlanCreate,
    SafetyPlanUpdate,
    prefix="/safety-plans",
    tags=["Safety Plans"],
)
