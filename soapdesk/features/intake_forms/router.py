# Intake Forms Feature - Router

from soapdesk.features.intake_forms.schemas import IntakeFormCreate, IntakeFormUpdate
from soapdesk.features.intake_forms.service import intake_form_service
from soapdesk.shared.crud import build_crud_router


router = build_crud_router(
    intake_form_service,
    IntakeFormCreate,
    IntakeFormUpdate,
    prefix="/intake-forms",
    tags=["Intake Forms"],
)
