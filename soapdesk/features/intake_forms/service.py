# Intake Forms Feature - Service

from datetime import datetime
from typing import List
from soapdesk.core.logging import logger
from soapdesk.core.ownership import PortalIdentity, ProviderIdentity, get_linked, portal_scope
from soapdesk.features.audit.service import AuditService
from soapdesk.features.intake_forms.models import IntakeForm
from soapdesk.features.intake_forms.schemas import (
    IntakeFormResponse,
    IntakeFormSubmit,
    IntakeFormUpdate,
    PortalIntakeFormResponse,
)
from soapdesk.shared.crud import OwnedResourceService
from soapdesk.shared.exceptions import BadRequestException


class IntakeFormService(OwnedResourceService[IntakeForm]):
    """Provider-side form management plus the client submission path."""

    async def update(
        self,
        record_id: str,
        payload: IntakeFormUpdate,
        identity: ProviderIdentity,
    ) -> IntakeForm:
        form = await self.get_record(record_id, identity)
        if "questions" in payload.model_fields_set and form.status != "pending":
            raise BadRequestException("Questions cannot change after the form is submitted", field="questions")
        if payload.status == "reviewed" and form.status != "submitted":
            raise BadRequestException("Only submitted forms can be marked reviewed", field="status")
        return await super().update(record_id, payload, identity)

    def apply_derived_fields(self, record: IntakeForm) -> None:
        if record.status == "reviewed" and record.reviewed_at is None:
            record.reviewed_at = datetime.utcnow()

    # Portal side

    @staticmethod
    def to_portal_response(form: IntakeForm) -> PortalIntakeFormResponse:
        return PortalIntakeFormResponse(
            id=str(form.id),
            title=form.title,
            form_type=form.form_type,
            questions=form.questions,
            responses=form.responses,
            status=form.status,
            submitted_at=form.submitted_at,
            created_at=form.created_at,
        )

    async def list_for_portal(self, identity: PortalIdentity) -> List[PortalIntakeFormResponse]:
        forms = await IntakeForm.find(portal_scope(identity)).sort([("created_at", -1), ("_id", -1)]).to_list()
        return [self.to_portal_response(form) for form in forms]

    async def get_for_portal(self, form_id: str, identity: PortalIdentity) -> PortalIntakeFormResponse:
        form = await get_linked(IntakeForm, form_id, identity, self.label)
        return self.to_portal_response(form)

    async def submit(
        self,
        form_id: str,
        payload: IntakeFormSubmit,
        identity: PortalIdentity,
    ) -> PortalIntakeFormResponse:
        """
        Record the client's answers. A form can be submitted once.

        Raises:
            BadRequestException: The form is no longer pending, an answer names
                an unknown question, or a required question is unanswered.
        """
        form = await get_linked(IntakeForm, form_id, identity, self.label)

        if form.status != "pending":
            raise BadRequestException("Form has already been submitted", field="status")

        known = {q.id for q in form.questions}
        for key in payload.responses:
            if key not in known:
                raise BadRequestException(f"Unknown question: {key}", field=f"responses.{key}")

        for question in form.questions:
            answer = payload.responses.get(question.id)
            if question.required and (answer is None or answer == ""):
                raise BadRequestException(
                    f"Question '{question.text}' is required",
                    field=f"responses.{question.id}",
                )

        form.responses = payload.responses
        form.status = "submitted"
        form.submitted_at = datetime.utcnow()
        form.update_timestamp()
        await form.save()

        logger.info(f"Intake form {form_id} submitted by portal account {identity.account_id}")
        await AuditService.record(
            form.user_id,
            "portal_submit",
            self.resource_type,
            form_id,
            actor=f"portal:{identity.account_id}",
        )

        return self.to_portal_response(form)


intake_form_service = IntakeFormService(
    IntakeForm, IntakeFormResponse, label="Intake form", resource_type="intake_form"
)
