# Notes Feature - Service

import re
from typing import List, Optional
from soapdesk.core.logging import logger
from soapdesk.core.ownership import ProviderIdentity, provider_scope
from soapdesk.features.audit.service import AuditService
from soapdesk.features.notes.models import CodingSuggestion, SoapNote
from soapdesk.features.notes.schemas import NoteCreate, NoteResponse
from soapdesk.services.coding_assistant import CodingAssistant, CodingAssistantError
from soapdesk.services.scoring import compute_score, gad7_severity, is_risk_flagged, phq9_severity
from soapdesk.shared.crud import OwnedResourceService
from soapdesk.shared.exceptions import InternalServerException, NotFoundException


class NoteService(OwnedResourceService[SoapNote]):
    """SOAP notes with derived questionnaire scores and coding suggestions."""

    def apply_derived_fields(self, record: SoapNote) -> None:
        record.phq9_score = compute_score(record.phq9_items)
        record.gad7_score = compute_score(record.gad7_items)

    def to_response(self, record: SoapNote) -> NoteResponse:
        data = record.model_dump()
        data["id"] = str(record.id)
        data["phq9_severity"] = phq9_severity(record.phq9_score)
        data["gad7_severity"] = gad7_severity(record.gad7_score)
        data["risk_flagged"] = is_risk_flagged(record.risk_suicidal, record.risk_homicidal)
        return NoteResponse.model_validate(data)

    async def list_notes(
        self,
        identity: ProviderIdentity,
        search: Optional[str] = None,
    ) -> List[NoteResponse]:
        """List the provider's notes, newest first, optionally filtered by client name or assessment."""
        query = provider_scope(identity)
        if search:
            pattern = {"$regex": re.escape(search.strip()), "$options": "i"}
            query["$or"] = [{"client_name": pattern}, {"assessment": pattern}]

        notes = await SoapNote.find(query).sort([("updated_at", -1), ("_id", -1)]).to_list()
        return [self.to_response(note) for note in notes]

    async def create(self, payload: NoteCreate, identity: ProviderIdentity, **extra) -> SoapNote:
        # Default the signing clinician to the logged-in provider
        if not payload.provider_name and identity.name:
            payload = payload.model_copy(update={"provider_name": identity.name})
        return await super().create(payload, identity, **extra)

    async def generate_suggestion(
        self,
        note_id: str,
        identity: ProviderIdentity,
        assistant: CodingAssistant,
    ) -> CodingSuggestion:
        """
        Generate and store a coding suggestion for a note.

        The note is only written when the assistant succeeds; a failed call
        leaves any earlier suggestion in place.
        """
        note = await self.get_record(note_id, identity)

        try:
            suggestion = await assistant.suggest(note)
        except CodingAssistantError as e:
            logger.error(f"Coding suggestion failed for note {note_id}: {e}")
            raise InternalServerException("Failed to generate coding suggestions")

        note.ai_suggestion = suggestion
        note.update_timestamp()
        await note.save()

        await AuditService.record(
            identity.user_id,
            "ai_suggest",
            self.resource_type,
            note_id,
            details=suggestion.suggested_cpt,
        )
        return suggestion

    async def get_suggestion(self, note_id: str, identity: ProviderIdentity) -> CodingSuggestion:
        note = await self.get_record(note_id, identity)
        if note.ai_suggestion is None:
            raise NotFoundException("No coding suggestion for this note")
        return note.ai_suggestion


note_service = NoteService(SoapNote, NoteResponse, label="Note", resource_type="soap_note")
