# Notes Feature - Router

from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Response, status
from soapdesk.core.ownership import ProviderIdentity
from soapdesk.features.auth.dependencies import get_provider_identity
from soapdesk.features.notes.models import CodingSuggestion
from soapdesk.features.notes.schemas import NoteCreate, NoteUpdate, NoteResponse
from soapdesk.features.notes.service import note_service
from soapdesk.services.coding_assistant import CodingAssistant, get_coding_assistant


router = APIRouter(prefix="/soap-notes", tags=["SOAP Notes"])


@router.get("", response_model=List[NoteResponse])
async def list_notes(
    search: Optional[str] = Query(None, max_length=200),
    identity: ProviderIdentity = Depends(get_provider_identity)
):
    """
    List the current provider's SOAP notes, most recently updated first.

    - **search**: Optional case-insensitive match on client name or assessment
    """
    return await note_service.list_notes(identity, search=search)


@router.post("", response_model=NoteResponse, status_code=status.HTTP_201_CREATED)
async def create_note(
    note_data: NoteCreate,
    identity: ProviderIdentity = Depends(get_provider_identity)
):
    """
    Create a SOAP note.

    - **client_name**: Client display name
    - **session_date**: Date of the session
    - **cpt_code**: Billing code (default 90837)
    - **phq9_items**: Nine PHQ-9 responses (0-3 each) or empty
    - **gad7_items**: Seven GAD-7 responses (0-3 each) or empty
    - **risk_suicidal** / **risk_homicidal**: Denied, Passive or Active

    Questionnaire totals are computed from the item responses.
    """
    note = await note_service.create(note_data, identity)
    return note_service.to_response(note)


@router.get("/{note_id}", response_model=NoteResponse)
async def get_note(
    note_id: str,
    identity: ProviderIdentity = Depends(get_provider_identity)
):
    """Get a single SOAP note."""
    return await note_service.get(note_id, identity)


@router.put("/{note_id}", response_model=NoteResponse)
async def update_note(
    note_id: str,
    note_data: NoteUpdate,
    identity: ProviderIdentity = Depends(get_provider_identity)
):
    """
    Update a SOAP note. Only the fields sent are changed; scores are
    recomputed from the stored item responses.
    """
    note = await note_service.update(note_id, note_data, identity)
    return note_service.to_response(note)


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_note(
    note_id: str,
    identity: ProviderIdentity = Depends(get_provider_identity)
):
    """Permanently delete a SOAP note."""
    await note_service.delete(note_id, identity)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{note_id}/ai-suggest", response_model=CodingSuggestion)
async def generate_coding_suggestion(
    note_id: str,
    identity: ProviderIdentity = Depends(get_provider_identity),
    assistant: CodingAssistant = Depends(get_coding_assistant)
):
    """
    Ask the coding assistant for up to three ICD-10 diagnoses and a CPT code.

    The suggestion is stored on the note and replaces any earlier one.
    Nothing is stored when the assistant fails.
    """
    return await note_service.generate_suggestion(note_id, identity, assistant)


@router.get("/{note_id}/ai-suggest", response_model=CodingSuggestion)
async def get_coding_suggestion(
    note_id: str,
    identity: ProviderIdentity = Depends(get_provider_identity)
):
    """Get the last stored coding suggestion for a note."""
    return await note_service.get_suggestion(note_id, identity)
