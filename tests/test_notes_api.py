"""Test the SOAP note endpoints, including coding suggestions."""

from datetime import datetime

import pytest
from beanie import PydanticObjectId

from soapdesk.features.notes.models import CodingSuggestion, SoapNote, SuggestedDiagnosis
from soapdesk.services.coding_assistant import CodingAssistantError, get_coding_assistant
from soapdesk.main import app


NOTE = {
    "client_name": "Sarah Johnson",
    "session_date": "2024-01-15T10:00:00",
    "subjective": "Low mood for two weeks.",
    "assessment": "Moderate depressive symptoms.",
    "phq9_items": [3, 2, 1, 0, 2, 1, 0, 1, 2],
    "gad7_items": [0, 0, 0, 0, 0, 0, 0],
    "risk_suicidal": "Passive",
    "diagnoses": [{"code": "F32.1", "name": "Major Depressive Disorder, Single Episode, Moderate"}],
}


class FakeAssistant:
    def __init__(self, suggestion=None, error=None):
        self.suggestion = suggestion
        self.error = error
        self.calls = 0

    async def suggest(self, note):
        self.calls += 1
        if self.error:
            raise self.error
        return self.suggestion


async def create_note(client, provider, **overrides):
    response = await client.post("/api/soap-notes", json={**NOTE, **overrides}, headers=provider.headers)
    assert response.status_code == 201, response.text
    return response.json()


async def test_create_note_derives_scores(client, provider_a):
    note = await create_note(client, provider_a)

    assert note["user_id"] == provider_a.id
    assert note["phq9_score"] == 12
    assert note["phq9_severity"] == "Moderate"
    assert note["gad7_score"] == 0
    assert note["gad7_severity"] == "Minimal"
    assert note["risk_flagged"] is True
    assert note["cpt_code"] == "90837"
    assert note["location"] == "Office"
    # Signing clinician defaults to the logged-in provider
    assert note["provider_name"] == "Alice Carter, LCSW"


async def test_scores_cannot_be_supplied(client, provider_a):
    response = await client.post(
        "/api/soap-notes", json={**NOTE, "phq9_score": 27}, headers=provider_a.headers
    )
    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["field"] == "phq9_score"


@pytest.mark.parametrize(
    "overrides, field",
    [
        ({"phq9_items": [1, 2, 3]}, "phq9_items"),
        ({"gad7_items": [0, 0, 0, 0, 0, 0, 4]}, "gad7_items.6"),
        ({"risk_homicidal": "Maybe"}, "risk_homicidal"),
        ({"client_name": ""}, "client_name"),
        ({"owner": "someone"}, "owner"),
    ],
)
async def test_invalid_note_is_rejected(client, provider_a, overrides, field):
    response = await client.post(
        "/api/soap-notes", json={**NOTE, **overrides}, headers=provider_a.headers
    )
    assert response.status_code == 400
    assert response.json()["field"] == field


async def test_requires_authentication(client):
    response = await client.get("/api/soap-notes")
    assert response.status_code == 401
    assert response.json() == {"success": False, "message": "Not authenticated"}


async def test_update_recomputes_scores(client, provider_a):
    note = await create_note(client, provider_a)

    response = await client.put(
        f"/api/soap-notes/{note['id']}",
        json={"phq9_items": [3, 3, 3, 3, 3, 3, 3, 3, 3], "risk_suicidal": "Denied"},
        headers=provider_a.headers,
    )
    assert response.status_code == 200
    updated = response.json()
    assert updated["phq9_score"] == 27
    assert updated["phq9_severity"] == "Severe"
    assert updated["risk_flagged"] is False
    # Untouched fields keep their values
    assert updated["subjective"] == NOTE["subjective"]


async def test_update_rejects_null_for_required_field(client, provider_a):
    note = await create_note(client, provider_a)
    response = await client.put(
        f"/api/soap-notes/{note['id']}", json={"client_name": None}, headers=provider_a.headers
    )
    assert response.status_code == 400
    assert response.json()["field"] == "client_name"


async def test_cross_tenant_access_is_forbidden(client, provider_a, provider_b):
    note = await create_note(client, provider_a)
    url = f"/api/soap-notes/{note['id']}"

    assert (await client.get(url, headers=provider_b.headers)).status_code == 403

    response = await client.put(url, json={"assessment": "overwritten"}, headers=provider_b.headers)
    assert response.status_code == 403
    assert (await client.delete(url, headers=provider_b.headers)).status_code == 403

    # The record is untouched
    stored = await SoapNote.get(PydanticObjectId(note["id"]))
    assert stored.assessment == NOTE["assessment"]


async def test_missing_and_malformed_ids_are_not_found(client, provider_a):
    for note_id in ["65a1b2c3d4e5f6a7b8c9d0e1", "not-an-id"]:
        response = await client.get(f"/api/soap-notes/{note_id}", headers=provider_a.headers)
        assert response.status_code == 404
        assert response.json()["message"] == "Note not found"


async def test_list_is_scoped_and_searchable(client, provider_a, provider_b):
    await create_note(client, provider_a)
    await create_note(client, provider_a, client_name="Marcus Lee", assessment="Adjustment concerns.")
    await create_note(client, provider_b, client_name="Sarah Johnson")

    response = await client.get("/api/soap-notes", headers=provider_a.headers)
    notes = response.json()
    assert len(notes) == 2
    assert {n["user_id"] for n in notes} == {provider_a.id}
    # Most recently updated first
    assert notes[0]["client_name"] == "Marcus Lee"

    response = await client.get("/api/soap-notes", params={"search": "sarah"}, headers=provider_a.headers)
    assert [n["client_name"] for n in response.json()] == ["Sarah Johnson"]

    response = await client.get("/api/soap-notes", params={"search": "adjustment"}, headers=provider_a.headers)
    assert [n["client_name"] for n in response.json()] == ["Marcus Lee"]

    # Regex metacharacters are matched literally
    response = await client.get("/api/soap-notes", params={"search": ".*"}, headers=provider_a.headers)
    assert response.json() == []


async def test_delete_note(client, provider_a):
    note = await create_note(client, provider_a)
    url = f"/api/soap-notes/{note['id']}"

    response = await client.delete(url, headers=provider_a.headers)
    assert response.status_code == 204
    assert (await client.get(url, headers=provider_a.headers)).status_code == 404

    actions = [e["action"] for e in (await client.get("/api/audit-logs", headers=provider_a.headers)).json()]
    assert actions == ["delete", "create"]


async def test_ai_suggest_stores_suggestion(client, provider_a):
    suggestion = CodingSuggestion(
        suggested_diagnoses=[SuggestedDiagnosis(code="F32.1", name="MDD, moderate", confidence=0.8)],
        suggested_cpt="90837",
        reasoning="PHQ-9 of 12 with two weeks of low mood.",
        generated_at=datetime(2024, 1, 15, 11, 0),
    )
    fake = FakeAssistant(suggestion=suggestion)
    app.dependency_overrides[get_coding_assistant] = lambda: fake

    note = await create_note(client, provider_a)
    url = f"/api/soap-notes/{note['id']}/ai-suggest"

    assert (await client.get(url, headers=provider_a.headers)).status_code == 404

    response = await client.post(url, headers=provider_a.headers)
    assert response.status_code == 200
    assert response.json()["suggested_cpt"] == "90837"

    stored = (await client.get(url, headers=provider_a.headers)).json()
    assert stored["suggested_diagnoses"][0]["code"] == "F32.1"

    note_after = (await client.get(f"/api/soap-notes/{note['id']}", headers=provider_a.headers)).json()
    assert note_after["ai_suggestion"]["reasoning"] == suggestion.reasoning


async def test_ai_suggest_failure_leaves_note_unchanged(client, provider_a):
    fake = FakeAssistant(error=CodingAssistantError("model returned garbage"))
    app.dependency_overrides[get_coding_assistant] = lambda: fake

    note = await create_note(client, provider_a)

    response = await client.post(f"/api/soap-notes/{note['id']}/ai-suggest", headers=provider_a.headers)
    assert response.status_code == 500
    assert response.json()["message"] == "Failed to generate coding suggestions"

    stored = await SoapNote.get(PydanticObjectId(note["id"]))
    assert stored.ai_suggestion is None
    assert stored.updated_at.replace(microsecond=0) == datetime.fromisoformat(note["updated_at"]).replace(microsecond=0)


async def test_ai_suggest_checks_ownership_before_calling_model(client, provider_a, provider_b):
    fake = FakeAssistant(error=CodingAssistantError("should not be called"))
    app.dependency_overrides[get_coding_assistant] = lambda: fake

    note = await create_note(client, provider_a)
    response = await client.post(f"/api/soap-notes/{note['id']}/ai-suggest", headers=provider_b.headers)

    assert response.status_code == 403
    assert fake.calls == 0
