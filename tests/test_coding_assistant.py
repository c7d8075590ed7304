"""Test coding suggestion parsing and the OpenAI call wrapper."""

import json
from types import SimpleNamespace

import pytest

from soapdesk.features.notes.models import Diagnosis, SoapNote
from soapdesk.services.coding_assistant import CodingAssistant, CodingAssistantError


def make_note(**overrides) -> SoapNote:
    fields = {
        "user_id": "provider-1",
        "client_name": "Sarah Johnson",
        "subjective": "Worry most days, trouble sleeping.",
        "assessment": "Symptoms consistent with generalized anxiety.",
        "gad7_items": [2, 2, 2, 1, 2, 1, 2],
        "gad7_score": 12,
        "diagnoses": [Diagnosis(code="F41.1", name="Generalized Anxiety Disorder")],
    }
    fields.update(overrides)
    return SoapNote(**fields)


class FakeCompletions:
    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def fake_client(completions: FakeCompletions):
    return SimpleNamespace(chat=SimpleNamespace(completions=completions))


def test_extract_json_strategies():
    """JSON is found bare, inside code fences, or embedded in prose."""
    payload = {"suggested_cpt": "90834"}
    test_cases = [
        json.dumps(payload),
        f"```json\n{json.dumps(payload)}\n```",
        f"```\n{json.dumps(payload)}\n```",
        f"Here you go: {json.dumps(payload)} Hope that helps.",
    ]
    for text in test_cases:
        assert CodingAssistant.extract_json_from_text(text) == payload, text

    assert CodingAssistant.extract_json_from_text("") is None
    assert CodingAssistant.extract_json_from_text("no json here") is None
    assert CodingAssistant.extract_json_from_text("[1, 2, 3]") is None


def test_parse_suggestion_orders_clamps_and_limits():
    text = json.dumps({
        "suggested_diagnoses": [
            {"code": "F41.1", "name": "Generalized Anxiety Disorder", "confidence": 0.7},
            {"code": "F32.1", "name": "Major Depressive Disorder, Moderate", "confidence": 1.4},
            {"code": "F43.23", "name": "Adjustment Disorder", "confidence": "bad"},
            {"code": "F51.01", "name": "Primary Insomnia", "confidence": 0.2},
            {"name": "No code"},
        ],
        "suggested_cpt": " 90837 ",
        "reasoning": "Anxiety symptoms dominate.",
    })

    suggestion = CodingAssistant.parse_suggestion(text)

    assert [d.code for d in suggestion.suggested_diagnoses] == ["F32.1", "F41.1", "F51.01"]
    assert suggestion.suggested_diagnoses[0].confidence == 1.0
    assert suggestion.suggested_cpt == "90837"
    assert suggestion.reasoning == "Anxiety symptoms dominate."


def test_parse_suggestion_accepts_camel_case_keys():
    text = json.dumps({
        "suggestedDiagnoses": [{"code": "F41.1", "name": "GAD", "confidence": 0.9}],
        "suggestedCpt": "90834",
    })
    suggestion = CodingAssistant.parse_suggestion(text)
    assert suggestion.suggested_cpt == "90834"
    assert suggestion.suggested_diagnoses[0].code == "F41.1"


@pytest.mark.parametrize(
    "text",
    [
        None,
        "",
        "I cannot help with that.",
        json.dumps({"suggested_diagnoses": []}),
        json.dumps({"suggested_diagnoses": "F41.1", "suggested_cpt": "90837"}),
        json.dumps({"suggested_diagnoses": [], "suggested_cpt": "  "}),
    ],
)
def test_parse_suggestion_rejects_unusable_output(text):
    with pytest.raises(CodingAssistantError):
        CodingAssistant.parse_suggestion(text)


async def test_build_prompt_includes_note_content(db):
    prompt = CodingAssistant.build_prompt(make_note(risk_suicidal="Passive"))
    assert "Worry most days" in prompt
    assert "GAD-7: 12 (Moderate)" in prompt
    assert "F41.1 (Generalized Anxiety Disorder)" in prompt
    assert "Risk flagged: yes" in prompt


async def test_suggest_sends_json_request_and_parses_reply(db):
    completions = FakeCompletions(content=json.dumps({
        "suggested_diagnoses": [{"code": "F41.1", "name": "GAD", "confidence": 0.85}],
        "suggested_cpt": "90837",
        "reasoning": "Documented worry and sleep disturbance.",
    }))
    assistant = CodingAssistant(client=fake_client(completions), model="test-model")

    suggestion = await assistant.suggest(make_note())

    assert suggestion.suggested_cpt == "90837"
    call = completions.calls[0]
    assert call["model"] == "test-model"
    assert call["response_format"] == {"type": "json_object"}
    assert call["messages"][0]["role"] == "system"


async def test_suggest_wraps_openai_errors(db):
    from openai import OpenAIError

    completions = FakeCompletions(error=OpenAIError("upstream timeout"))
    assistant = CodingAssistant(client=fake_client(completions))

    with pytest.raises(CodingAssistantError):
        await assistant.suggest(make_note())


async def test_suggest_without_api_key_fails(db, monkeypatch):
    from soapdesk.config import settings

    monkeypatch.setattr(settings, "OPENAI_API_KEY", None)
    with pytest.raises(CodingAssistantError):
        await CodingAssistant().suggest(make_note())
