"""OpenAI-backed diagnosis and billing code suggestions for SOAP notes."""

import json
import re
from typing import Optional

from openai import AsyncOpenAI, OpenAIError

from soapdesk.config import settings
from soapdesk.core.logging import logger
from soapdesk.data.instruments import COMMON_DIAGNOSES, CPT_CODES
from soapdesk.features.notes.models import CodingSuggestion, SoapNote, SuggestedDiagnosis
from soapdesk.services.scoring import gad7_severity, is_risk_flagged, phq9_severity


MAX_SUGGESTED_DIAGNOSES = 3

SYSTEM_PROMPT = (
    "You are a clinical coding assistant for a licensed mental health therapist. "
    "You suggest ICD-10 diagnosis codes and a psychotherapy CPT code from session "
    "documentation. You never invent clinical facts that are not in the note."
)


class CodingAssistantError(Exception):
    """The model call failed or returned something unusable."""


class CodingAssistant:
    """Service for generating coding suggestions with a chat completion model."""

    def __init__(self, client: Optional[AsyncOpenAI] = None, model: Optional[str] = None):
        self._client = client
        self.model = model or settings.OPENAI_MODEL

    @property
    def client(self) -> AsyncOpenAI:
        if self._client is None:
            if not settings.OPENAI_API_KEY:
                raise CodingAssistantError("OPENAI_API_KEY is not configured")
            self._client = AsyncOpenAI(api_key=settings.OPENAI_API_KEY)
        return self._client

    @staticmethod
    def extract_json_from_text(text: str) -> Optional[dict]:
        """
        Extract a JSON object from text that may contain markdown or other content.
        Uses multiple strategies to find valid JSON.
        """
        if not text:
            return None

        # Strategy 1: Try parsing the text directly
        try:
            parsed = json.loads(text.strip())
            return parsed if isinstance(parsed, dict) else None
        except json.JSONDecodeError:
            pass

        # Strategy 2: Remove markdown code blocks
        patterns = [
            r'```json\s*([\s\S]*?)\s*```',  # ```json ... ```
            r'```\s*([\s\S]*?)\s*```',       # ``` ... ```
        ]

        for pattern in patterns:
            match = re.search(pattern, text, re.IGNORECASE)
            if match:
                try:
                    parsed = json.loads(match.group(1).strip())
                    return parsed if isinstance(parsed, dict) else None
                except json.JSONDecodeError:
                    continue

        # Strategy 3: Find the outermost { ... }
        start_idx = text.find('{')
        if start_idx != -1:
            depth = 0
            end_idx = start_idx
            for i, char in enumerate(text[start_idx:], start_idx):
                if char == '{':
                    depth += 1
                elif char == '}':
                    depth -= 1
                    if depth == 0:
                        end_idx = i
                        break

            if end_idx > start_idx:
                try:
                    parsed = json.loads(text[start_idx:end_idx + 1])
                    return parsed if isinstance(parsed, dict) else None
                except json.JSONDecodeError:
                    pass

        return None

    @staticmethod
    def build_prompt(note: SoapNote) -> str:
        """Render the note into the user prompt sent to the model."""
        cpt_list = "\n".join(f"- {c['code']}: {c['description']}" for c in CPT_CODES)
        diagnosis_list = "\n".join(f"- {d['code']}: {d['name']}" for d in COMMON_DIAGNOSES)
        current = ", ".join(f"{d.code} ({d.name})" for d in note.diagnoses) or "none"

        return f"""Review this therapy session note and suggest coding.

SESSION
- CPT code currently selected: {note.cpt_code}
- Telehealth: {"yes" if note.is_telehealth else "no"}
- Diagnoses currently on the note: {current}

SUBJECTIVE
{note.subjective or "(empty)"}

OBJECTIVE
{note.objective or "(empty)"}

ASSESSMENT
{note.assessment or "(empty)"}

PLAN
{note.plan or "(empty)"}

MEASURES
- PHQ-9: {note.phq9_score} ({phq9_severity(note.phq9_score)})
- GAD-7: {note.gad7_score} ({gad7_severity(note.gad7_score)})
- Suicidal ideation: {note.risk_suicidal}
- Homicidal ideation: {note.risk_homicidal}
- Risk flagged: {"yes" if is_risk_flagged(note.risk_suicidal, note.risk_homicidal) else "no"}

CPT CODES
{cpt_list}

COMMON DIAGNOSES (other valid ICD-10 codes are allowed)
{diagnosis_list}

Return a JSON object:
{{
    "suggested_diagnoses": [
        {{"code": "ICD-10 code", "name": "Diagnosis name", "confidence": number between 0 and 1}}
    ],
    "suggested_cpt": "CPT code",
    "reasoning": "One short paragraph explaining the choices"
}}

Important:
- At most {MAX_SUGGESTED_DIAGNOSES} diagnoses, most likely first
- Base every suggestion on the documentation above
- Return ONLY valid JSON, no markdown code blocks or explanation"""

    @classmethod
    def parse_suggestion(cls, text: Optional[str]) -> CodingSuggestion:
        """
        Turn raw model output into a suggestion.

        Diagnoses without a code are dropped, confidences are clamped to
        [0, 1], and the list is ordered by descending confidence and cut to
        three entries.

        Raises:
            CodingAssistantError: The output is empty or not the expected shape.
        """
        data = cls.extract_json_from_text(text or "")
        if data is None:
            raise CodingAssistantError("Model response did not contain a JSON object")

        raw_diagnoses = data.get("suggested_diagnoses", data.get("suggestedDiagnoses", []))
        raw_cpt = data.get("suggested_cpt", data.get("suggestedCpt"))
        reasoning = data.get("reasoning") or ""

        if not isinstance(raw_diagnoses, list):
            raise CodingAssistantError("suggested_diagnoses is not a list")
        if not isinstance(raw_cpt, str) or not raw_cpt.strip():
            raise CodingAssistantError("suggested_cpt is missing")

        diagnoses = []
        for item in raw_diagnoses:
            if not isinstance(item, dict) or not item.get("code"):
                continue
            try:
                confidence = float(item.get("confidence", 0))
            except (TypeError, ValueError):
                confidence = 0.0
            diagnoses.append(SuggestedDiagnosis(
                code=str(item["code"]).strip(),
                name=str(item.get("name") or "").strip(),
                confidence=min(max(confidence, 0.0), 1.0),
            ))

        diagnoses.sort(key=lambda d: d.confidence, reverse=True)

        return CodingSuggestion(
            suggested_diagnoses=diagnoses[:MAX_SUGGESTED_DIAGNOSES],
            suggested_cpt=raw_cpt.strip(),
            reasoning=str(reasoning),
        )

    async def suggest(self, note: SoapNote) -> CodingSuggestion:
        """
        Ask the model for coding suggestions for ``note``.

        Raises:
            CodingAssistantError: On any transport, configuration or parsing failure.
        """
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": self.build_prompt(note)},
                ],
                response_format={"type": "json_object"},
                max_tokens=800,
                temperature=0.1,  # Lower temperature for more consistent JSON output
            )
        except OpenAIError as e:
            raise CodingAssistantError(f"OpenAI request failed: {e}") from e

        if not response.choices:
            raise CodingAssistantError("Model returned no choices")

        result_text = response.choices[0].message.content
        logger.debug(f"Coding assistant raw response: {(result_text or '')[:500]}")

        suggestion = self.parse_suggestion(result_text)
        logger.info(
            f"Generated {len(suggestion.suggested_diagnoses)} diagnosis suggestions for note {note.id}"
        )
        return suggestion


_assistant: Optional[CodingAssistant] = None


def get_coding_assistant() -> CodingAssistant:
    """FastAPI dependency returning the shared assistant."""
    global _assistant
    if _assistant is None:
        _assistant = CodingAssistant()
    return _assistant
