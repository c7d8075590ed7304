"""
Standardized questionnaire definitions and billing/diagnosis reference codes.

Each instrument has a fixed number of items scored 0-3 and a table of
inclusive severity bands covering its whole score range.
"""

from typing import Dict, List, Tuple


PHQ9 = "phq9"
GAD7 = "gad7"

ITEM_MIN = 0
ITEM_MAX = 3

RISK_LEVELS = ("Denied", "Passive", "Active")
RISK_DENIED = "Denied"

PHQ9_QUESTIONS = [
    "Little interest or pleasure in doing things",
    "Feeling down, depressed, or hopeless",
    "Trouble falling/staying asleep, or sleeping too much",
    "Feeling tired or having little energy",
    "Poor appetite or overeating",
    "Feeling bad about yourself",
    "Trouble concentrating",
    "Moving/speaking slowly or being fidgety",
    "Thoughts of being better off dead or hurting yourself",
]

GAD7_QUESTIONS = [
    "Feeling nervous, anxious, or on edge",
    "Not being able to stop or control worrying",
    "Worrying too much about different things",
    "Trouble relaxing",
    "Being so restless it's hard to sit still",
    "Becoming easily annoyed or irritable",
    "Feeling afraid something awful might happen",
]

# (low, high, label), inclusive on both ends
PHQ9_BANDS: List[Tuple[int, int, str]] = [
    (0, 4, "Minimal"),
    (5, 9, "Mild"),
    (10, 14, "Moderate"),
    (15, 19, "Moderately Severe"),
    (20, 27, "Severe"),
]

GAD7_BANDS: List[Tuple[int, int, str]] = [
    (0, 4, "Minimal"),
    (5, 9, "Mild"),
    (10, 14, "Moderate"),
    (15, 21, "Severe"),
]

INSTRUMENTS: Dict[str, dict] = {
    PHQ9: {
        "name": "PHQ-9",
        "item_count": len(PHQ9_QUESTIONS),
        "max_score": len(PHQ9_QUESTIONS) * ITEM_MAX,
        "questions": PHQ9_QUESTIONS,
        "bands": PHQ9_BANDS,
    },
    GAD7: {
        "name": "GAD-7",
        "item_count": len(GAD7_QUESTIONS),
        "max_score": len(GAD7_QUESTIONS) * ITEM_MAX,
        "questions": GAD7_QUESTIONS,
        "bands": GAD7_BANDS,
    },
}


CPT_CODES = [
    {"code": "90832", "description": "Psychotherapy, 16-37 min"},
    {"code": "90834", "description": "Psychotherapy, 38-52 min"},
    {"code": "90837", "description": "Psychotherapy, 53+ min"},
    {"code": "90847", "description": "Family therapy with patient"},
    {"code": "90846", "description": "Family therapy without patient"},
    {"code": "90853", "description": "Group psychotherapy"},
    {"code": "90791", "description": "Psychiatric diagnostic eval"},
    {"code": "96156", "description": "Health behavior assessment"},
]

DEFAULT_CPT_CODE = "90837"

COMMON_DIAGNOSES = [
    {"code": "F32.0", "name": "Major Depressive Disorder, Single Episode, Mild"},
    {"code": "F32.1", "name": "Major Depressive Disorder, Single Episode, Moderate"},
    {"code": "F32.2", "name": "Major Depressive Disorder, Single Episode, Severe"},
    {"code": "F33.0", "name": "Major Depressive Disorder, Recurrent, Mild"},
    {"code": "F33.1", "name": "Major Depressive Disorder, Recurrent, Moderate"},
    {"code": "F33.2", "name": "Major Depressive Disorder, Recurrent, Severe"},
    {"code": "F41.1", "name": "Generalized Anxiety Disorder"},
    {"code": "F41.0", "name": "Panic Disorder"},
    {"code": "F40.10", "name": "Social Anxiety Disorder"},
    {"code": "F43.10", "name": "PTSD, Unspecified"},
    {"code": "F43.11", "name": "PTSD, Acute"},
    {"code": "F43.12", "name": "PTSD, Chronic"},
    {"code": "F43.21", "name": "Adjustment Disorder with Depressed Mood"},
    {"code": "F43.22", "name": "Adjustment Disorder with Anxiety"},
    {"code": "F43.23", "name": "Adjustment Disorder, Mixed Anxiety/Depression"},
    {"code": "F31.9", "name": "Bipolar Disorder, Unspecified"},
    {"code": "F31.81", "name": "Bipolar II Disorder"},
    {"code": "F42.2", "name": "OCD, Mixed"},
    {"code": "F50.00", "name": "Anorexia Nervosa"},
    {"code": "F50.2", "name": "Bulimia Nervosa"},
    {"code": "F50.81", "name": "Binge Eating Disorder"},
    {"code": "F60.3", "name": "Borderline Personality Disorder"},
    {"code": "F90.0", "name": "ADHD, Inattentive Type"},
    {"code": "F90.1", "name": "ADHD, Hyperactive Type"},
    {"code": "F90.2", "name": "ADHD, Combined Type"},
    {"code": "F10.10", "name": "Alcohol Use Disorder, Mild"},
    {"code": "F10.20", "name": "Alcohol Use Disorder, Moderate"},
    {"code": "F34.1", "name": "Persistent Depressive Disorder"},
    {"code": "F44.9", "name": "Dissociative Disorder"},
    {"code": "Z63.0", "name": "Relationship Distress"},
    {"code": "Z56.9", "name": "Occupational Problem"},
    {"code": "Z63.4", "name": "Death of Family Member"},
]


def get_instrument(instrument: str) -> dict:
    """Look up an instrument definition by key (``phq9`` or ``gad7``)."""
    try:
        return INSTRUMENTS[instrument]
    except KeyError:
        raise ValueError(f"Unknown instrument: {instrument}")
