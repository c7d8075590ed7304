"""Questionnaire scoring, severity banding, and risk flagging."""

import math
from collections import Counter
from numbers import Real
from typing import Any, Iterable, List, Optional

from soapdesk.data.instruments import (
    GAD7,
    PHQ9,
    RISK_DENIED,
    get_instrument,
)


def compute_score(items: Any) -> int:
    """
    Sum questionnaire item responses.

    Anything that is not a list scores 0. Entries that are not numbers are
    skipped, so stored data that predates boundary validation still scores.
    """
    if not isinstance(items, (list, tuple)):
        return 0

    total = 0
    for item in items:
        # bool is a subclass of int
        if isinstance(item, bool) or not isinstance(item, Real):
            continue
        total += int(item)
    return total


def severity_band(instrument: str, score: int) -> str:
    """
    Classify an instrument total into its named severity band.

    Bands are inclusive on both ends. Scores outside the instrument's range
    fall into the nearest band.
    """
    bands = get_instrument(instrument)["bands"]

    if score < bands[0][0]:
        return bands[0][2]

    for low, high, label in bands:
        if low <= score <= high:
            return label

    return bands[-1][2]


def phq9_severity(score: int) -> str:
    return severity_band(PHQ9, score)


def gad7_severity(score: int) -> str:
    return severity_band(GAD7, score)


def is_risk_flagged(risk_suicidal: Optional[str], risk_homicidal: Optional[str]) -> bool:
    """A note is flagged when either ideation field is anything but Denied."""
    return risk_suicidal != RISK_DENIED or risk_homicidal != RISK_DENIED


def average_score(values: Iterable[Any]) -> int:
    """Mean of the scores, rounded half up. An empty collection averages 0."""
    scores = [v or 0 for v in values]
    if not scores:
        return 0
    return int(math.floor(sum(scores) / len(scores) + 0.5))


def frequency_breakdown(values: Iterable[str], limit: Optional[int] = None) -> List[dict]:
    """
    Count occurrences, most frequent first.

    Ties keep the order in which values were first seen.
    """
    counts = Counter(values)
    ranked = counts.most_common(limit)
    return [{"code": code, "count": count} for code, count in ranked]


def cpt_breakdown(notes: Iterable[Any]) -> List[dict]:
    """CPT code usage across notes. Notes without a code count as ``Unknown``."""
    return frequency_breakdown(getattr(note, "cpt_code", None) or "Unknown" for note in notes)


def diagnosis_breakdown(notes: Iterable[Any], limit: Optional[int] = 10) -> List[dict]:
    """Diagnosis code frequency over every note's diagnosis list."""

    def codes():
        for note in notes:
            diagnoses = getattr(note, "diagnoses", None)
            if not isinstance(diagnoses, list):
                continue
            for diagnosis in diagnoses:
                code = diagnosis.get("code") if isinstance(diagnosis, dict) else getattr(diagnosis, "code", None)
                if code:
                    yield code

    return frequency_breakdown(codes(), limit)
