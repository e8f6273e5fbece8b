"""
scoring/interpretation.py

Score bands for display, and completion statistics for a session.

Bands (processed percentage score):
    >= 80  High
    >= 60  Moderately High
    >= 40  Average
    >= 20  Moderately Low
    else   Low
"""

from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Tuple, Union

from assessment_scoring.core.exceptions import InvalidResponseException
from assessment_scoring.models.assessment import CompletionSummary, Question, ResponseRecord
from assessment_scoring.scoring.utils import coerce_model, round_to_tenth, safe_ratio


@dataclass(frozen=True)
class ScoreBand:
    """Display band for a processed score."""
    label: str
    minimum: int
    color: str


# Highest minimum first
SCORE_BANDS: Tuple[ScoreBand, ...] = (
    ScoreBand(label="High", minimum=80, color="#22c55e"),
    ScoreBand(label="Moderately High", minimum=60, color="#84cc16"),
    ScoreBand(label="Average", minimum=40, color="#eab308"),
    ScoreBand(label="Moderately Low", minimum=20, color="#f97316"),
    ScoreBand(label="Low", minimum=0, color="#ef4444"),
)


def interpret_score(score: float) -> ScoreBand:
    """
    Map a processed score to its display band.

    Scores below zero (or NaN) fall into the lowest band.
    """
    for band in SCORE_BANDS:
        if score >= band.minimum:
            return band
    return SCORE_BANDS[-1]


def summarize_completion(
    responses: Iterable[Union[ResponseRecord, Mapping[str, Any]]],
    questions: Iterable[Union[Question, Mapping[str, Any]]],
) -> CompletionSummary:
    """
    Count how much of the question bank a session answered.

    Args:
        responses: Session answers (duplicates count once toward answered_count).
        questions: Question bank for the assessment type.

    Returns:
        CompletionSummary; completion_rate is a percentage with one decimal.
    """
    records: List[ResponseRecord] = [
        coerce_model(ResponseRecord, r, InvalidResponseException) for r in responses
    ]
    bank_ids = {
        coerce_model(Question, q, InvalidResponseException).id for q in questions
    }
    answered = {r.question_id for r in records if r.question_id in bank_ids}

    return CompletionSummary(
        question_count=len(bank_ids),
        response_count=len(records),
        answered_count=len(answered),
        completion_rate=round_to_tenth(safe_ratio(len(answered), len(bank_ids)) * 100),
    )
