"""
Assessment Scoring Engine

Turns questionnaire responses into category scores and recommendations
for multiple-intelligence, DISC and VARK assessments.
"""

from assessment_scoring.models.assessment import (
    CompletionSummary,
    Question,
    ResponseRecord,
    ScoreResult,
    ScoringConfig,
)
from assessment_scoring.models.enumerations import AssessmentType, Normalization, ScoringMethod
from assessment_scoring.scoring.scoring_engine import ScoringEngine, calculate_scores

__version__ = "1.0.0"

__all__ = [
    "AssessmentType",
    "CompletionSummary",
    "Normalization",
    "Question",
    "ResponseRecord",
    "ScoreResult",
    "ScoringConfig",
    "ScoringEngine",
    "ScoringMethod",
    "calculate_scores",
]
