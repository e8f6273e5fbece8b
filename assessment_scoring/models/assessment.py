"""
Assessment Scoring Models
assessment_scoring/models/assessment.py

Pydantic models for the scoring engine's inputs (responses, question bank,
scoring configuration) and its outputs.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from assessment_scoring.models.enumerations import Normalization, ScoringMethod


# Rating number, choice tag, multiselect tags or yes/no. Anything else
# (e.g. a JSON object) is kept as-is and scored as a non-numeric answer.
# bool is listed first so True/False are never read as 1/0.
ResponseValue = Union[bool, int, float, str, List[Any], None, Any]

# Ids are matched by exact value and type: 1 and "1" are different questions.
QuestionId = Union[str, int]

Score = Union[int, float]


class ResponseRecord(BaseModel):
    """
    One user's answer to one question in a completed session.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    question_id: Optional[QuestionId] = Field(
        default=None,
        validation_alias=AliasChoices("question_id", "questionId"),
        description="Reference to Question.id; a missing id matches no question",
    )

    value: ResponseValue = Field(
        default=None,
        validation_alias=AliasChoices("value", "response_value", "responseValue"),
        description="Answer payload: rating, choice, multiselect list or boolean",
    )


class Question(BaseModel):
    """
    The scoring-relevant subset of a question bank entry.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: QuestionId = Field(..., description="Question identifier")

    category: Optional[str] = Field(
        default=None,
        description="Scored dimension this question contributes to",
    )

    weight: Optional[float] = Field(
        default=1.0,
        description="Contribution multiplier; missing or zero counts as 1.0",
    )


class ScoringConfig(BaseModel):
    """
    How one assessment type aggregates and normalizes its questions.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    categories: List[str] = Field(
        default_factory=list,
        description="Ordered category keys scored by this assessment",
    )

    scoring_method: ScoringMethod = Field(
        default=ScoringMethod.WEIGHTED_SUM,
        validation_alias=AliasChoices("scoring_method", "scoringMethod"),
    )

    normalization: Normalization = Field(default=Normalization.PERCENTAGE)

    @field_validator("categories")
    @classmethod
    def dedupe_categories(cls, v: List[str]) -> List[str]:
        """Keep the first occurrence of each category, preserving order."""
        return list(dict.fromkeys(v))


class ScoreResult(BaseModel):
    """
    Output of ScoringEngine.calculate_scores().
    """

    raw_scores: Dict[str, Score] = Field(default_factory=dict)
    processed_scores: Dict[str, Score] = Field(default_factory=dict)
    recommendations: List[str] = Field(default_factory=list)

    def to_record(self) -> Dict[str, Any]:
        """Shape stored in the assessment results table."""
        return {
            "raw_scores": dict(self.raw_scores),
            "processed_scores": dict(self.processed_scores),
            "recommendations": list(self.recommendations),
        }


class CompletionSummary(BaseModel):
    """
    How much of the question bank a session answered.
    """

    question_count: int = Field(..., ge=0)
    response_count: int = Field(..., ge=0)
    answered_count: int = Field(..., ge=0)
    completion_rate: float = Field(..., ge=0, le=100)
