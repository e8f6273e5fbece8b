"""
scoring/scoring_engine.py

Aggregates a session's responses into per-category scores.

Pipeline:
    responses ──► raw aggregation (scoring_method) ──► normalization ──► recommendations

Aggregation per response (weight = question.weight or 1.0):
    weighted_sum       value × weight if value is a number, else 1 × weight
    forced_choice      weight
    multiselect_count  len(value) × weight if value is a list, else weight

Normalization per category (n = bank questions in category, min 1):
    percentage    round(raw / max_possible × 100)
                  max_possible = n × RATING_SCALE_MAX for weighted_sum, else n
    raw           raw
    standardized  round(raw / n × 10) / 10
"""

from collections import Counter
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

import structlog

from assessment_scoring.config import Settings, get_settings
from assessment_scoring.core.exceptions import (
    InvalidResponseException,
    InvalidScoringConfigException,
)
from assessment_scoring.models.assessment import (
    Question,
    QuestionId,
    ResponseRecord,
    ResponseValue,
    ScoreResult,
    ScoringConfig,
)
from assessment_scoring.models.enumerations import Normalization, ScoringMethod, SkipReason
from assessment_scoring.scoring.recommendation_engine import RecommendationEngine
from assessment_scoring.scoring.utils import coerce_model, round_half_up, round_to_tenth

logger = structlog.get_logger(__name__)

# Fixed ceiling of the 1-5 rating scale used by weighted_sum instruments.
# Not derived from observed responses; changing it changes reported percentages.
RATING_SCALE_MAX = 5


def _is_number(value: ResponseValue) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ScoringEngine:
    """Stateless scoring of one completed assessment session."""

    def __init__(
        self,
        recommendation_engine: Optional[RecommendationEngine] = None,
        log_skipped: bool = True,
    ):
        self.recommendation_engine = recommendation_engine or RecommendationEngine()
        self.log_skipped = log_skipped

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        recommendation_engine: Optional[RecommendationEngine] = None,
    ) -> "ScoringEngine":
        """Build an engine whose skip diagnostics follow LOG_SKIPPED_RESPONSES."""
        settings = settings or get_settings()
        return cls(
            recommendation_engine=recommendation_engine,
            log_skipped=settings.LOG_SKIPPED_RESPONSES,
        )

    def calculate_scores(
        self,
        responses: Iterable[Union[ResponseRecord, Mapping[str, Any]]],
        config: Union[ScoringConfig, Mapping[str, Any]],
        questions: Iterable[Union[Question, Mapping[str, Any]]],
    ) -> ScoreResult:
        """
        Score a session.

        Args:
            responses: Answers for the session. Duplicates all contribute.
            config: Categories, scoring method and normalization to apply.
            questions: Full question bank for the assessment type.

        Returns:
            ScoreResult with raw_scores and processed_scores for exactly the
            configured categories, plus recommendation strings.

        Raises:
            InvalidScoringConfigException: config cannot be validated.
            InvalidResponseException: a response or question cannot be validated.

        Examples:
            >>> engine = ScoringEngine()
            >>> result = engine.calculate_scores(
            ...     [{"question_id": "q1", "value": 3}],
            ...     {"categories": ["linguistic"], "scoring_method": "weighted_sum",
            ...      "normalization": "percentage"},
            ...     [{"id": "q1", "category": "linguistic", "weight": 2}],
            ... )
            >>> result.raw_scores
            {'linguistic': 6.0}
        """
        config = coerce_model(ScoringConfig, config, InvalidScoringConfigException)
        records: List[ResponseRecord] = [
            coerce_model(ResponseRecord, r, InvalidResponseException) for r in responses
        ]
        bank: List[Question] = [
            coerce_model(Question, q, InvalidResponseException) for q in questions
        ]

        raw_scores = self._aggregate(records, config, bank)
        processed_scores = self._normalize(raw_scores, config, bank)
        recommendations = self.recommendation_engine.generate(processed_scores, config)

        return ScoreResult(
            raw_scores=raw_scores,
            processed_scores=processed_scores,
            recommendations=recommendations,
        )

    # ------------------------------------------------------------------
    # Raw aggregation
    # ------------------------------------------------------------------

    def _aggregate(
        self,
        records: List[ResponseRecord],
        config: ScoringConfig,
        bank: List[Question],
    ) -> Dict[str, float]:
        raw_scores: Dict[str, float] = {category: 0 for category in config.categories}

        # First entry wins for duplicate ids
        by_id: Dict[QuestionId, Question] = {}
        for question in bank:
            by_id.setdefault(question.id, question)

        skipped = 0

        for record in records:
            question = by_id.get(record.question_id)
            if question is None:
                skipped += 1
                if self.log_skipped:
                    logger.debug(
                        "response_skipped",
                        question_id=record.question_id,
                        reason=SkipReason.UNKNOWN_QUESTION.value,
                    )
                continue

            category = question.category
            if not category or category not in raw_scores:
                skipped += 1
                if self.log_skipped:
                    logger.debug(
                        "response_skipped",
                        question_id=record.question_id,
                        category=category,
                        reason=SkipReason.UNCONFIGURED_CATEGORY.value,
                    )
                continue

            weight = question.weight or 1.0
            raw_scores[category] += self._contribution(record.value, weight, config.scoring_method)

        logger.info(
            "scores_calculated",
            scoring_method=config.scoring_method.value,
            normalization=config.normalization.value,
            responses=len(records),
            scored=len(records) - skipped,
            skipped=skipped,
        )
        return raw_scores

    @staticmethod
    def _contribution(value: ResponseValue, weight: float, method: ScoringMethod) -> float:
        if method == ScoringMethod.WEIGHTED_SUM:
            return (value if _is_number(value) else 1) * weight
        if method == ScoringMethod.MULTISELECT_COUNT:
            if isinstance(value, list):
                return len(value) * weight
            return weight
        # forced_choice counts occurrences
        return weight

    # ------------------------------------------------------------------
    # Normalization
    # ------------------------------------------------------------------

    def _normalize(
        self,
        raw_scores: Dict[str, float],
        config: ScoringConfig,
        bank: List[Question],
    ) -> Dict[str, Union[int, float]]:
        question_counts = Counter(q.category for q in bank)
        processed: Dict[str, Union[int, float]] = {}

        for category, raw_score in raw_scores.items():
            question_count = question_counts.get(category, 0) or 1

            if config.normalization == Normalization.PERCENTAGE:
                if config.scoring_method == ScoringMethod.WEIGHTED_SUM:
                    max_possible = question_count * RATING_SCALE_MAX
                else:
                    max_possible = question_count
                processed[category] = round_half_up(raw_score / max_possible * 100)
            elif config.normalization == Normalization.STANDARDIZED:
                processed[category] = round_to_tenth(raw_score / question_count)
            else:
                processed[category] = raw_score

        return processed


_default_engine = ScoringEngine()


def calculate_scores(
    responses: Iterable[Union[ResponseRecord, Mapping[str, Any]]],
    config: Union[ScoringConfig, Mapping[str, Any]],
    questions: Iterable[Union[Question, Mapping[str, Any]]],
) -> ScoreResult:
    """Module-level shortcut for ScoringEngine().calculate_scores()."""
    return _default_engine.calculate_scores(responses, config, questions)
