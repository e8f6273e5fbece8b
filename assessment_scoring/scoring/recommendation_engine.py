"""
scoring/recommendation_engine.py

Derives advisory text from a processed score profile.

Rules:
    - Top category = highest processed score (ties keep configured order)
    - Known top categories get two canned sentences, others one generic one
    - If top − lowest > 30 points, suggest developing the lowest category
"""

from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple, Union

import structlog

from assessment_scoring.models.assessment import ScoringConfig

logger = structlog.get_logger(__name__)

# Strength statement + practice suggestion per category
CATEGORY_RECOMMENDATIONS: Mapping[str, Tuple[str, str]] = MappingProxyType({
    "linguistic": (
        "Your linguistic intelligence is strong. Consider careers in writing, teaching, or communication.",
        "Practice explaining complex topics to improve this strength further.",
    ),
    "logical-mathematical": (
        "Your logical-mathematical intelligence excels. Engineering, data science, or research might suit you.",
        "Challenge yourself with puzzles and analytical problems.",
    ),
    "spatial": (
        "Your spatial intelligence is well-developed. Architecture, design, or visual arts could be great fits.",
        "Engage with 3D modeling or drawing to enhance this ability.",
    ),
    "dominance": (
        "You show strong leadership qualities. Consider roles with decision-making responsibility.",
        "Focus on developing emotional intelligence to complement your directive style.",
    ),
    "influence": (
        "You excel at persuasion and motivation. Sales, marketing, or coaching could be ideal.",
        "Practice active listening to enhance your influence even more.",
    ),
    "visual": (
        "You learn best through visual aids. Use diagrams, charts, and images in your studies.",
        "Consider mind mapping and visual note-taking techniques.",
    ),
    "auditory": (
        "You excel with auditory learning. Try podcasts, lectures, and discussion groups.",
        "Read aloud and use verbal repetition to enhance retention.",
    ),
})


class RecommendationEngine:
    """Generate recommendation strings from processed category scores."""

    # Absolute points gap; meaningful mostly under percentage normalization
    BALANCE_GAP_THRESHOLD = 30

    def generate(
        self,
        scores: Mapping[str, Union[int, float]],
        config: Optional[ScoringConfig] = None,
    ) -> List[str]:
        """
        Build the recommendation list for a score profile.

        Args:
            scores: Processed score per category, in configured order.
            config: Active scoring config; only its categories are read, to
                    restrict the ranking to configured keys.

        Returns:
            1-3 strings: strength sentences for the top category, then the
            optional balance suggestion. Empty if there are no categories.

        Examples:
            >>> RecommendationEngine().generate({"a": 90, "b": 10})
            ['Your strongest area is a. Focus on developing this further.', 'Consider developing your b skills for a more balanced profile.']
        """
        if config is not None:
            scores = {c: scores[c] for c in config.categories if c in scores}

        if not scores:
            return []

        # sorted() is stable, so equal scores keep their configured order
        ranked = sorted(scores, key=lambda category: scores[category], reverse=True)
        top_category = ranked[0]
        lowest_category = ranked[-1]

        recommendations: List[str] = []

        canned = CATEGORY_RECOMMENDATIONS.get(top_category)
        if canned is not None:
            recommendations.extend(canned)
        else:
            recommendations.append(
                f"Your strongest area is {top_category}. Focus on developing this further."
            )

        gap = scores[top_category] - scores[lowest_category]
        if gap > self.BALANCE_GAP_THRESHOLD:
            recommendations.append(
                f"Consider developing your {lowest_category} skills for a more balanced profile."
            )

        logger.debug(
            "recommendations_generated",
            top_category=top_category,
            lowest_category=lowest_category,
            gap=gap,
            count=len(recommendations),
        )

        return recommendations
