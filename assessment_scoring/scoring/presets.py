"""
scoring/presets.py

Built-in scoring configurations for the seeded assessment types, and
resolution of a stored scoring-algorithm mapping into a ScoringConfig.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

from assessment_scoring.core.exceptions import (
    InvalidScoringConfigException,
    UnknownAssessmentTypeException,
)
from assessment_scoring.models.assessment import ScoringConfig
from assessment_scoring.models.enumerations import AssessmentType, Normalization, ScoringMethod
from assessment_scoring.scoring.utils import coerce_model


@dataclass(frozen=True)
class AssessmentPreset:
    """Display metadata plus scoring config for one assessment type."""
    assessment_type: AssessmentType
    name: str
    scoring_config: ScoringConfig


MULTIPLE_INTELLIGENCE_CATEGORIES = (
    "linguistic",
    "logical-mathematical",
    "spatial",
    "bodily-kinesthetic",
    "musical",
    "interpersonal",
    "intrapersonal",
    "naturalistic",
)
DISC_CATEGORIES = ("dominance", "influence", "steadiness", "conscientiousness")
VARK_CATEGORIES = ("visual", "auditory", "reading-writing", "kinesthetic")

ASSESSMENT_PRESETS: Dict[AssessmentType, AssessmentPreset] = {
    AssessmentType.DOMINANT_INTELLIGENCE: AssessmentPreset(
        assessment_type=AssessmentType.DOMINANT_INTELLIGENCE,
        name="Dominant Intelligence Assessment",
        scoring_config=ScoringConfig(
            categories=list(MULTIPLE_INTELLIGENCE_CATEGORIES),
            scoring_method=ScoringMethod.WEIGHTED_SUM,
            normalization=Normalization.PERCENTAGE,
        ),
    ),
    AssessmentType.PERSONALITY_PATTERN: AssessmentPreset(
        assessment_type=AssessmentType.PERSONALITY_PATTERN,
        name="Personality Pattern Assessment",
        scoring_config=ScoringConfig(
            categories=list(DISC_CATEGORIES),
            scoring_method=ScoringMethod.FORCED_CHOICE,
            normalization=Normalization.PERCENTAGE,
        ),
    ),
    AssessmentType.VARK: AssessmentPreset(
        assessment_type=AssessmentType.VARK,
        name="VARK Learning Style Assessment",
        scoring_config=ScoringConfig(
            categories=list(VARK_CATEGORIES),
            scoring_method=ScoringMethod.MULTISELECT_COUNT,
            normalization=Normalization.PERCENTAGE,
        ),
    ),
}

# Used when a test type has no stored scoring algorithm
DEFAULT_SCORING_CONFIG = ScoringConfig(
    categories=["general"],
    scoring_method=ScoringMethod.WEIGHTED_SUM,
    normalization=Normalization.PERCENTAGE,
)


def get_preset(assessment_type: Union[AssessmentType, str]) -> AssessmentPreset:
    """
    Look up the preset for an assessment type enum or slug.

    Raises:
        UnknownAssessmentTypeException: no preset for the slug.
    """
    try:
        key = AssessmentType(assessment_type)
    except ValueError:
        raise UnknownAssessmentTypeException(str(assessment_type))
    return ASSESSMENT_PRESETS[key]


def resolve_scoring_config(raw: Optional[Mapping[str, Any]]) -> ScoringConfig:
    """
    Build a ScoringConfig from a stored scoring-algorithm mapping.

    Empty or missing mappings fall back to DEFAULT_SCORING_CONFIG.

    Raises:
        InvalidScoringConfigException: mapping present but invalid.
    """
    if not raw:
        return DEFAULT_SCORING_CONFIG
    return coerce_model(ScoringConfig, raw, InvalidScoringConfigException)
