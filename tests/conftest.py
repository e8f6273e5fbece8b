# tests/conftest.py

"""
Pytest Fixtures - Shared scoring configs, question banks and responses

QUESTION ID REFERENCE:
- DISC bank:  d1 .. d4 (one per DISC dimension)
- MI bank:    mi-ling-1, mi-ling-2, mi-log-1, mi-spa-1
- VARK bank:  v1 .. v4 (one per modality)
"""

import pytest

from assessment_scoring.config import Settings
from assessment_scoring.core.logging import configure_logging
from assessment_scoring.models.assessment import Question, ResponseRecord, ScoringConfig
from assessment_scoring.models.enumerations import Normalization, ScoringMethod
from assessment_scoring.scoring.scoring_engine import ScoringEngine


# =============================================================================
# LOGGING
# =============================================================================

@pytest.fixture(scope="session", autouse=True)
def quiet_logging():
    """Keep scoring debug events out of test output."""
    configure_logging(Settings(LOG_LEVEL="WARNING", LOG_FORMAT="console"))


# =============================================================================
# ENGINE
# =============================================================================

@pytest.fixture
def engine():
    return ScoringEngine()


# =============================================================================
# DISC (forced choice)
# =============================================================================

@pytest.fixture
def disc_categories():
    return ["dominance", "influence", "steadiness", "conscientiousness"]


@pytest.fixture
def disc_config(disc_categories):
    return ScoringConfig(
        categories=disc_categories,
        scoring_method=ScoringMethod.FORCED_CHOICE,
        normalization=Normalization.PERCENTAGE,
    )


@pytest.fixture
def disc_questions(disc_categories):
    return [
        Question(id=f"d{i}", category=category, weight=1.0)
        for i, category in enumerate(disc_categories, start=1)
    ]


@pytest.fixture
def disc_responses(disc_questions):
    return [ResponseRecord(question_id=q.id, value="most") for q in disc_questions]


# =============================================================================
# MULTIPLE INTELLIGENCE (weighted sum, 1-5 ratings)
# =============================================================================

@pytest.fixture
def mi_config():
    return ScoringConfig(
        categories=["linguistic", "logical-mathematical", "spatial"],
        scoring_method=ScoringMethod.WEIGHTED_SUM,
        normalization=Normalization.PERCENTAGE,
    )


@pytest.fixture
def mi_questions():
    return [
        Question(id="mi-ling-1", category="linguistic", weight=1.0),
        Question(id="mi-ling-2", category="linguistic", weight=1.0),
        Question(id="mi-log-1", category="logical-mathematical", weight=1.0),
        Question(id="mi-spa-1", category="spatial", weight=1.0),
    ]


# =============================================================================
# VARK (multiselect count)
# =============================================================================

@pytest.fixture
def vark_config():
    return ScoringConfig(
        categories=["visual", "auditory", "reading-writing", "kinesthetic"],
        scoring_method=ScoringMethod.MULTISELECT_COUNT,
        normalization=Normalization.RAW,
    )


@pytest.fixture
def vark_questions():
    return [
        Question(id="v1", category="visual"),
        Question(id="v2", category="auditory"),
        Question(id="v3", category="reading-writing"),
        Question(id="v4", category="kinesthetic"),
    ]
