"""
Core Package - Assessment Scoring
assessment_scoring/core/__init__.py

Core infrastructure: exceptions, logging.
"""

from assessment_scoring.core.exceptions import (
    InvalidResponseException,
    InvalidScoringConfigException,
    ScoringException,
    UnknownAssessmentTypeException,
)
from assessment_scoring.core.logging import configure_logging

__all__ = [
    # Exceptions
    "InvalidResponseException",
    "InvalidScoringConfigException",
    "ScoringException",
    "UnknownAssessmentTypeException",
    # Logging
    "configure_logging",
]
