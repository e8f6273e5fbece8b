"""
Custom Exceptions - Assessment Scoring
assessment_scoring/core/exceptions.py

Raised only for caller contract violations. Bad domain data (unknown
questions, unconfigured categories) is skipped by the engine, never raised.
"""

from typing import Any, List, Optional


class ScoringException(Exception):
    """Base exception for scoring operations."""

    pass


class InvalidScoringConfigException(ScoringException):
    """Scoring configuration could not be validated."""

    def __init__(self, message: str = "Invalid scoring configuration", errors: Optional[List[Any]] = None):
        self.message = message
        self.errors = errors or []
        super().__init__(message)


class InvalidResponseException(ScoringException):
    """Response record or question bank entry could not be validated."""

    def __init__(self, message: str = "Invalid response data", errors: Optional[List[Any]] = None):
        self.message = message
        self.errors = errors or []
        super().__init__(message)


class UnknownAssessmentTypeException(ScoringException):
    """No built-in configuration exists for the assessment type."""

    def __init__(self, assessment_type: str):
        self.assessment_type = assessment_type
        super().__init__(f"Assessment type '{assessment_type}' has no scoring preset")
