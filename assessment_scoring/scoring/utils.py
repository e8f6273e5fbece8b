"""
Scoring Utilities
assessment_scoring/scoring/utils.py

Half-up rounding for reported scores (Python's round() is banker's
rounding, which would report 2.5 as 2), and model coercion for caller input.
"""

import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from assessment_scoring.core.exceptions import ScoringException

Number = Union[int, float]
ModelT = TypeVar("ModelT", bound=BaseModel)


def to_decimal(value: float) -> Decimal:
    """Convert float to Decimal via its shortest repr."""
    return Decimal(str(value))


def round_half_up(value: float) -> Number:
    """
    Round to the nearest integer, halves away from zero.

    NaN and infinities are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    return int(to_decimal(value).to_integral_value(rounding=ROUND_HALF_UP))


def round_to_tenth(value: float) -> float:
    """round(value * 10) / 10 with half-up rounding."""
    return round_half_up(value * 10) / 10


def safe_ratio(numerator: Number, denominator: Number) -> float:
    """numerator / denominator, or 0.0 when the denominator is zero."""
    if denominator == 0:
        return 0.0
    return numerator / denominator


def coerce_model(model: Type[ModelT], data: Any, error_cls: Type[ScoringException]) -> ModelT:
    """Accept a model instance or a plain mapping, raising error_cls on bad data."""
    if isinstance(data, model):
        return data
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise error_cls(f"Invalid {model.__name__}: {e}", errors=e.errors()) from e
