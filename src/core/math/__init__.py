"""
Core math modules

Математические примитивы и численные защиты для геометрических алгоритмов.
"""

from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    EPS_INTERSECTION,
    EPS_LENGTH,
    # NaN/Inf checks
    is_valid_float,
    # Epsilon comparisons
    is_close,
    is_zero,
    within_tolerance,
    # Safe operations
    safe_sqrt,
    # Validation
    validate_finite,
    validate_non_negative,
)

__all__ = [
    # Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "EPS_INTERSECTION",
    "EPS_LENGTH",
    # NaN/Inf checks
    "is_valid_float",
    # Epsilon comparisons
    "is_close",
    "is_zero",
    "within_tolerance",
    # Safe operations
    "safe_sqrt",
    # Validation
    "validate_finite",
    "validate_non_negative",
]
