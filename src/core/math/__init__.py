"""
Core math modules

Скалярный тип Truth и примитивы численной проверки для нечётких операторов.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Types and constants
    TRUTH_DTYPE,
    TRUTH_ONE,
    TRUTH_TWO,
    Truth,
    # Exceptions
    InvalidTruthError,
    # Conversion and checks
    all_valid_truths,
    checked_truth,
    is_valid_truth,
    require_truth,
    to_truth,
)

__all__ = [
    # Numerical Safeguards — Types and constants
    "TRUTH_DTYPE",
    "TRUTH_ONE",
    "TRUTH_TWO",
    "Truth",
    # Numerical Safeguards — Exceptions
    "InvalidTruthError",
    # Numerical Safeguards — Conversion and checks
    "all_valid_truths",
    "checked_truth",
    "is_valid_truth",
    "require_truth",
    "to_truth",
]
