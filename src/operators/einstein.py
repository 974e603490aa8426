"""
Einstein — ограниченные алгебраические product / sum

Подходят для независимых принадлежностей: принадлежность одному множеству
никак не влияет на принадлежность другому.

ФОРМУЛЫ (группировка сохраняется точно, вычисление в float32):
    product(a, b) = (a * b) / (1 + ((1 - a) * (1 - b)))
    sum(a, b)     = (a + b) / (1 + (a * b))

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf на входе → None
2. NaN/Inf в результате (переполнение, вырожденный знаменатель) → None
"""

import logging
from typing import Optional

import numpy as np

from src.core.math.numerical_safeguards import (
    TRUTH_ONE,
    Truth,
    all_valid_truths,
    checked_truth,
    to_truth,
)

logger = logging.getLogger(__name__)


# =============================================================================
# PRODUCT
# =============================================================================


def product(a: Truth, b: Truth) -> Optional[Truth]:
    """
    Einstein product двух степеней принадлежности.

    Args:
        a: Принадлежность классу A
        b: Принадлежность классу B

    Returns:
        (a*b) / (1 + (1-a)*(1-b)) или None при NaN/Inf на входе или выходе

    Examples:
        >>> round(product(0.5, 0.5), 6)
        0.2
        >>> product(1e20, 1e20) is None  # inf / inf в float32
        True
    """
    if not all_valid_truths(a, b):
        logger.debug("einstein.product rejected non-finite input a=%r b=%r", a, b)
        return None

    a32, b32 = to_truth(a), to_truth(b)
    with np.errstate(all="ignore"):
        result = (a32 * b32) / (TRUTH_ONE + ((TRUTH_ONE - a32) * (TRUTH_ONE - b32)))

    truth = checked_truth(result)
    if truth is None:
        logger.debug("einstein.product produced non-finite result for a=%r b=%r", a, b)
    return truth


def or_(a: Truth, b: Truth) -> Optional[Truth]:
    """Семантический синоним product."""
    return product(a, b)


# =============================================================================
# SUM
# =============================================================================


def sum(a: Truth, b: Truth) -> Optional[Truth]:
    """
    Einstein sum двух степеней принадлежности.

    sum(0, b) == b для любого конечного b.

    Returns:
        (a+b) / (1 + a*b) или None при NaN/Inf на входе или выходе
    """
    if not all_valid_truths(a, b):
        logger.debug("einstein.sum rejected non-finite input a=%r b=%r", a, b)
        return None

    a32, b32 = to_truth(a), to_truth(b)
    with np.errstate(all="ignore"):
        result = (a32 + b32) / (TRUTH_ONE + (a32 * b32))

    truth = checked_truth(result)
    if truth is None:
        logger.debug("einstein.sum produced non-finite result for a=%r b=%r", a, b)
    return truth


def and_(a: Truth, b: Truth) -> Optional[Truth]:
    """Семантический синоним sum."""
    return sum(a, b)
