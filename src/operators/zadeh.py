"""
Zadeh — классические нечёткие операторы min / max

Подходят для исключающей семантики: принадлежность одному множеству
подразумевает непринадлежность другому. Операторы выбирают одно из входных
значений (без смешивания), арифметики нет, поэтому переполнение невозможно.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf на входе → None
2. min: b если a > b, иначе a
3. max: a если a > b, иначе b
"""

import logging
from typing import Optional

from src.core.math.numerical_safeguards import Truth, all_valid_truths, to_truth

logger = logging.getLogger(__name__)


# =============================================================================
# INTERSECTION
# =============================================================================


def min(a: Truth, b: Truth) -> Optional[Truth]:
    """
    Пересечение Zadeh двух степеней принадлежности.

    a и b — принадлежности элемента классам A и B.

    Args:
        a: Принадлежность классу A
        b: Принадлежность классу B

    Returns:
        Меньшее из значений или None, если вход NaN/Inf

    Examples:
        >>> min(0.3, 0.7)
        0.30000001192092896
        >>> min(float("nan"), 0.5) is None
        True
    """
    if not all_valid_truths(a, b):
        logger.debug("zadeh.min rejected non-finite input a=%r b=%r", a, b)
        return None

    a32, b32 = to_truth(a), to_truth(b)

    if a32 > b32:
        return float(b32)
    return float(a32)


def or_(a: Truth, b: Truth) -> Optional[Truth]:
    """Семантический синоним пересечения (min)."""
    return min(a, b)


# =============================================================================
# UNION
# =============================================================================


def max(a: Truth, b: Truth) -> Optional[Truth]:
    """
    Объединение Zadeh двух степеней принадлежности.

    Args:
        a: Принадлежность классу A
        b: Принадлежность классу B

    Returns:
        Большее из значений или None, если вход NaN/Inf
    """
    if not all_valid_truths(a, b):
        logger.debug("zadeh.max rejected non-finite input a=%r b=%r", a, b)
        return None

    a32, b32 = to_truth(a), to_truth(b)

    if a32 > b32:
        return float(a32)
    return float(b32)


def and_(a: Truth, b: Truth) -> Optional[Truth]:
    """Семантический синоним объединения (max)."""
    return max(a, b)
