"""
Werner — взвешенный оператор "fuzzy and"

Смесь строгого минимума (zadeh.min) и среднего арифметического,
баланс задаёт weight:

    weighted_min(w, a, b) = ((w * min(a, b)) + ((1 - w) * (a + b))) / 2

weight условно лежит в [0, 1], но не проверяется и не клампится:
вне диапазона результат может выйти за пределы [0, 1].
"""

import logging
from typing import Optional

import numpy as np

from src.core.math.numerical_safeguards import (
    TRUTH_ONE,
    TRUTH_TWO,
    Truth,
    checked_truth,
    to_truth,
)
from src.operators import zadeh

logger = logging.getLogger(__name__)


def weighted_min(weight: float, a: Truth, b: Truth) -> Optional[Truth]:
    """
    Оператор Werner "fuzzy and" (усредняющий).

    Args:
        weight: Вес строгого минимума (условно в [0, 1], не проверяется)
        a: Принадлежность классу A
        b: Принадлежность классу B

    Returns:
        Взвешенное значение или None, если zadeh.min(a, b) отсутствует
        либо результат NaN/Inf

    Examples:
        >>> round(weighted_min(0.5, 0.3, 0.7), 6)
        0.325
    """
    x = zadeh.min(a, b)
    if x is None:
        return None

    w32, x32 = to_truth(weight), to_truth(x)
    a32, b32 = to_truth(a), to_truth(b)
    with np.errstate(all="ignore"):
        result = ((w32 * x32) + ((TRUTH_ONE - w32) * (a32 + b32))) / TRUTH_TWO

    truth = checked_truth(result)
    if truth is None:
        logger.debug(
            "werner.weighted_min produced non-finite result for weight=%r a=%r b=%r",
            weight,
            a,
            b,
        )
    return truth


def fuzzy_and(weight: float, a: Truth, b: Truth) -> Optional[Truth]:
    """Семантический синоним weighted_min."""
    return weighted_min(weight, a, b)
