"""
Numerical Safeguards — Truth Scalar Primitives

Модуль задаёт скалярный тип Truth и примитивы проверки конечности,
общие для всех семейств нечётких операторов:
- Конверсия входов в single precision (float32)
- NaN/Inf проверки входов и результатов
- Эскалация отсутствующего результата в исключение (по выбору вызывающего)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все вычисления операторов выполняются в float32
2. NaN/Inf никогда не возвращаются как значение (вместо них None)
3. Диапазон [0, 1] НЕ проверяется и НЕ клампится
4. Все операции детерминированы и не имеют состояния
"""

from typing import Final, Optional

import numpy as np

# =============================================================================
# TRUTH TYPE
# =============================================================================

# Степень принадлежности нечёткому множеству (условно в [0, 1])
Truth = float

# Разрядность вычислений: single precision
TRUTH_DTYPE: Final = np.float32

# Константы float32 для формул операторов (без повышения точности до float64)
TRUTH_ONE: Final[np.float32] = np.float32(1.0)
TRUTH_TWO: Final[np.float32] = np.float32(2.0)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidTruthError(ValueError):
    """
    Отсутствующий или неконечный результат оператора.

    Операторы никогда не бросают это исключение сами: они возвращают None.
    Используется только через require_truth, когда вызывающий код
    предпочитает исключение явной проверке на None.
    """

    pass


# =============================================================================
# КОНВЕРСИЯ И ПРОВЕРКИ
# =============================================================================


def to_truth(value: float) -> np.float32:
    """
    Конверсия значения в single precision.

    Значения вне диапазона float32 (например 1e39) становятся ±inf
    и далее отбрасываются как неконечные.

    Examples:
        >>> float(to_truth(0.5))
        0.5
    """
    with np.errstate(over="ignore"):
        return TRUTH_DTYPE(value)


def is_valid_truth(value: float) -> bool:
    """
    Проверка, что значение конечно в single precision (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное, False если NaN или Inf
    """
    return bool(np.isfinite(to_truth(value)))


def all_valid_truths(*values: float) -> bool:
    """True если все значения конечны в single precision."""
    return all(is_valid_truth(v) for v in values)


def checked_truth(value: np.float32) -> Optional[Truth]:
    """
    Финальная проверка результата оператора.

    Args:
        value: Вычисленный результат (float32)

    Returns:
        float(value) если результат конечен, иначе None
    """
    if not np.isfinite(value):
        return None
    return float(value)


def require_truth(value: Optional[Truth], name: str) -> Truth:
    """
    Эскалация отсутствующего результата в исключение.

    Args:
        value: Результат оператора (может быть None)
        name: Имя операции или параметра (для сообщения об ошибке)

    Returns:
        value, если он присутствует и конечен

    Raises:
        InvalidTruthError: Если value is None или NaN/Inf

    Examples:
        >>> require_truth(0.25, "zadeh.min")
        0.25
        >>> require_truth(None, "zadeh.min")  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        InvalidTruthError: zadeh.min produced no valid truth value
    """
    if value is None:
        raise InvalidTruthError(f"{name} produced no valid truth value")

    if not is_valid_truth(value):
        raise InvalidTruthError(f"{name} must be a finite truth value, got {value}")

    return value
