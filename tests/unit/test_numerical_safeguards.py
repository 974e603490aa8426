"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Конверсию в single precision
2. NaN/Inf проверки входов и результатов
3. Эскалацию отсутствующего результата в исключение
"""

import math

import numpy as np
import pytest

from src.core.math.numerical_safeguards import (
    TRUTH_DTYPE,
    InvalidTruthError,
    all_valid_truths,
    checked_truth,
    is_valid_truth,
    require_truth,
    to_truth,
)

# =============================================================================
# ТЕСТЫ КОНВЕРСИИ
# =============================================================================


class TestToTruth:
    """Тесты для to_truth"""

    def test_converts_to_float32(self) -> None:
        """Результат имеет тип float32"""
        assert isinstance(to_truth(0.5), TRUTH_DTYPE)
        assert to_truth(0.5) == np.float32(0.5)
        assert float(to_truth(0.5)) == 0.5

    def test_rounds_to_single_precision(self) -> None:
        """0.3 округляется до ближайшего float32"""
        assert float(to_truth(0.3)) != 0.3
        assert float(to_truth(0.3)) == pytest.approx(0.3, rel=1e-7)

    def test_overflow_becomes_infinite(self) -> None:
        """Значения вне диапазона float32 становятся Inf"""
        assert np.isinf(to_truth(1e39))
        assert np.isinf(to_truth(-1e39))


# =============================================================================
# ТЕСТЫ NaN/Inf ПРОВЕРОК
# =============================================================================


class TestIsValidTruth:
    """Тесты для is_valid_truth и all_valid_truths"""

    def test_finite_values_valid(self) -> None:
        """Конечные значения валидны, включая значения вне [0, 1]"""
        assert is_valid_truth(0.0)
        assert is_valid_truth(1.0)
        assert is_valid_truth(-5.0)
        assert is_valid_truth(3e38)

    def test_nan_invalid(self) -> None:
        """NaN невалиден"""
        assert not is_valid_truth(float("nan"))

    def test_inf_invalid(self) -> None:
        """±Inf невалиден"""
        assert not is_valid_truth(float("inf"))
        assert not is_valid_truth(float("-inf"))

    def test_single_precision_overflow_invalid(self) -> None:
        """Конечный float64, переполняющий float32, невалиден"""
        assert math.isfinite(1e39)
        assert not is_valid_truth(1e39)

    def test_all_valid_truths(self) -> None:
        """all_valid_truths требует конечности всех значений"""
        assert all_valid_truths(0.1, 0.2, 0.3)
        assert not all_valid_truths(0.1, float("nan"))
        assert not all_valid_truths(float("inf"), 0.2)


class TestCheckedTruth:
    """Тесты для checked_truth"""

    def test_finite_result_returned_as_float(self) -> None:
        """Конечный результат возвращается как Python float"""
        result = checked_truth(np.float32(0.25))
        assert result == 0.25
        assert type(result) is float

    def test_nan_result_is_none(self) -> None:
        """NaN результат → None"""
        assert checked_truth(np.float32("nan")) is None

    def test_inf_result_is_none(self) -> None:
        """Inf результат → None"""
        assert checked_truth(np.float32("inf")) is None
        assert checked_truth(np.float32("-inf")) is None


# =============================================================================
# ТЕСТЫ ЭСКАЛАЦИИ
# =============================================================================


class TestRequireTruth:
    """Тесты для require_truth"""

    def test_present_value_passes(self) -> None:
        """Присутствующее конечное значение возвращается без изменений"""
        assert require_truth(0.25, "zadeh.min") == 0.25
        assert require_truth(0.0, "zadeh.min") == 0.0

    def test_absent_value_raises(self) -> None:
        """None вызывает InvalidTruthError"""
        with pytest.raises(InvalidTruthError, match="zadeh.min produced no valid truth value"):
            require_truth(None, "zadeh.min")

    def test_non_finite_value_raises(self) -> None:
        """NaN/Inf вызывает InvalidTruthError"""
        with pytest.raises(InvalidTruthError, match="must be a finite truth value"):
            require_truth(float("inf"), "weight")

        with pytest.raises(InvalidTruthError, match="must be a finite truth value"):
            require_truth(float("nan"), "weight")

    def test_error_is_value_error(self) -> None:
        """InvalidTruthError — подкласс ValueError"""
        with pytest.raises(ValueError):
            require_truth(None, "einstein.sum")
