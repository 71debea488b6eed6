"""
Тесты для модуля Scalars

Проверяет:
1. Нулевой элемент скалярного типа (zero_of)
2. Собственный предикат нуля (is_zero)
3. Проверку отрицательности (is_negative)
4. Конвертеры фиксированных float-инстанциаций
5. Параметры контракта (границы i128, символы форматирования)
"""

from decimal import Decimal
from fractions import Fraction
from typing import TypeVar

import numpy as np
import pytest

from src.core.math.scalars import (
    IMAGINARY_UNIT_SUFFIX,
    INT128_MAX,
    INT128_MIN,
    POSITIVE_IMAGINARY_SEPARATOR,
    Float32,
    Float64,
    Int128,
    as_float32,
    as_float64,
    is_negative,
    is_zero,
    zero_of,
)


class _Tolerant:
    """Скаляр с собственным предикатом нуля (толерантность 1e-9)"""

    def __init__(self, value: float) -> None:
        self.value = value

    def is_zero(self) -> bool:
        return abs(self.value) < 1e-9


class _WithZeroFactory:
    """Тип, знающий свой ноль"""

    def __init__(self, value: int) -> None:
        self.value = value

    @classmethod
    def zero(cls) -> "_WithZeroFactory":
        return cls(0)


# =============================================================================
# ТЕСТЫ ZERO_OF
# =============================================================================


class TestZeroOf:
    """Тесты для zero_of"""

    def test_builtin_types(self) -> None:
        """Ноль встроенных типов в их собственном представлении"""
        assert zero_of(float) == 0.0
        assert isinstance(zero_of(float), float)
        assert zero_of(int) == 0
        assert isinstance(zero_of(int), int)

    def test_numpy_types(self) -> None:
        """Ноль numpy-скаляров сохраняет разрядность"""
        assert isinstance(zero_of(np.float32), np.float32)
        assert isinstance(zero_of(np.float64), np.float64)

    def test_annotated_aliases_unwrapped(self) -> None:
        """Annotated-алиасы разворачиваются до базового типа"""
        assert isinstance(zero_of(Float32), np.float32)
        assert isinstance(zero_of(Float64), np.float64)
        assert zero_of(Int128) == 0
        assert isinstance(zero_of(Int128), int)

    def test_unknown_type_falls_back_to_int_zero(self) -> None:
        """Без известного типа используется целый 0"""
        assert zero_of() == 0
        assert zero_of(None) == 0
        assert zero_of(TypeVar("X")) == 0

    def test_exact_numeric_types(self) -> None:
        """Decimal и Fraction дают собственный ноль"""
        assert zero_of(Decimal) == Decimal(0)
        assert isinstance(zero_of(Decimal), Decimal)
        assert zero_of(Fraction) == Fraction(0)

    def test_zero_factory_preferred(self) -> None:
        """Если у типа есть zero(), используется он"""
        zero = zero_of(_WithZeroFactory)
        assert isinstance(zero, _WithZeroFactory)
        assert zero.value == 0


# =============================================================================
# ТЕСТЫ IS_ZERO
# =============================================================================


class TestIsZero:
    """Тесты для is_zero"""

    @pytest.mark.parametrize(
        "value",
        [0, 0.0, -0.0, np.float32(0.0), np.float64(-0.0), Decimal("0.000"), Fraction(0, 5)],
    )
    def test_zero_values(self, value: object) -> None:
        """Нули любых скаляров распознаются"""
        assert is_zero(value) is True

    @pytest.mark.parametrize(
        "value",
        [1, -1, 1e-300, -1e-300, np.float32(1e-30), Decimal("0.001"), float("inf")],
    )
    def test_non_zero_values(self, value: object) -> None:
        """Сколь угодно малые ненулевые значения — не ноль"""
        assert is_zero(value) is False

    def test_nan_is_not_zero(self) -> None:
        """NaN не является нулём"""
        assert is_zero(float("nan")) is False
        assert is_zero(np.float32("nan")) is False

    def test_native_predicate_used(self) -> None:
        """Собственный предикат скаляра имеет приоритет"""
        assert is_zero(_Tolerant(1e-12)) is True
        assert is_zero(_Tolerant(1e-3)) is False


# =============================================================================
# ТЕСТЫ IS_NEGATIVE
# =============================================================================


class TestIsNegative:
    """Тесты для is_negative"""

    def test_negative_values(self) -> None:
        """Строго отрицательные значения"""
        assert is_negative(-2) is True
        assert is_negative(-0.5) is True
        assert is_negative(np.float32(-1.0)) is True
        assert is_negative(Decimal("-0.1")) is True

    def test_non_negative_values(self) -> None:
        """Ноль и положительные значения"""
        assert is_negative(0) is False
        assert is_negative(-0.0) is False
        assert is_negative(3) is False
        assert is_negative(np.float64(2.5)) is False

    def test_nan_is_not_negative(self) -> None:
        """NaN не отрицателен"""
        assert is_negative(float("nan")) is False


# =============================================================================
# ТЕСТЫ КОНВЕРТЕРОВ
# =============================================================================


class TestFloatConverters:
    """Тесты для as_float32 / as_float64"""

    def test_float32_conversion(self) -> None:
        """Числа приводятся к numpy.float32"""
        result = as_float32(3)
        assert isinstance(result, np.float32)
        assert result == 3.0

    def test_float64_conversion(self) -> None:
        """Числа приводятся к numpy.float64"""
        result = as_float64(np.float32(1.5))
        assert isinstance(result, np.float64)
        assert result == 1.5

    def test_special_values_accepted(self) -> None:
        """NaN и Inf допустимы"""
        assert np.isinf(as_float32(float("inf")))
        assert np.isnan(as_float64(float("nan")))

    @pytest.mark.parametrize("converter", [as_float32, as_float64])
    def test_text_rejected(self, converter) -> None:
        """Строки не парсятся"""
        with pytest.raises(ValueError, match="cannot be parsed from text"):
            converter("3.0")

        with pytest.raises(ValueError, match="cannot be parsed from text"):
            converter(b"3.0")


# =============================================================================
# ТЕСТЫ ПАРАМЕТРОВ
# =============================================================================


class TestParameters:
    """Проверка параметров контракта"""

    def test_int128_bounds(self) -> None:
        """Границы знакового 128-битного целого"""
        assert INT128_MIN == -170141183460469231731687303715884105728
        assert INT128_MAX == 170141183460469231731687303715884105727
        assert INT128_MAX == -INT128_MIN - 1

    def test_formatting_symbols(self) -> None:
        """Символы форматирования"""
        assert IMAGINARY_UNIT_SUFFIX == "i"
        assert POSITIVE_IMAGINARY_SEPARATOR == "+"
