"""
Scalars — Контракт скалярного типа для комплексных значений

Модуль описывает, что требуется от скаляра T, над которым параметризуется
Complex[T]:
- Нулевой элемент (аддитивная единица) самого типа
- Сложение, вычитание, умножение, унарный минус
- Сравнение (равенство и порядок)
- Копирование без алиасинга (неизменяемые числа Python)

Здесь же находятся конкретные скалярные аннотации для фиксированных
инстанциаций: Float32, Float64 (numpy) и Int128 (int в диапазоне i128).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ноль берётся у самого скалярного типа, а не подставляется как 0.0
2. Проверка на ноль использует собственный предикат скаляра
3. Строки никогда не парсятся в числа
"""

from typing import Annotated, Any, Final, Protocol, TypeVar, get_args, get_origin

import numpy as np
from pydantic import BeforeValidator, Field

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Границы знакового 128-битного целого
INT128_MIN: Final[int] = -(2**127)
INT128_MAX: Final[int] = 2**127 - 1

# Суффикс мнимой единицы при форматировании
IMAGINARY_UNIT_SUFFIX: Final[str] = "i"

# Разделитель между действительной и неотрицательной мнимой частью
POSITIVE_IMAGINARY_SEPARATOR: Final[str] = "+"


# =============================================================================
# КОНТРАКТ СКАЛЯРА
# =============================================================================


class Scalar(Protocol):
    """Числовой скаляр: кольцевые операции и порядок"""

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...

    def __neg__(self) -> Any: ...

    def __lt__(self, other: Any) -> bool: ...


# =============================================================================
# НОЛЬ СКАЛЯРА
# =============================================================================


def zero_of(scalar_type: Any = None) -> Scalar:
    """
    Нулевой элемент скалярного типа.

    Порядок разрешения:
    1. Annotated[T, ...] разворачивается до T
    2. Если тип неизвестен (None или TypeVar) — целый 0
    3. Если у типа есть вызываемый zero() — используется он
    4. Иначе scalar_type(0)

    Args:
        scalar_type: Тип скаляра (может быть Annotated-алиасом)

    Returns:
        Ноль в представлении самого типа

    Examples:
        >>> zero_of(float)
        0.0
        >>> zero_of(int)
        0
        >>> zero_of()
        0
    """
    if get_origin(scalar_type) is Annotated:
        scalar_type = get_args(scalar_type)[0]

    if scalar_type is None or isinstance(scalar_type, TypeVar):
        return 0

    factory = getattr(scalar_type, "zero", None)
    if callable(factory):
        return factory()

    return scalar_type(0)


def is_zero(value: Any) -> bool:
    """
    Собственный предикат нуля для скаляра.

    Если скаляр сам знает, что он ноль (метод или атрибут is_zero, например
    у типов с толерантностью), используется его ответ. Иначе — истинность
    числа в Python: для чисел bool(x) ложно ровно при x == 0.

    Args:
        value: Проверяемое значение

    Returns:
        True если значение является нулём своего типа

    Examples:
        >>> is_zero(0.0)
        True
        >>> is_zero(-0.0)
        True
        >>> is_zero(float("nan"))
        False
    """
    predicate = getattr(value, "is_zero", None)
    if predicate is not None:
        result = predicate() if callable(predicate) else predicate
        return bool(result)

    return not value


def is_negative(value: Scalar) -> bool:
    """
    Строго ли значение меньше нуля своего типа.

    Args:
        value: Проверяемое значение

    Returns:
        True если value < zero_of(type(value)); для NaN всегда False
    """
    return bool(value < zero_of(type(value)))


# =============================================================================
# КОНВЕРТЕРЫ ДЛЯ ФИКСИРОВАННЫХ ИНСТАНЦИАЦИЙ
# =============================================================================


def _reject_text(value: Any, type_name: str) -> None:
    if isinstance(value, (str, bytes)):
        raise ValueError(f"{type_name} scalar cannot be parsed from text, got {value!r}")


def as_float32(value: Any) -> np.float32:
    """
    Приведение к 32-битному float.

    Raises:
        ValueError: Если передана строка (парсинг не поддерживается)
    """
    _reject_text(value, "float32")
    return np.float32(value)


def as_float64(value: Any) -> np.float64:
    """
    Приведение к 64-битному float.

    Raises:
        ValueError: Если передана строка (парсинг не поддерживается)
    """
    _reject_text(value, "float64")
    return np.float64(value)


# =============================================================================
# СКАЛЯРНЫЕ АННОТАЦИИ
# =============================================================================

# 32-битный float (numpy.float32)
Float32 = Annotated[np.float32, BeforeValidator(as_float32)]

# 64-битный float (numpy.float64)
Float64 = Annotated[np.float64, BeforeValidator(as_float64)]

# Знаковое 128-битное целое: выход за диапазон — ошибка валидации (trap)
Int128 = Annotated[int, Field(ge=INT128_MIN, le=INT128_MAX)]
