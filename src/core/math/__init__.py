"""
Core math modules

Скалярный контракт для обобщённых комплексных значений.
"""

# Scalars
from src.core.math.scalars import (
    # Constants
    IMAGINARY_UNIT_SUFFIX,
    INT128_MAX,
    INT128_MIN,
    POSITIVE_IMAGINARY_SEPARATOR,
    # Types
    Float32,
    Float64,
    Int128,
    Scalar,
    # Converters
    as_float32,
    as_float64,
    # Predicates
    is_negative,
    is_zero,
    zero_of,
)

__all__ = [
    # Scalars — Constants
    "IMAGINARY_UNIT_SUFFIX",
    "INT128_MAX",
    "INT128_MIN",
    "POSITIVE_IMAGINARY_SEPARATOR",
    # Scalars — Types
    "Float32",
    "Float64",
    "Int128",
    "Scalar",
    # Scalars — Converters
    "as_float32",
    "as_float64",
    # Scalars — Predicates
    "is_negative",
    "is_zero",
    "zero_of",
]
