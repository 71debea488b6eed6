"""
Domain models and value objects.

Contains the generic Complex value type and its fixed instantiations.
"""

from src.core.domain.complex_value import (
    Complex,
    Complex32,
    Complex64,
    ComplexI128,
)

__all__ = [
    # Complex model
    "Complex",
    "Complex32",
    "Complex64",
    "ComplexI128",
]
