"""
Core domain models and mathematical primitives.

Contains the generic complex value type and the scalar contract it is
parameterized over. Pure in-process values, no external systems.
"""
