"""
Test suite for the generic complex value library

Contains:
- tests/unit/          : Unit tests for individual modules
"""
