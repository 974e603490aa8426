"""
Test suite for the fuzzy truth operators

Contains:
- tests/unit/          : Unit tests for individual modules
"""
