"""
Test suite for alcoholometry

Contains:
- tests/unit/          : Unit tests for individual modules
"""
