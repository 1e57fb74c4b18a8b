"""
Test suite for precise-calc

Contains:
- tests/unit/          : Unit tests for individual modules
"""
