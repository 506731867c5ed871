"""
Test suite for xnumber

Contains:
- tests/unit/          : Unit tests for individual modules
"""
