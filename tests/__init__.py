"""
Test suite for euler library

Contains:
- tests/unit/          : Unit tests for individual modules
"""
