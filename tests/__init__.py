"""
Test suite for Universal Time

Contains:
- tests/unit/          : Unit tests for individual modules
"""
