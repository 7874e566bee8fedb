"""
Test suite for arrayops

Contains:
- tests/unit/          : Unit tests for individual modules
"""
