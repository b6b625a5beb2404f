"""
Test suite for symcodex

Contains:
- tests/unit/          : Unit tests for individual modules
"""
