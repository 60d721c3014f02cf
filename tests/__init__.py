"""
Test suite for orthants

Contains:
- tests/unit/          : Unit tests for individual modules
"""
