"""
Test suite for nodemath

Contains:
- tests/unit/          : Unit tests for individual modules
"""
