"""
Test suite for date humanize

Contains:
- tests/unit/          : Unit tests for individual modules
"""
