"""
Test suite for mathengine

Contains:
- tests/unit/          : Unit tests for individual modules and the call boundary
"""
