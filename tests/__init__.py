"""
Test suite for the signed-magnitude integer engine

Contains:
- tests/unit/          : Unit tests for individual modules
"""
