"""
Test Utilities
==============

Assertion helpers shared across the test suite.
"""
