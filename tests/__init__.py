"""
Test suite for ldm-binding

Contains:
- tests/unit/          : Unit tests for individual modules
"""
