"""
Test suite for f64precision

Contains:
- tests/unit/          : Unit tests for individual modules
"""
