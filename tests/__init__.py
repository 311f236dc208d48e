"""
Test suite for checkout pricing

Contains:
- tests/unit/          : Unit tests for individual modules and the checkout workflow
"""
