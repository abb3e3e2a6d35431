"""
Test suite for kmul

Contains:
- tests/unit/          : Unit tests for the multiplication core, models, contracts and CLI
"""
