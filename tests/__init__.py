"""
Test suite for the address derivation library

Contains:
- tests/unit/          : Unit tests for individual modules
"""
