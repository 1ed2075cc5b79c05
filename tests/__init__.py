"""
Test suite for neon-ledger

Contains:
- tests/unit/          : Unit tests for individual modules
"""
