"""
Test suite for exact arithmetic core

Contains:
- tests/unit/          : Unit tests for integer utilities, Rational, Decimal,
                         snapshots and JSON Schema contracts
"""
