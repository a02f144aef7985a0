"""
Domain models and value objects.

Exact numeric value objects: Rational (fraction) and Decimal (fixed point),
their plain-data snapshots and error types.
"""

from src.core.domain.errors import DivisionByZero, IntegerParseError, InvariantViolation
from src.core.domain.rational import DECIMAL_BASE, DEFAULT_DECIMAL_SCALE, Rational, r
from src.core.domain.fixed_decimal import Decimal, d
from src.core.domain.snapshots import DecimalSnapshot, RationalSnapshot

__all__ = [
    # Constants
    "DECIMAL_BASE",
    "DEFAULT_DECIMAL_SCALE",
    # Errors
    "DivisionByZero",
    "IntegerParseError",
    "InvariantViolation",
    # Value objects
    "Rational",
    "Decimal",
    # Literal helpers
    "r",
    "d",
    # Snapshots
    "DecimalSnapshot",
    "RationalSnapshot",
]
