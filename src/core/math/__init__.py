"""
Core math modules

Целочисленные примитивы произвольной точности для точной арифметики.
"""

from src.core.math.integer import (
    IntegerLike,
    IntegerParseError,
    # Parsing
    parse_integer,
    # Basic operations
    absolute,
    maximum,
    minimum,
    sign,
    truncate_divide,
    # GCD / LCM
    gcd,
    lcm,
    # Prime factors
    distinct_prime_factors,
    is_terminating,
    prime_factors,
)

__all__ = [
    # Types
    "IntegerLike",
    # Exceptions
    "IntegerParseError",
    # Parsing
    "parse_integer",
    # Basic operations
    "absolute",
    "maximum",
    "minimum",
    "sign",
    "truncate_divide",
    # GCD / LCM
    "gcd",
    "lcm",
    # Prime factors
    "distinct_prime_factors",
    "is_terminating",
    "prime_factors",
]
