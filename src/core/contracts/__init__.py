"""
Contract Validation Module

Валидация JSON снимков Decimal и Rational по JSON Schema контрактам.
"""

from .validators import (
    ContractValidator,
    DecimalSnapshotValidator,
    RationalSnapshotValidator,
    SchemaLoader,
    validate_decimal_snapshot,
    validate_rational_snapshot,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "DecimalSnapshotValidator",
    "RationalSnapshotValidator",
    # Functions
    "validate_decimal_snapshot",
    "validate_rational_snapshot",
]
