"""
Snapshots — Plain-Data Form of Exact Values

Immutable Pydantic модели для сериализации Decimal и Rational.

Все числовые поля кодируются строками десятичных цифр: величины не
ограничены никакой фиксированной разрядностью, поэтому JSON number
недопустим. Поля ограничены теми же паттернами, что и JSON Schema
контракты (src/core/contracts/schema/), затем проходят через тот же
parse_integer, что и текстовые литералы, и сохраняются в канонической
форме ("007" → "7").

Паттерны уже исключают scale < 0 и denominator <= 0, поэтому модель и
схема принимают и отвергают одни и те же снимки.
"""

from typing import Final

from pydantic import BaseModel, Field, field_validator

from src.core.math.integer import parse_integer

# =============================================================================
# ПАТТЕРНЫ ПОЛЕЙ (совпадают с contracts/schema/*.json)
# =============================================================================

SIGNED_INTEGER_PATTERN: Final[str] = r"^[+-]?[0-9]+$"
NON_NEGATIVE_INTEGER_PATTERN: Final[str] = r"^[+]?[0-9]+$"
POSITIVE_INTEGER_PATTERN: Final[str] = r"^[+]?0*[1-9][0-9]*$"


def _canonical_integer(value: str) -> str:
    return str(parse_integer(value))


class DecimalSnapshot(BaseModel):
    """Снимок Decimal: {"digits": "<int>", "scale": "<int>"}."""

    digits: str = Field(
        ..., pattern=SIGNED_INTEGER_PATTERN, description="Знаковое целое digits в виде строки"
    )
    scale: str = Field(
        ..., pattern=NON_NEGATIVE_INTEGER_PATTERN, description="Число дробных знаков (>= 0)"
    )

    model_config = {"frozen": True, "strict": True, "extra": "forbid"}

    @field_validator("digits", "scale")
    @classmethod
    def validate_integer_text(cls, v: str) -> str:
        return _canonical_integer(v)


class RationalSnapshot(BaseModel):
    """Снимок Rational: {"numerator": "<int>", "denominator": "<int>"}."""

    numerator: str = Field(
        ..., pattern=SIGNED_INTEGER_PATTERN, description="Знаковый числитель в виде строки"
    )
    denominator: str = Field(
        ..., pattern=POSITIVE_INTEGER_PATTERN, description="Знаменатель (> 0) в виде строки"
    )

    model_config = {"frozen": True, "strict": True, "extra": "forbid"}

    @field_validator("numerator", "denominator")
    @classmethod
    def validate_integer_text(cls, v: str) -> str:
        return _canonical_integer(v)
