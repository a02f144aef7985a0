"""
Decimal — Exact Fixed-Point Value Object

Неизменяемое число вида digits × 10^-scale, где digits это знаковое целое
произвольной точности, scale это число дробных знаков.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. scale >= 0 (нарушение → InvariantViolation при конструировании)
2. Хвостовые нули НЕ удаляются автоматически, только через simplify()
3. Сложение/вычитание/сравнение выравнивают scale вверх (всегда точно)
4. Деление возвращает Rational: частное двух чисел с фиксированной
   точкой в общем случае не представимо конечным scale
5. to_rational() всегда точна; to_scale() вниз является единственным
   преобразованием с потерей точности (усечение к нулю)

Формат литерала: "[-]<digits>[.<digits>]".
"""

from __future__ import annotations

import operator
import re
from dataclasses import dataclass
from functools import reduce
from typing import Any, Callable, Final, Optional

from src.core.domain.errors import InvariantViolation
from src.core.domain.rational import DECIMAL_BASE, Rational
from src.core.domain.snapshots import DecimalSnapshot
from src.core.math.integer import (
    IntegerLike,
    IntegerParseError,
    absolute,
    maximum,
    parse_integer,
    sign,
    truncate_divide,
)

# Допустимая форма десятичного литерала после strip(): хотя бы одна цифра,
# знак только в начале, не более одной точки
_DECIMAL_PATTERN: Final = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)")


@dataclass(frozen=True, eq=False, repr=False)
class Decimal:
    """
    Число с фиксированной точкой произвольной точности.

    Examples:
        >>> Decimal.from_string("0.1").plus(Decimal.from_string("0.2")) == Decimal(3, 1)
        True
        >>> str(Decimal(5, 2))
        '0.05'
    """

    digits: int = 0
    scale: int = 0

    def __post_init__(self) -> None:
        digits = parse_integer(self.digits)
        scale = parse_integer(self.scale)

        if scale < 0:
            raise InvariantViolation(
                f"Decimal scale must be greater than or equal to zero, received {scale}.",
                field="scale",
                value=scale,
            )

        object.__setattr__(self, "digits", digits)
        object.__setattr__(self, "scale", scale)

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def plus(self, *others: Decimal) -> Decimal:
        """Сумма; операнд с меньшим scale масштабируется вверх."""
        return reduce(_add, others, self)

    def minus(self, *others: Decimal) -> Decimal:
        return reduce(_subtract, others, self)

    def times(self, *others: Decimal) -> Decimal:
        return reduce(_multiply, others, self)

    def divided_by(self, *others: Decimal) -> Rational:
        """
        Деление через Rational.

        Все операнды конвертируются в Rational без потерь, результат
        остаётся Rational (не Decimal).

        Raises:
            DivisionByZero: Если любой делитель равен нулю
        """
        return self.to_rational().divided_by(*(other.to_rational() for other in others))

    def simplify(self) -> Decimal:
        """Удаление хвостовых нулей до минимального scale."""
        digits, scale = self.digits, self.scale

        while scale > 0 and digits % DECIMAL_BASE == 0:
            digits //= DECIMAL_BASE
            scale -= 1

        return Decimal(digits, scale)

    def to_scale(self, scale: IntegerLike) -> Decimal:
        """
        Приведение к заданному scale.

        Вверх: умножение digits на 10^k (точно).
        Вниз: деление digits на 10^k с усечением к нулю (С ПОТЕРЕЙ ТОЧНОСТИ).

        Args:
            scale: Целевой scale (>= 0)

        Returns:
            Новый Decimal, либо self если scale совпадает

        Raises:
            InvariantViolation: Если scale < 0
        """
        target = parse_integer(scale)
        difference = target - self.scale

        if difference > 0:
            return Decimal(self.digits * DECIMAL_BASE**difference, target)
        elif difference < 0:
            return Decimal(truncate_divide(self.digits, DECIMAL_BASE**-difference), target)
        else:
            return self

    def inverse(self) -> Rational:
        return self.to_rational().inverse()

    def negation(self) -> Decimal:
        return Decimal(-self.digits, self.scale)

    def abs(self) -> Decimal:
        return Decimal(absolute(self.digits), self.scale)

    def sign(self) -> int:
        return sign(self.digits)

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def compare(self, other: Decimal, predicate: Callable[[int, int], bool]) -> bool:
        """
        Базовый примитив сравнения: оба операнда приводятся к
        max(scale1, scale2), predicate применяется к выровненным digits.
        """
        scale = maximum(self.scale, other.scale)
        x = self.to_scale(scale)
        y = other.to_scale(scale)
        return predicate(x.digits, y.digits)

    def equal_to(self, other: Decimal) -> bool:
        return self.compare(other, operator.eq)

    def less_than(self, other: Decimal) -> bool:
        return self.compare(other, operator.lt)

    def less_than_or_equal_to(self, other: Decimal) -> bool:
        return self.compare(other, operator.le)

    def greater_than(self, other: Decimal) -> bool:
        return self.compare(other, operator.gt)

    def greater_than_or_equal_to(self, other: Decimal) -> bool:
        return self.compare(other, operator.ge)

    def max(self, other: Decimal) -> Decimal:
        return self if self.greater_than(other) else other

    def min(self, other: Decimal) -> Decimal:
        return self if self.less_than(other) else other

    # =========================================================================
    # КОНВЕРСИЯ
    # =========================================================================

    def to_rational(self) -> Rational:
        """Точная конверсия: Rational(digits, 10^scale), без сокращения."""
        return Rational(self.digits, DECIMAL_BASE**self.scale)

    def to_string(self) -> str:
        """
        Каноническая запись: точка ставится за scale знаков от конца,
        перед точкой всегда есть хотя бы одна цифра.

        Examples:
            >>> Decimal(5, 2).to_string()
            '0.05'
            >>> Decimal(-5, 2).to_string()
            '-0.05'
            >>> Decimal(-5, 0).to_string()
            '-5'
        """
        text = str(absolute(self.digits)).rjust(self.scale + 1, "0")

        if self.scale > 0:
            text = f"{text[:-self.scale]}.{text[-self.scale:]}"

        return f"-{text}" if self.digits < 0 else text

    @classmethod
    def from_string(cls, text: str) -> Decimal:
        """
        Разбор литерала "[-]<digits>[.<digits>]".

        scale равен числу символов после точки; точка удаляется, остаток
        разбирается как целое со знаком.

        Raises:
            IntegerParseError: Если строка не является десятичным литералом
        """
        if not isinstance(text, str):
            raise IntegerParseError(text)

        literal = text.strip()
        if not _DECIMAL_PATTERN.fullmatch(literal):
            raise IntegerParseError(text)

        point = literal.find(".")
        scale = len(literal) - 1 - point if point >= 0 else 0

        digits = parse_integer(literal.replace(".", "", 1))
        return cls(digits, scale)

    def to_json(self) -> dict[str, str]:
        """Снимок полей в виде строк."""
        return DecimalSnapshot(
            digits=str(self.digits),
            scale=str(self.scale),
        ).model_dump()

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Decimal:
        snapshot = DecimalSnapshot.model_validate(data)
        return cls(snapshot.digits, snapshot.scale)

    # =========================================================================
    # ПРОТОКОЛЫ PYTHON
    # =========================================================================

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Decimal('{self.to_string()}')"

    def __float__(self) -> float:
        # Приближённое значение, точность теряется
        return float(self.to_string())

    def __bool__(self) -> bool:
        return self.digits != 0

    def __hash__(self) -> int:
        reduced = self.simplify()
        if reduced.scale == 0:
            return hash(reduced.digits)
        return hash((reduced.digits, reduced.scale))

    def __eq__(self, other: object) -> bool:
        that = _coerce(other)
        if that is None:
            return NotImplemented
        return self.equal_to(that)

    def __lt__(self, other: object) -> bool:
        that = _coerce(other)
        if that is None:
            return NotImplemented
        return self.less_than(that)

    def __le__(self, other: object) -> bool:
        that = _coerce(other)
        if that is None:
            return NotImplemented
        return self.less_than_or_equal_to(that)

    def __gt__(self, other: object) -> bool:
        that = _coerce(other)
        if that is None:
            return NotImplemented
        return self.greater_than(that)

    def __ge__(self, other: object) -> bool:
        that = _coerce(other)
        if that is None:
            return NotImplemented
        return self.greater_than_or_equal_to(that)

    def __add__(self, other: object) -> Decimal:
        that = _coerce(other)
        if that is None:
            return NotImplemented
        return self.plus(that)

    def __radd__(self, other: object) -> Decimal:
        that = _coerce(other)
        if that is None:
            return NotImplemented
        return that.plus(self)

    def __sub__(self, other: object) -> Decimal:
        that = _coerce(other)
        if that is None:
            return NotImplemented
        return self.minus(that)

    def __rsub__(self, other: object) -> Decimal:
        that = _coerce(other)
        if that is None:
            return NotImplemented
        return that.minus(self)

    def __mul__(self, other: object) -> Decimal:
        that = _coerce(other)
        if that is None:
            return NotImplemented
        return self.times(that)

    def __rmul__(self, other: object) -> Decimal:
        that = _coerce(other)
        if that is None:
            return NotImplemented
        return that.times(self)

    def __truediv__(self, other: object) -> Rational:
        that = _coerce(other)
        if that is None:
            return NotImplemented
        return self.divided_by(that)

    def __rtruediv__(self, other: object) -> Rational:
        that = _coerce(other)
        if that is None:
            return NotImplemented
        return that.divided_by(self)

    def __neg__(self) -> Decimal:
        return self.negation()

    def __abs__(self) -> Decimal:
        return self.abs()


# =============================================================================
# БИНАРНЫЕ ОПЕРАЦИИ (шаги свёртки)
# =============================================================================


def _add(x: Decimal, y: Decimal) -> Decimal:
    if x.scale > y.scale:
        return Decimal(x.digits + y.digits * DECIMAL_BASE ** (x.scale - y.scale), x.scale)
    else:
        return Decimal(x.digits * DECIMAL_BASE ** (y.scale - x.scale) + y.digits, y.scale)


def _subtract(x: Decimal, y: Decimal) -> Decimal:
    if x.scale > y.scale:
        return Decimal(x.digits - y.digits * DECIMAL_BASE ** (x.scale - y.scale), x.scale)
    else:
        return Decimal(x.digits * DECIMAL_BASE ** (y.scale - x.scale) - y.digits, y.scale)


def _multiply(x: Decimal, y: Decimal) -> Decimal:
    return Decimal(x.digits * y.digits, x.scale + y.scale)


def _coerce(value: object) -> Optional[Decimal]:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Decimal(value)
    return None


# =============================================================================
# ЛИТЕРАЛ
# =============================================================================


def d(text: str) -> Decimal:
    """Краткая форма Decimal.from_string: d("3.14")."""
    return Decimal.from_string(text)
