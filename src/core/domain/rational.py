"""
Rational — Exact Fraction Value Object

Неизменяемая дробь numerator / denominator с произвольной точностью.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. denominator > 0 (нарушение → InvariantViolation при конструировании)
2. Дробь НЕ сокращается автоматически: Rational(2, 4) и Rational(1, 2)
   различны по полям, но равны по значению. Сокращение только через simplify()
3. Равенство, порядок и хеш определяются математическим значением,
   а не парой полей (выравнивание к НОК знаменателей)
4. Каждая операция возвращает новое значение, операнды не изменяются

Деление на Rational с нулевым числителем → DivisionByZero.
"""

from __future__ import annotations

import logging
import operator
from dataclasses import dataclass
from functools import reduce
from typing import TYPE_CHECKING, Any, Callable, Final, Optional

from src.core.domain.errors import DivisionByZero, InvariantViolation
from src.core.domain.snapshots import RationalSnapshot
from src.core.math.integer import (
    IntegerLike,
    IntegerParseError,
    absolute,
    gcd,
    is_terminating,
    lcm,
    parse_integer,
    sign,
)

if TYPE_CHECKING:
    from src.core.domain.fixed_decimal import Decimal

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ КОНВЕРСИИ
# =============================================================================

# Основание десятичной системы для конверсии Rational → Decimal
DECIMAL_BASE: Final[int] = 10

# Число дробных знаков для бесконечных разложений по умолчанию
DEFAULT_DECIMAL_SCALE: Final[int] = 16


# =============================================================================
# RATIONAL
# =============================================================================


@dataclass(frozen=True, eq=False, repr=False)
class Rational:
    """
    Точная дробь произвольной точности.

    Поля принимают int или целочисленные строки и проходят через
    parse_integer. Знаменатель обязан быть строго положительным.

    Examples:
        >>> Rational(1, 10).plus(Rational(2, 10)) == Rational(3, 10)
        True
        >>> str(Rational(2, 4).simplify())
        '1/2'
    """

    numerator: int = 0
    denominator: int = 1

    def __post_init__(self) -> None:
        numerator = parse_integer(self.numerator)
        denominator = parse_integer(self.denominator)

        if denominator <= 0:
            raise InvariantViolation(
                f"Rational denominator must be greater than zero, received {denominator}.",
                field="denominator",
                value=denominator,
            )

        object.__setattr__(self, "numerator", numerator)
        object.__setattr__(self, "denominator", denominator)

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def plus(self, *others: Rational) -> Rational:
        """Сумма с выравниванием к НОК знаменателей (свёртка слева)."""
        return reduce(_add, others, self)

    def minus(self, *others: Rational) -> Rational:
        return reduce(_subtract, others, self)

    def times(self, *others: Rational) -> Rational:
        return reduce(_multiply, others, self)

    def divided_by(self, *others: Rational) -> Rational:
        """
        Последовательное деление на каждый операнд.

        Raises:
            DivisionByZero: Если числитель любого делителя равен нулю.
                Ошибка содержит накопленное делимое и нулевой делитель.
        """
        return reduce(_divide, others, self)

    def simplify(self) -> Rational:
        divisor = gcd(self.numerator, self.denominator)
        return Rational(self.numerator // divisor, self.denominator // divisor)

    def inverse(self) -> Rational:
        """
        Обратная дробь; знак переносится в числитель.

        Для нулевого значения знаменатель становится нулём, и конструктор
        поднимает InvariantViolation.
        """
        if self.numerator >= 0:
            return Rational(self.denominator, self.numerator)
        else:
            return Rational(-self.denominator, -self.numerator)

    def negation(self) -> Rational:
        return Rational(-self.numerator, self.denominator)

    def abs(self) -> Rational:
        return Rational(absolute(self.numerator), self.denominator)

    def sign(self) -> int:
        return sign(self.numerator)

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def compare(self, other: Rational, predicate: Callable[[int, int], bool]) -> bool:
        """
        Базовый примитив сравнения.

        Оба операнда приводятся к общему знаменателю lcm(d1, d2) умножением
        на единичную дробь u/u, после чего predicate применяется к
        выровненным числителям.

        Args:
            other: Второй операнд
            predicate: Функция от двух выровненных числителей

        Returns:
            Результат predicate
        """
        common = lcm(self.denominator, other.denominator)
        u = common // self.denominator
        v = common // other.denominator
        x = self.times(Rational(u, u))
        y = other.times(Rational(v, v))
        return predicate(x.numerator, y.numerator)

    def equal_to(self, other: Rational) -> bool:
        return self.compare(other, operator.eq)

    def less_than(self, other: Rational) -> bool:
        return self.compare(other, operator.lt)

    def less_than_or_equal_to(self, other: Rational) -> bool:
        return self.compare(other, operator.le)

    def greater_than(self, other: Rational) -> bool:
        return self.compare(other, operator.gt)

    def greater_than_or_equal_to(self, other: Rational) -> bool:
        return self.compare(other, operator.ge)

    def max(self, other: Rational) -> Rational:
        return self if self.greater_than(other) else other

    def min(self, other: Rational) -> Rational:
        return self if self.less_than(other) else other

    # =========================================================================
    # КОНВЕРСИЯ
    # =========================================================================

    def to_decimal(self, scale: IntegerLike = DEFAULT_DECIMAL_SCALE) -> Decimal:
        """
        Конверсия в Decimal делением в столбик.

        Если все простые множители знаменателя входят в {2, 5}, разложение
        конечно и вычисляется полностью (scale игнорируется). Иначе
        вычисляется ровно scale дробных знаков, остаток отбрасывается
        (усечение к нулю, без округления).

        Args:
            scale: Число дробных знаков для бесконечных разложений (>= 0)

        Returns:
            Decimal, чей scale равен числу фактически вычисленных знаков

        Raises:
            InvariantViolation: Если scale < 0
        """
        from src.core.domain.fixed_decimal import Decimal

        # Конструктор Decimal проверяет инвариант scale >= 0
        limit = Decimal(0, scale).scale

        terminating = is_terminating(DECIMAL_BASE, self.denominator)

        # Деление выполняется над модулем числителя: усечение к нулю
        digits, remainder = divmod(absolute(self.numerator), self.denominator)
        places = 0

        while remainder != 0 and (terminating or places < limit):
            digit, remainder = divmod(remainder * DECIMAL_BASE, self.denominator)
            digits = digits * DECIMAL_BASE + digit
            places += 1

        if remainder != 0:
            logger.debug("Truncated non-terminating expansion of %s at scale %d", self, places)

        if self.numerator < 0:
            digits = -digits

        return Decimal(digits, places)

    def to_string(self) -> str:
        return f"{self.numerator}/{self.denominator}"

    @classmethod
    def from_string(cls, text: str) -> Rational:
        """
        Разбор литерала "[-]<digits>[/<digits>]"; знаменатель по умолчанию 1.

        Raises:
            IntegerParseError: Если любая часть не является целым числом
            InvariantViolation: Если знаменатель <= 0
        """
        if not isinstance(text, str):
            raise IntegerParseError(text)

        parts = text.split("/")
        if len(parts) > 2:
            raise IntegerParseError(text)

        numerator = parse_integer(parts[0])
        denominator = parse_integer(parts[1]) if len(parts) == 2 else 1
        return cls(numerator, denominator)

    def to_json(self) -> dict[str, str]:
        """Снимок полей в виде строк (величины не ограничены разрядностью)."""
        return RationalSnapshot(
            numerator=str(self.numerator),
            denominator=str(self.denominator),
        ).model_dump()

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Rational:
        snapshot = RationalSnapshot.model_validate(data)
        return cls(snapshot.numerator, snapshot.denominator)

    # =========================================================================
    # ПРОТОКОЛЫ PYTHON
    # =========================================================================

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Rational('{self.to_string()}')"

    def __float__(self) -> float:
        # Приближённое значение, точность теряется
        return self.numerator / self.denominator

    def __bool__(self) -> bool:
        return self.numerator != 0

    def __hash__(self) -> int:
        reduced = self.simplify()
        # Целые значения хешируются как int, так как равны ему
        if reduced.denominator == 1:
            return hash(reduced.numerator)
        return hash((reduced.numerator, reduced.denominator))

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

    def __add__(self, other: object) -> Rational:
        that = _coerce(other)
        if that is None:
            return NotImplemented
        return self.plus(that)

    def __radd__(self, other: object) -> Rational:
        that = _coerce(other)
        if that is None:
            return NotImplemented
        return that.plus(self)

    def __sub__(self, other: object) -> Rational:
        that = _coerce(other)
        if that is None:
            return NotImplemented
        return self.minus(that)

    def __rsub__(self, other: object) -> Rational:
        that = _coerce(other)
        if that is None:
            return NotImplemented
        return that.minus(self)

    def __mul__(self, other: object) -> Rational:
        that = _coerce(other)
        if that is None:
            return NotImplemented
        return self.times(that)

    def __rmul__(self, other: object) -> Rational:
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

    def __neg__(self) -> Rational:
        return self.negation()

    def __abs__(self) -> Rational:
        return self.abs()


# =============================================================================
# БИНАРНЫЕ ОПЕРАЦИИ (шаги свёртки)
# =============================================================================


def _add(x: Rational, y: Rational) -> Rational:
    common = lcm(x.denominator, y.denominator)
    u = common // x.denominator
    v = common // y.denominator
    return Rational(x.numerator * u + y.numerator * v, common)


def _subtract(x: Rational, y: Rational) -> Rational:
    common = lcm(x.denominator, y.denominator)
    u = common // x.denominator
    v = common // y.denominator
    return Rational(x.numerator * u - y.numerator * v, common)


def _multiply(x: Rational, y: Rational) -> Rational:
    return Rational(x.numerator * y.numerator, x.denominator * y.denominator)


def _divide(x: Rational, y: Rational) -> Rational:
    if y.numerator > 0:
        return Rational(x.numerator * y.denominator, x.denominator * y.numerator)
    elif y.numerator < 0:
        return Rational(-x.numerator * y.denominator, -x.denominator * y.numerator)
    else:
        raise DivisionByZero(x, y)


def _coerce(value: object) -> Optional[Rational]:
    if isinstance(value, Rational):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Rational(value)
    return None


# =============================================================================
# ЛИТЕРАЛ
# =============================================================================


def r(text: str) -> Rational:
    """Краткая форма Rational.from_string: r("1/3")."""
    return Rational.from_string(text)
