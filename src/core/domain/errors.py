"""
Exact arithmetic errors

Таксономия ошибок:
- IntegerParseError: некорректный целочисленный литерал (из src.core.math.integer)
- InvariantViolation: denominator <= 0 (Rational) или scale < 0 (Decimal)
- DivisionByZero: делитель Rational с нулевым числителем

Все ошибки поднимаются синхронно и никогда не перехватываются внутри
библиотеки: это ошибки ввода, которые исправляет вызывающий код.
"""

from typing import Any

from src.core.math.integer import IntegerParseError


class InvariantViolation(ValueError):
    """
    Нарушение инварианта значения при конструировании.

    Attributes:
        field: Имя поля ("denominator" или "scale")
        value: Отвергнутое значение
    """

    def __init__(self, message: str, field: str, value: int):
        super().__init__(message)
        self.field = field
        self.value = value


class DivisionByZero(ZeroDivisionError):
    """
    Деление на Rational с нулевым числителем.

    Attributes:
        dividend: Накопленное делимое на момент ошибки
        divisor: Нулевой делитель
    """

    def __init__(self, dividend: Any, divisor: Any):
        super().__init__(
            f"Rational cannot divide by zero, received {dividend} and {divisor}."
        )
        self.dividend = dividend
        self.divisor = divisor


__all__ = ["DivisionByZero", "IntegerParseError", "InvariantViolation"]
