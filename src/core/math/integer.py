"""
Integer Utilities — Arbitrary-Precision Integer Primitives

Чистые функции над целыми числами произвольной точности (Python int):
- Разбор целочисленных литералов (строгий, без молчаливого усечения)
- sign / absolute / maximum / minimum
- НОД (алгоритм Евклида) и НОК
- Ленивая последовательность простых множителей
- Проверка конечности десятичного разложения дроби

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. parse_integer никогда не усекает float и не принимает bool
2. truncate_divide округляет частное к нулю (не к -inf, как оператор //)
3. Все функции детерминированы и не имеют побочных эффектов
"""

import re
from typing import Final, Iterator, Union

IntegerLike = Union[int, str]

# Допустимая форма целочисленного литерала после strip()
_INTEGER_PATTERN: Final = re.compile(r"[+-]?[0-9]+")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class IntegerParseError(ValueError):
    """
    Значение не является корректным целым числом произвольной точности.

    Возникает для float (даже целых), bool, NaN/Infinity, пустых строк
    и строк с дробной частью или экспонентой.
    """

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Cannot convert {value!r} to an integer")


# =============================================================================
# РАЗБОР
# =============================================================================


def parse_integer(value: IntegerLike) -> int:
    """
    Строгий разбор целого числа.

    Args:
        value: int или строка вида "[+-]<digits>" (пробелы по краям допустимы)

    Returns:
        Целое число

    Raises:
        IntegerParseError: Если значение не является целым литералом

    Examples:
        >>> parse_integer(" -42 ")
        -42
        >>> parse_integer("1.5")  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        IntegerParseError: ...
    """
    # bool является подклассом int, поэтому проверяется первым
    if isinstance(value, bool):
        raise IntegerParseError(value)

    if isinstance(value, int):
        return value

    if isinstance(value, str):
        text = value.strip()
        if _INTEGER_PATTERN.fullmatch(text):
            return int(text)

    raise IntegerParseError(value)


# =============================================================================
# БАЗОВЫЕ ОПЕРАЦИИ
# =============================================================================


def sign(n: int) -> int:
    """Возвращает 1 для положительных, -1 для отрицательных, иначе 0."""
    if n > 0:
        return 1
    elif n < 0:
        return -1
    else:
        return 0


def absolute(n: int) -> int:
    return n if n >= 0 else -n


def maximum(x: int, y: int) -> int:
    return x if x > y else y


def minimum(x: int, y: int) -> int:
    return x if x < y else y


def truncate_divide(dividend: int, divisor: int) -> int:
    """
    Целочисленное деление с округлением к нулю.

    Оператор // округляет к -inf, поэтому для отрицательных значений
    деление выполняется над модулями с последующим восстановлением знака.

    Raises:
        ZeroDivisionError: Если divisor == 0

    Examples:
        >>> truncate_divide(-7, 2)
        -3
        >>> -7 // 2
        -4
    """
    quotient = absolute(dividend) // absolute(divisor)
    return quotient if sign(dividend) * sign(divisor) >= 0 else -quotient


# =============================================================================
# НОД / НОК
# =============================================================================


def gcd(x: int, y: int) -> int:
    """
    Наибольший общий делитель (алгоритм Евклида, итеративно).

    gcd(x, 0) == x. При положительном y результат всегда неотрицателен,
    что покрывает все вызовы с положительным знаменателем.
    """
    while y != 0:
        x, y = y, x % y
    return x


def lcm(x: int, y: int) -> int:
    """
    Наименьшее общее кратное (неотрицательное).

    Деление выполняется до умножения: x // gcd(x, y) * y.
    lcm(0, 0) == 0.
    """
    divisor = gcd(x, y)
    if divisor == 0:
        return 0
    return absolute(x // divisor * y)


# =============================================================================
# ПРОСТЫЕ МНОЖИТЕЛИ
# =============================================================================


def prime_factors(n: int) -> Iterator[int]:
    """
    Ленивая неубывающая последовательность простых множителей |n| с кратностью.

    Пробное деление начиная с 2; кандидат увеличивается только когда
    он больше не делит остаток. Как только candidate² превышает остаток,
    остаток сам является простым и выдаётся последним. Для |n| < 2
    последовательность пуста.

    Examples:
        >>> list(prime_factors(360))
        [2, 2, 2, 3, 3, 5]
        >>> list(prime_factors(2 * 1_000_000_007))
        [2, 1000000007]
    """
    remaining = absolute(n)
    candidate = 2

    while candidate * candidate <= remaining:
        if remaining % candidate == 0:
            yield candidate
            remaining //= candidate
        else:
            candidate += 1

    if remaining >= 2:
        yield remaining


def distinct_prime_factors(n: int) -> frozenset[int]:
    return frozenset(prime_factors(n))


def is_terminating(dividend: int, divisor: int) -> bool:
    """
    Проверка конечности разложения: каждый простой множитель divisor
    должен входить в множество простых множителей dividend.

    При конверсии дроби в десятичную форму dividend играет роль основания
    (10), divisor играет роль знаменателя. Раскладывается только dividend:
    из divisor выделяются множители основания, и разложение конечно тогда
    и только тогда, когда остаётся 1.

    Examples:
        >>> is_terminating(10, 8)
        True
        >>> is_terminating(10, 3)
        False
    """
    remaining = absolute(divisor)

    for factor in distinct_prime_factors(dividend):
        while remaining != 0 and remaining % factor == 0:
            remaining //= factor

    return remaining <= 1
