"""
Тесты для Decimal

Проверяет:
1. Инварианты конструирования (scale >= 0)
2. Арифметику с выравниванием scale
3. Деление с продвижением результата в Rational
4. simplify / to_scale (вверх точно, вниз с усечением)
5. Сравнение, не зависящее от scale
6. Текстовую форму и конверсию в Rational и обратно
"""

import dataclasses

import pytest

from src.core.domain import (
    Decimal,
    DivisionByZero,
    IntegerParseError,
    InvariantViolation,
    Rational,
    d,
)

# =============================================================================
# КОНСТРУИРОВАНИЕ
# =============================================================================


class TestDecimalConstruction:
    """Тесты конструктора Decimal"""

    def test_defaults(self) -> None:
        value = Decimal()
        assert (value.digits, value.scale) == (0, 0)

    @pytest.mark.parametrize("scale", [-1, -10])
    def test_negative_scale_rejected(self, scale) -> None:
        with pytest.raises(InvariantViolation, match="scale must be greater than or equal to zero") as exc_info:
            Decimal(1, scale)
        assert exc_info.value.field == "scale"
        assert exc_info.value.value == scale

    @pytest.mark.parametrize("scale", [0, 1, 50])
    def test_non_negative_scale_accepted(self, scale) -> None:
        assert Decimal(1, scale).scale == scale

    def test_trailing_zeros_kept(self) -> None:
        value = Decimal.from_string("1.500")
        assert (value.digits, value.scale) == (1500, 3)

    def test_immutable(self) -> None:
        value = Decimal(1, 2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            value.scale = 3  # type: ignore


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


class TestDecimalArithmetic:
    """Тесты арифметики Decimal"""

    def test_point_one_plus_point_two(self) -> None:
        """0.1 + 0.2 == 0.3 точно, в отличие от двоичного float"""
        result = Decimal.from_string("0.1").plus(Decimal.from_string("0.2"))
        assert result.equal_to(Decimal.from_string("0.3"))

    def test_plus_rescales_smaller_scale(self) -> None:
        result = Decimal.from_string("1.5").plus(Decimal.from_string("0.25"))
        assert (result.digits, result.scale) == (175, 2)

        result = Decimal.from_string("0.25").plus(Decimal.from_string("1.5"))
        assert (result.digits, result.scale) == (175, 2)

    def test_minus(self) -> None:
        result = Decimal.from_string("1").minus(Decimal.from_string("0.01"))
        assert (result.digits, result.scale) == (99, 2)

    def test_times_sums_scales(self) -> None:
        result = Decimal.from_string("1.5").times(Decimal.from_string("0.25"))
        assert (result.digits, result.scale) == (375, 3)

    def test_chained_variadic_expression(self) -> None:
        result = (
            Decimal.from_string("0.1")
            .plus(Decimal.from_string("0.2"))
            .minus(Decimal.from_string("0.3"), Decimal.from_string("10"))
            .times(Decimal.from_string("2"))
            .plus(Decimal.from_string("0.1"), Decimal.from_string("0.1"))
            .abs()
            .sign()
        )
        assert result == 1

    def test_divided_by_returns_rational(self) -> None:
        result = Decimal.from_string("1").divided_by(Decimal.from_string("3"))
        assert isinstance(result, Rational)
        assert result.equal_to(Rational.from_string("1/3"))

    def test_truncated_quotient_loses_exactness(self) -> None:
        quotient = Decimal.from_string("1").divided_by(Decimal.from_string("3"))
        assert not quotient.to_decimal().to_rational().equal_to(Rational.from_string("1/3"))

    def test_terminating_quotient_round_trips(self) -> None:
        quotient = Decimal.from_string("1").divided_by(Decimal.from_string("8"))
        assert quotient.to_decimal().to_rational().equal_to(quotient)

    def test_divided_by_multiple(self) -> None:
        result = Decimal.from_string("1.2").divided_by(Decimal.from_string("0.4"), Decimal.from_string("3"))
        assert result.equal_to(Rational(1))

    def test_quotient_by_large_prime_converts(self) -> None:
        """Знаменатель с большим простым множителем не замедляет конверсию"""
        quotient = Decimal.from_string("1").divided_by(Decimal.from_string("1000000007"))
        result = quotient.to_decimal()
        assert result.scale == 16
        assert str(result) == "0.0000000009999999"

    def test_divided_by_zero(self) -> None:
        with pytest.raises(DivisionByZero):
            Decimal.from_string("1").divided_by(Decimal.from_string("0.00"))

    def test_operators(self) -> None:
        assert d("1.5") + d("0.5") == d("2")
        assert d("1.5") - 1 == d("0.5")
        assert 2 * d("1.25") == d("2.5")
        assert d("1") / d("4") == Rational(1, 4)
        assert -d("1.5") == d("-1.5")
        assert abs(d("-1.5")) == d("1.5")

    def test_inverse(self) -> None:
        result = Decimal.from_string("0.25").inverse()
        assert isinstance(result, Rational)
        assert result.equal_to(Rational(4))

    def test_inverse_of_zero_fails(self) -> None:
        with pytest.raises(InvariantViolation):
            Decimal(0, 2).inverse()

    def test_negation_and_sign(self) -> None:
        value = Decimal.from_string("-0.5")
        assert value.sign() == -1
        assert value.negation().sign() == 1
        assert Decimal(0, 3).sign() == 0


# =============================================================================
# МАСШТАБ
# =============================================================================


class TestDecimalScale:
    """Тесты simplify и to_scale"""

    def test_simplify_strips_trailing_zeros(self) -> None:
        result = Decimal(1500, 3).simplify()
        assert (result.digits, result.scale) == (15, 1)

    def test_simplify_stops_at_scale_zero(self) -> None:
        result = Decimal(1000, 1).simplify()
        assert (result.digits, result.scale) == (100, 0)

    def test_simplify_zero(self) -> None:
        result = Decimal(0, 4).simplify()
        assert (result.digits, result.scale) == (0, 0)

    def test_simplify_negative(self) -> None:
        result = Decimal(-2500, 2).simplify()
        assert (result.digits, result.scale) == (-25, 0)

    def test_to_scale_up_is_exact(self) -> None:
        result = Decimal(15, 1).to_scale(3)
        assert (result.digits, result.scale) == (1500, 3)

    def test_to_scale_down_truncates(self) -> None:
        result = Decimal(1999, 3).to_scale(1)
        assert (result.digits, result.scale) == (19, 1)

    def test_to_scale_down_truncates_toward_zero(self) -> None:
        result = Decimal(-1999, 3).to_scale(1)
        assert (result.digits, result.scale) == (-19, 1)

    def test_to_scale_same_returns_self(self) -> None:
        value = Decimal(15, 1)
        assert value.to_scale(1) is value

    def test_to_scale_negative_rejected(self) -> None:
        with pytest.raises(InvariantViolation):
            Decimal(15, 1).to_scale(-1)


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


class TestDecimalComparison:
    """Тесты compare и производных операций"""

    def test_equal_across_scales(self) -> None:
        assert Decimal(15, 1).equal_to(Decimal(1500, 3))
        assert Decimal(15, 1) == Decimal(1500, 3)

    def test_compare_passes_aligned_digits(self) -> None:
        seen = []

        def predicate(x, y):
            seen.append((x, y))
            return False

        Decimal(15, 1).compare(Decimal(7, 3), predicate)
        assert seen == [(1500, 7)]

    def test_ordering(self) -> None:
        a = d("0.09")
        b = d("0.1")
        assert a.less_than(b)
        assert a.less_than_or_equal_to(b)
        assert b.greater_than(a)
        assert b.greater_than_or_equal_to(a)
        assert b.greater_than_or_equal_to(d("0.10"))
        assert a < b <= d("0.100")

    def test_max_min(self) -> None:
        a = d("-1.5")
        b = d("1")
        assert a.max(b) is b
        assert a.min(b) is a

    def test_hash_consistent_with_equality(self) -> None:
        assert hash(d("1.50")) == hash(d("1.5"))
        assert hash(d("2.00")) == hash(2)
        assert len({d("0.1"), d("0.10"), d("0.100")}) == 1

    def test_foreign_types(self) -> None:
        assert d("0.5") != Rational(1, 2)
        assert d("0.5") != "0.5"
        with pytest.raises(TypeError):
            d("0.5") < 0.5  # noqa: B015


# =============================================================================
# ТЕКСТ И КОНВЕРСИЯ
# =============================================================================


class TestDecimalText:
    """Тесты to_string / from_string"""

    @pytest.mark.parametrize(
        "digits, scale, expected",
        [
            (314, 2, "3.14"),
            (5, 2, "0.05"),
            (-5, 2, "-0.05"),
            (-5, 0, "-5"),
            (0, 0, "0"),
            (0, 3, "0.000"),
            (1500, 3, "1.500"),
            (-123456, 3, "-123.456"),
            (7, 1, "0.7"),
        ],
    )
    def test_to_string(self, digits, scale, expected) -> None:
        assert Decimal(digits, scale).to_string() == expected

    def test_from_string(self) -> None:
        value = Decimal.from_string("3.14")
        assert (value.digits, value.scale) == (314, 2)
        assert value.equal_to(Decimal(314, 2))

    @pytest.mark.parametrize(
        "text, digits, scale",
        [
            ("-0.05", -5, 2),
            ("42", 42, 0),
            (" 1.0 ", 10, 1),
            (".5", 5, 1),
            ("-.5", -5, 1),
            ("5.", 5, 0),
        ],
    )
    def test_from_string_forms(self, text, digits, scale) -> None:
        value = Decimal.from_string(text)
        assert (value.digits, value.scale) == (digits, scale)

    @pytest.mark.parametrize(
        "text",
        [
            "", ".", "1.2.3", "1e5", "NaN", "Infinity", "abc", "1/2", "-",
            ".-5", ". 5", "1.+5", "1. 5", "+-1", "1..2", "-.", "1.5-",
        ],
    )
    def test_from_string_malformed(self, text) -> None:
        with pytest.raises(IntegerParseError):
            Decimal.from_string(text)

    @pytest.mark.parametrize("text", ["3.14", "-0.05", "0", "1.500", "-123.456"])
    def test_string_round_trip(self, text) -> None:
        assert Decimal.from_string(text).to_string() == text

    def test_literal_helper(self) -> None:
        assert d("3.14") == Decimal(314, 2)

    def test_repr(self) -> None:
        assert repr(Decimal(314, 2)) == "Decimal('3.14')"

    def test_float_is_approximate(self) -> None:
        assert float(d("3.14")) == 3.14
        assert float(d("-0.5")) == -0.5

    def test_bool(self) -> None:
        assert not Decimal(0, 2)
        assert Decimal(1, 2)


class TestDecimalRationalConversion:
    """Тесты конверсии Decimal ↔ Rational"""

    def test_to_rational_not_reduced(self) -> None:
        result = Decimal(50, 2).to_rational()
        assert (result.numerator, result.denominator) == (50, 100)

    @pytest.mark.parametrize("text", ["3.14", "-0.05", "0", "1.500", "123456789.000000001", "-7"])
    def test_round_trip_at_original_scale(self, text) -> None:
        value = Decimal.from_string(text)
        assert value.to_rational().to_decimal(value.scale).equal_to(value)

    def test_large_values_stay_exact(self) -> None:
        big = Decimal.from_string("123456789012345678901234567890.123456789")
        result = big.times(big).minus(big.times(big))
        assert result.sign() == 0
