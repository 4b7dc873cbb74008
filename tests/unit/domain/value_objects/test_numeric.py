from decimal import Decimal, Inexact, getcontext

import pytest

from employees_core.domain.value_objects.numeric import (
    as_decimal,
    exact_arithmetic,
    fraction_digits,
    integral_digits,
)


class TestAsDecimal:
    def test_decimal_is_returned_as_is(self) -> None:
        value = Decimal("12.30")

        assert as_decimal(value) is value

    def test_float_goes_through_its_string_form(self) -> None:
        assert as_decimal(0.1) == Decimal("0.1")

    def test_string_is_stripped(self) -> None:
        assert as_decimal(" 42.5\n") == Decimal("42.5")

    def test_bool_is_rejected(self) -> None:
        with pytest.raises(TypeError, match="bool"):
            as_decimal(True)

    def test_float_becomes_its_shortest_repr_not_the_float(self) -> None:
        converted = as_decimal(10.1)

        assert converted == Decimal("10.1")
        assert converted != Decimal(10.1)

    def test_int_wider_than_str_conversion_limit(self) -> None:
        converted = as_decimal(10**5000)

        assert converted.adjusted() == 5000

    def test_unparseable_string_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="Cannot convert"):
            as_decimal("12,50")

    @pytest.mark.parametrize("value", [Decimal("NaN"), Decimal("-Infinity"), float("inf")])
    def test_non_finite_is_rejected(self, value: object) -> None:
        with pytest.raises(ValueError, match="finite"):
            as_decimal(value)  # type: ignore[arg-type]


class TestFractionDigits:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (Decimal("5000"), 0),
            (Decimal("5E+3"), 0),
            (Decimal("10.5"), 1),
            (Decimal("10.500"), 1),
            (Decimal("10.55"), 2),
            (Decimal("10.555"), 3),
            (Decimal("0.00"), 0),
            (Decimal("0.0000"), 0),
        ],
    )
    def test_counts_significant_fractional_digits(self, value: Decimal, expected: int) -> None:
        assert fraction_digits(value) == expected

    def test_does_not_round_long_values(self) -> None:
        value = Decimal("123456789012345678901234567890.125")

        assert fraction_digits(value) == 3


class TestIntegralDigits:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (Decimal("0.5"), 1),
            (Decimal("7"), 1),
            (Decimal("12345"), 5),
            (Decimal("123456.5"), 6),
            (Decimal("5E+3"), 4),
            (Decimal("1E+40"), 41),
        ],
    )
    def test_counts_integral_digits(self, value: Decimal, expected: int) -> None:
        assert integral_digits(value) == expected


class TestExactArithmetic:
    def test_addition_is_not_rounded_to_default_precision(self) -> None:
        with exact_arithmetic():
            total = Decimal("1E+30") + Decimal("0.01")

        assert total == Decimal("1000000000000000000000000000000.01")

    def test_inexact_result_raises(self) -> None:
        with exact_arithmetic(), pytest.raises(Inexact):
            Decimal(1) / Decimal(3)

    def test_restores_previous_context(self) -> None:
        before = getcontext().prec

        with exact_arithmetic():
            assert getcontext().prec > before

        assert getcontext().prec == before
