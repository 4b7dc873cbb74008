"""Property tests: value-object invariants hold for every generated input.

Uses hypothesis to generate raw numbers and checks that construction either
yields an instance honouring every invariant or fails with the right kind.
"""

from decimal import Decimal

from hypothesis import given, strategies as st

from employees_core.domain.errors import InvalidAmount, InvalidRegistration
from employees_core.domain.result import Err, Ok
from employees_core.domain.value_objects import MonetaryAmount, RegistrationId

# Positive amounts with at most two decimal places
valid_amounts = st.integers(min_value=1, max_value=10**12).map(
    lambda cents: Decimal(cents).scaleb(-2)
)
valid_registrations = st.integers(min_value=10_000, max_value=999_999)


@given(valid_registrations)
def test_valid_registration_numbers_are_accepted(n: int) -> None:
    result = RegistrationId.create(n)

    assert isinstance(result, Ok)
    assert result.value.value == n
    assert result.value.equals(result.value)


@given(st.integers(min_value=-(10**30), max_value=0))
def test_non_positive_registration_numbers_are_rejected(n: int) -> None:
    assert RegistrationId.create(n).error is InvalidRegistration.NOT_POSITIVE


@given(
    st.one_of(
        st.integers(min_value=1, max_value=9_999),
        st.integers(min_value=1_000_000, max_value=10**30),
    )
)
def test_registration_numbers_of_wrong_length_are_rejected(n: int) -> None:
    assert RegistrationId.create(n).error is InvalidRegistration.BAD_LENGTH


@given(valid_registrations, st.integers(min_value=1, max_value=99))
def test_fractional_registration_numbers_are_rejected(n: int, cents: int) -> None:
    raw = Decimal(n) + Decimal(cents).scaleb(-2)

    assert RegistrationId.create(raw).error is InvalidRegistration.NOT_INTEGER


@given(valid_amounts)
def test_valid_amounts_round_trip(a: Decimal) -> None:
    result = MonetaryAmount.create(a)

    assert isinstance(result, Ok)
    assert result.value.amount == a
    assert result.value.serialize() == a
    assert result.value.equals(result.value)


@given(valid_amounts, st.integers(min_value=1, max_value=9))
def test_amounts_with_three_places_are_rejected(a: Decimal, mills: int) -> None:
    raw = a + Decimal(mills).scaleb(-3)

    assert MonetaryAmount.create(raw).error is InvalidAmount.TOO_PRECISE


@given(valid_amounts, valid_amounts)
def test_add_never_mutates_and_sums(a: Decimal, delta: Decimal) -> None:
    original = MonetaryAmount.create(a).unwrap()

    result = original.add(delta)

    assert result.unwrap().amount == a + delta
    assert original.amount == a


@given(valid_amounts, valid_amounts)
def test_subtract_result_is_never_zero_or_negative(a: Decimal, delta: Decimal) -> None:
    result = MonetaryAmount.create(a).unwrap().subtract(delta)

    match result:
        case Ok(remaining):
            assert remaining.amount == a - delta
            assert remaining.amount > 0
        case Err(kind):
            expected = InvalidAmount.ZERO if a == delta else InvalidAmount.NEGATIVE
            assert a <= delta
            assert kind is expected


@given(valid_amounts, st.integers(min_value=1, max_value=100))
def test_percentage_increase_is_exact_or_rejected(a: Decimal, pct: int) -> None:
    result = MonetaryAmount.create(a).unwrap().increase_by_percentage(pct)
    exact = a + a * pct / 100

    match result:
        case Ok(increased):
            assert increased.amount == exact
        case Err(kind):
            assert kind is InvalidAmount.TOO_PRECISE
            assert exact != exact.quantize(Decimal("0.01"))


# Cent counts far beyond the 28 significant digits of the default Decimal context
large_cents = st.integers(min_value=10**26, max_value=10**60)


def _from_cents(cents: int) -> Decimal:
    # String construction is exact regardless of context precision
    return Decimal(f"{cents}E-2")


@given(large_cents, st.integers(min_value=1, max_value=10**4))
def test_large_amounts_add_and_subtract_to_the_cent(cents: int, delta: int) -> None:
    amount = MonetaryAmount.create(_from_cents(cents)).unwrap()

    assert amount.add(_from_cents(delta)).unwrap().amount == _from_cents(cents + delta)
    assert amount.subtract(_from_cents(delta)).unwrap().amount == _from_cents(cents - delta)


@given(st.floats(min_value=0.01, max_value=1e9, allow_nan=False, allow_infinity=False))
def test_float_input_serializes_to_its_repr(f: float) -> None:
    result = MonetaryAmount.create(f)

    match result:
        case Ok(amount):
            assert amount.serialize() == Decimal(repr(f))
        case Err(kind):
            assert kind is InvalidAmount.TOO_PRECISE
