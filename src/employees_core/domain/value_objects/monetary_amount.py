"""MonetaryAmount value object with mutation-by-replacement operations.

Two rule sets apply to incoming values:
    - creation rules (also used for add() deltas): strictly positive, at most
      two decimal places;
    - subtraction rules: zero or positive, at most two decimal places.

Every operation returns a new validated instance or an Err. Nothing is
rounded or clamped; an over-precise result is a failure. Arithmetic runs in
exact_arithmetic(), so amounts of any size are added and quantized exactly.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from employees_core.domain.errors import InvalidAmount, InvalidPercentage
from employees_core.domain.result import Err, Ok, Result
from employees_core.domain.value_objects.numeric import (
    DecimalLike,
    as_decimal,
    exact_arithmetic,
    fraction_digits,
)

MAX_FRACTION_DIGITS = 2
MAX_PERCENTAGE = Decimal(100)

_CENT = Decimal("0.01")


def _check_amount(raw: DecimalLike, *, allow_zero: bool) -> Ok[Decimal] | Err[InvalidAmount]:
    amount = as_decimal(raw)

    if amount < 0:
        return Err(InvalidAmount.NEGATIVE, f"Amount cannot be negative, got {amount}")

    if amount == 0 and not allow_zero:
        return Err(InvalidAmount.ZERO, f"Amount must be greater than 0, got {amount}")

    if fraction_digits(amount) > MAX_FRACTION_DIGITS:
        return Err(
            InvalidAmount.TOO_PRECISE,
            f"Amount cannot have more than {MAX_FRACTION_DIGITS} decimal places, got {amount}",
        )

    return Ok(amount)


@dataclass(frozen=True, slots=True)
class MonetaryAmount:
    """Value object for a strictly positive amount of money, e.g. a salary.

    The amount is kept quantized to cents, so MonetaryAmount(5000) holds
    Decimal("5000.00"). Equality and hashing follow the numeric value.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        checked = _check_amount(self.amount, allow_zero=False).unwrap()
        with exact_arithmetic():
            object.__setattr__(self, "amount", checked.quantize(_CENT))

    @classmethod
    def create(cls, raw: DecimalLike) -> Result[MonetaryAmount, InvalidAmount]:
        """Validate a raw amount.

        Checks run in order: negative, zero, precision.

        Raises:
            TypeError: If raw is not numeric.
            ValueError: If raw is unparseable or not finite.
        """
        match _check_amount(raw, allow_zero=False):
            case Ok(amount):
                return Ok(cls(amount))
            case failure:
                return failure

    def add(self, delta: DecimalLike) -> Result[MonetaryAmount, InvalidAmount]:
        """Return a new amount increased by delta.

        A zero or negative delta is rejected the same way a zero or
        negative amount is.
        """
        match _check_amount(delta, allow_zero=False):
            case Ok(checked):
                with exact_arithmetic():
                    total = self.amount + checked
                return MonetaryAmount.create(total)
            case failure:
                return failure

    def subtract(self, delta: DecimalLike) -> Result[MonetaryAmount, InvalidAmount]:
        """Return a new amount decreased by delta.

        A zero delta is allowed and yields an equal amount. A result below
        zero fails with NEGATIVE; a result of exactly zero fails with ZERO,
        since no zero amount can exist.
        """
        match _check_amount(delta, allow_zero=True):
            case Ok(checked):
                with exact_arithmetic():
                    remainder = self.amount - checked
                if remainder < 0:
                    return Err(
                        InvalidAmount.NEGATIVE,
                        f"Cannot subtract {checked} from {self.amount}: result would be negative",
                    )
                return MonetaryAmount.create(remainder)
            case failure:
                return failure

    def increase_by_percentage(
        self, pct: DecimalLike
    ) -> Result[MonetaryAmount, InvalidPercentage | InvalidAmount]:
        """Return a new amount increased by pct percent (0 < pct <= 100).

        An increase with more than two decimal places fails with
        InvalidAmount.TOO_PRECISE; it is checked before the sum is formed,
        and the sum itself goes through create().
        """
        percentage = as_decimal(pct)

        if percentage <= 0:
            return Err(
                InvalidPercentage.NOT_POSITIVE,
                f"Percentage must be greater than 0, got {percentage}",
            )

        if percentage > MAX_PERCENTAGE:
            return Err(
                InvalidPercentage.OUT_OF_RANGE,
                f"Percentage cannot exceed {MAX_PERCENTAGE}, got {percentage}",
            )

        with exact_arithmetic():
            increase = (self.amount * percentage).scaleb(-2)

        if fraction_digits(increase) > MAX_FRACTION_DIGITS:
            return Err(
                InvalidAmount.TOO_PRECISE,
                f"A {percentage}% increase of {self.amount} is {increase}, "
                f"more than {MAX_FRACTION_DIGITS} decimal places",
            )

        with exact_arithmetic():
            total = self.amount + increase
        return MonetaryAmount.create(total)

    def equals(self, other: MonetaryAmount) -> bool:
        return self == other

    def serialize(self) -> Decimal:
        return self.amount

    def __str__(self) -> str:
        return f"{self.amount:.2f}"
