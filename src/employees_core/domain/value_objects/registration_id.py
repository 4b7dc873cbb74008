from __future__ import annotations

from dataclasses import dataclass

from employees_core.domain.errors import InvalidRegistration
from employees_core.domain.result import Err, Ok, Result
from employees_core.domain.value_objects.numeric import DecimalLike, as_decimal, integral_digits

MIN_DIGITS = 5
MAX_DIGITS = 6


def _check_registration(raw: DecimalLike) -> Ok[int] | Err[InvalidRegistration]:
    number = as_decimal(raw)

    if number <= 0:
        return Err(
            InvalidRegistration.NOT_POSITIVE,
            f"Registration number must be positive, got {number}",
        )

    # Length is taken on the integral part so 123456.5 reaches the integrality check
    digits = integral_digits(number)
    if not MIN_DIGITS <= digits <= MAX_DIGITS:
        return Err(
            InvalidRegistration.BAD_LENGTH,
            f"Registration number must have {MIN_DIGITS} to {MAX_DIGITS} digits, "
            f"got {digits}",
        )

    if number != number.to_integral_value():
        return Err(
            InvalidRegistration.NOT_INTEGER,
            f"Registration number must be a whole number, got {number}",
        )

    return Ok(int(number))


@dataclass(frozen=True, slots=True)
class RegistrationId:
    """Value object for employee registration numbers.

    A registration number is a positive whole number of 5 or 6 digits.
    When several rules are broken, the first failing check is reported,
    in this order: positivity, digit count, integrality.

    Use create() to get a Result. Direct construction runs the same
    checks and raises InvalidRegistrationError.
    """

    value: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _check_registration(self.value).unwrap())

    @classmethod
    def create(cls, raw: DecimalLike) -> Result[RegistrationId, InvalidRegistration]:
        """Validate a raw registration number.

        Args:
            raw: Number as received at the boundary (int, Decimal, float or str).

        Returns:
            Ok(RegistrationId) or Err with the first violated rule.

        Raises:
            TypeError: If raw is not numeric.
            ValueError: If raw is unparseable or not finite.
        """
        match _check_registration(raw):
            case Ok(number):
                return Ok(cls(number))
            case failure:
                return failure

    def equals(self, other: RegistrationId) -> bool:
        return self == other

    def serialize(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)
