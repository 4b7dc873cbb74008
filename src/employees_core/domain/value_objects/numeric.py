from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from decimal import MAX_EMAX, MAX_PREC, MIN_EMIN, Decimal, Inexact, InvalidOperation, localcontext
from typing import TypeAlias

# Raw numeric input accepted at the boundary; converted to `Decimal` before any check.
# Floats are read through their shortest repr, so the Decimal a float becomes
# (not the float itself) is what serialize() hands back.
DecimalLike: TypeAlias = Decimal | int | float | str


def as_decimal(value: DecimalLike) -> Decimal:
    """Convert boundary input to a finite `Decimal`.

    Ints are converted directly (no int-to-str round trip, so any size
    works). Floats go through `str()` so `10.555` becomes
    `Decimal("10.555")` rather than its binary expansion.

    Raises:
        TypeError: If value is not a number or numeric string (bool included).
        ValueError: If value cannot be parsed or is NaN/infinite.
    """
    if isinstance(value, bool) or not isinstance(value, (Decimal, int, float, str)):
        raise TypeError(f"Expected a number, got {type(value).__name__}: {value!r}")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation as e:
            raise ValueError(f"Cannot convert {value!r} to Decimal") from e

    if not result.is_finite():
        raise ValueError(f"Expected a finite number, got {value!r}")

    return result


@contextmanager
def exact_arithmetic() -> Iterator[None]:
    """Decimal context wide enough that additions, multiplications and
    quantize() never round; any inexact result raises `decimal.Inexact`.
    """
    with localcontext() as ctx:
        ctx.prec = MAX_PREC
        ctx.Emax = MAX_EMAX
        ctx.Emin = MIN_EMIN
        ctx.traps[Inexact] = True
        yield


def fraction_digits(value: Decimal) -> int:
    """Count significant fractional digits; trailing zeros are ignored."""
    # as_tuple() instead of normalize(): normalize() rounds to context precision
    _, digits, exponent = value.as_tuple()
    if not any(digits):
        return 0
    count = -exponent if exponent < 0 else 0
    for digit in reversed(digits):
        if count == 0 or digit != 0:
            break
        count -= 1
    return count


def integral_digits(value: Decimal) -> int:
    """Count digits of the integral part of a positive finite value (at least 1)."""
    return max(value.adjusted() + 1, 1)
