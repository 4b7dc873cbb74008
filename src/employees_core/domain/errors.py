"""Closed sets of validation failure kinds.

Each kind knows the DomainException subclass it maps to, so a failed
result can be turned into an exception at the application boundary.
"""

from __future__ import annotations

from enum import Enum
from typing import NoReturn

from employees_core.domain.exceptions import (
    InvalidAmountError,
    InvalidPercentageError,
    InvalidRegistrationError,
)


class InvalidRegistration(Enum):
    """Why a registration number was rejected."""

    NOT_POSITIVE = "not_positive"
    BAD_LENGTH = "bad_length"
    NOT_INTEGER = "not_integer"

    def raise_error(self, message: str) -> NoReturn:
        raise InvalidRegistrationError(self, message)


class InvalidAmount(Enum):
    """Why a monetary amount was rejected."""

    NEGATIVE = "negative"
    ZERO = "zero"
    TOO_PRECISE = "too_precise"

    def raise_error(self, message: str) -> NoReturn:
        raise InvalidAmountError(self, message)


class InvalidPercentage(Enum):
    """Why a percentage increase was rejected."""

    NOT_POSITIVE = "not_positive"
    OUT_OF_RANGE = "out_of_range"

    def raise_error(self, message: str) -> NoReturn:
        raise InvalidPercentageError(self, message)
