"""Domain exceptions for employees-core.

Exception hierarchy:
    DomainException (base)
    ├── Validation Errors
    │   ├── InvalidRegistrationError
    │   ├── InvalidAmountError
    │   ├── InvalidPercentageError
    │   └── InvalidEmployeeNameError
    └── Registry Errors
        ├── EmployeeNotFoundError
        └── DuplicateEmployeeError

Value objects never raise these for invariant violations; they return an
``Err`` carrying the error kind. The exceptions exist for callers that prefer
to unwrap a result (use cases, direct dataclass construction).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from employees_core.domain.errors import (
        InvalidAmount,
        InvalidPercentage,
        InvalidRegistration,
    )


class DomainException(Exception):
    """Base exception for all domain-level errors.

    All domain exceptions inherit from this class to enable
    catching domain errors distinctly from infrastructure errors.
    """


# =============================================================================
# Validation Errors
# =============================================================================


class InvalidRegistrationError(DomainException):
    """Raised when a registration number violates a RegistrationId invariant.

    ``kind`` tells which check failed: NOT_POSITIVE, BAD_LENGTH or NOT_INTEGER.
    """

    def __init__(self, kind: InvalidRegistration, message: str) -> None:
        super().__init__(message)
        self.kind = kind


class InvalidAmountError(DomainException):
    """Raised when an amount violates a MonetaryAmount invariant.

    ``kind`` tells which check failed: NEGATIVE, ZERO or TOO_PRECISE.
    """

    def __init__(self, kind: InvalidAmount, message: str) -> None:
        super().__init__(message)
        self.kind = kind


class InvalidPercentageError(DomainException):
    """Raised when a percentage increase is outside (0, 100]."""

    def __init__(self, kind: InvalidPercentage, message: str) -> None:
        super().__init__(message)
        self.kind = kind


class InvalidEmployeeNameError(DomainException):
    """Raised when an employee name is blank or too long."""


# =============================================================================
# Registry Errors
# =============================================================================


class EmployeeNotFoundError(DomainException):
    """Raised when no employee holds the requested registration number.

    This is a client error (HTTP 404) at the API boundary.
    """


class DuplicateEmployeeError(DomainException):
    """Raised when registering a registration number that is already taken.

    This is a client error (HTTP 409 Conflict). The existing employee
    is not modified.
    """
