"""Explicit success/failure values returned by domain operations.

A ``Result`` is either ``Ok(value)`` or ``Err(error, message)``. Callers
inspect it with ``is_ok()``/``is_err()`` or with structural pattern matching:

    match MonetaryAmount.create(raw):
        case Ok(amount):
            ...
        case Err(InvalidAmount.ZERO):
            ...

``unwrap()`` hands back the value, or raises the DomainException that
matches the error kind.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, NoReturn, Protocol, TypeVar


class ErrorKind(Protocol):
    def raise_error(self, message: str) -> NoReturn: ...


T = TypeVar("T")
E = TypeVar("E", bound=ErrorKind)


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful outcome carrying the produced value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed outcome carrying the error kind and a human-readable message."""

    error: E
    message: str

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        self.error.raise_error(self.message)


Result = Ok[T] | Err[E]
