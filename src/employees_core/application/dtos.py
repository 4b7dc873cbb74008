"""Data Transfer Objects for use case input/output."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from employees_core.domain.entities import Employee
    from employees_core.domain.value_objects.numeric import DecimalLike


class SalaryAdjustment(Enum):
    """How AdjustSalaryRequest.value is applied to the current salary."""

    RAISE = "raise"  # add a positive amount
    CUT = "cut"  # subtract a non-negative amount
    PERCENTAGE = "percentage"  # increase by 0 < value <= 100 percent


@dataclass(frozen=True)
class RegisterEmployeeRequest:
    """Input DTO for the RegisterEmployee use case.

    Fields hold raw primitives as received from the delivery mechanism.
    """

    registration_number: DecimalLike
    full_name: str
    salary: DecimalLike


@dataclass(frozen=True)
class AdjustSalaryRequest:
    """Input DTO for the AdjustSalary use case."""

    registration_number: DecimalLike
    adjustment: SalaryAdjustment
    value: DecimalLike


@dataclass(frozen=True)
class EmployeeDTO:
    """Output DTO: an Employee flattened to primitives via serialize()."""

    registration_number: int
    full_name: str
    salary: Decimal
    hired_at: datetime

    @classmethod
    def from_entity(cls, employee: Employee) -> EmployeeDTO:
        return cls(
            registration_number=employee.registration_id.serialize(),
            full_name=employee.full_name,
            salary=employee.salary.serialize(),
            hired_at=employee.hired_at,
        )

    def as_dict(self) -> dict[str, Any]:
        """JSON-ready mapping; salary as a two-place string, time as ISO 8601."""
        return {
            "registration_number": self.registration_number,
            "full_name": self.full_name,
            "salary": f"{self.salary:.2f}",
            "hired_at": self.hired_at.isoformat(),
        }
