"""Employee entity composed of validated value objects."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from employees_core.domain.exceptions import InvalidEmployeeNameError
from employees_core.domain.result import Ok, Result
from employees_core.domain.value_objects import MonetaryAmount, RegistrationId

if TYPE_CHECKING:
    from datetime import datetime

    from employees_core.domain.errors import InvalidAmount, InvalidPercentage
    from employees_core.domain.value_objects.numeric import DecimalLike

MAX_NAME_LENGTH = 120


@dataclass(frozen=True, slots=True)
class Employee:
    """Employee entity identified by its registration number.

    Employee holds only validated value objects, never the raw registration
    number or salary, so an invalid employee cannot be represented.

    Employee is immutable (frozen dataclass). Salary changes return a
    Result carrying a new Employee; the receiver keeps its salary.
    """

    registration_id: RegistrationId
    full_name: str
    salary: MonetaryAmount
    hired_at: datetime

    @classmethod
    def hire(
        cls,
        registration_number: DecimalLike,
        full_name: str,
        salary: DecimalLike,
        hired_at: datetime,
    ) -> Employee:
        """Factory method to create an Employee from raw boundary input.

        Args:
            registration_number: Raw registration number.
            full_name: Employee name; surrounding whitespace is trimmed.
            salary: Raw salary amount.
            hired_at: Hiring timestamp (UTC).

        Returns:
            A new Employee instance.

        Raises:
            InvalidRegistrationError: If the registration number is invalid.
            InvalidEmployeeNameError: If the name is blank or too long.
            InvalidAmountError: If the salary is invalid.
        """
        registration_id = RegistrationId.create(registration_number).unwrap()

        name = full_name.strip()
        if not name:
            raise InvalidEmployeeNameError("Employee name cannot be empty")
        if len(name) > MAX_NAME_LENGTH:
            raise InvalidEmployeeNameError(
                f"Employee name cannot exceed {MAX_NAME_LENGTH} characters"
            )

        return cls(
            registration_id=registration_id,
            full_name=name,
            salary=MonetaryAmount.create(salary).unwrap(),
            hired_at=hired_at,
        )

    def raise_salary(self, delta: DecimalLike) -> Result[Employee, InvalidAmount]:
        return self._with_salary(self.salary.add(delta))

    def cut_salary(self, delta: DecimalLike) -> Result[Employee, InvalidAmount]:
        return self._with_salary(self.salary.subtract(delta))

    def raise_salary_by_percentage(
        self, pct: DecimalLike
    ) -> Result[Employee, InvalidPercentage | InvalidAmount]:
        return self._with_salary(self.salary.increase_by_percentage(pct))

    def _with_salary(self, result: Result) -> Result:
        match result:
            case Ok(salary):
                return Ok(replace(self, salary=salary))
            case failure:
                return failure
