from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from employees_core.application.dtos import EmployeeDTO, SalaryAdjustment
from employees_core.domain.exceptions import EmployeeNotFoundError
from employees_core.domain.result import Err
from employees_core.domain.value_objects import RegistrationId

if TYPE_CHECKING:
    from employees_core.application.dtos import AdjustSalaryRequest
    from employees_core.application.ports import EmployeeRepository
    from employees_core.domain.entities import Employee
    from employees_core.domain.result import Result

logger = logging.getLogger(__name__)


class AdjustSalaryUseCase:
    """Applies a raise, a cut or a percentage increase to an employee's salary.

    The stored employee is replaced only when the new salary is valid;
    a rejected adjustment leaves the repository untouched.
    """

    def __init__(self, employee_repository: EmployeeRepository) -> None:
        self._employee_repo = employee_repository

    def execute(self, request: AdjustSalaryRequest) -> EmployeeDTO:
        """Execute the salary adjustment.

        Returns:
            EmployeeDTO carrying the new salary.

        Raises:
            InvalidRegistrationError: Registration number is invalid.
            EmployeeNotFoundError: No employee with that registration number.
            InvalidAmountError: Adjustment or resulting salary is invalid.
            InvalidPercentageError: Percentage outside (0, 100].
        """
        registration_id = RegistrationId.create(request.registration_number).unwrap()

        employee = self._employee_repo.get(registration_id)
        if employee is None:
            raise EmployeeNotFoundError(f"Employee not found: {registration_id}")

        result = self._apply(employee, request)
        if isinstance(result, Err):
            logger.warning(
                "Rejected %s of %s for employee %s: %s",
                request.adjustment.value,
                request.value,
                registration_id,
                result.message,
            )
        adjusted = result.unwrap()

        self._employee_repo.save(adjusted)
        logger.info(
            "Adjusted salary of employee %s from %s to %s",
            registration_id,
            employee.salary,
            adjusted.salary,
        )
        return EmployeeDTO.from_entity(adjusted)

    def _apply(self, employee: Employee, request: AdjustSalaryRequest) -> Result:
        match request.adjustment:
            case SalaryAdjustment.RAISE:
                return employee.raise_salary(request.value)
            case SalaryAdjustment.CUT:
                return employee.cut_salary(request.value)
            case SalaryAdjustment.PERCENTAGE:
                return employee.raise_salary_by_percentage(request.value)
