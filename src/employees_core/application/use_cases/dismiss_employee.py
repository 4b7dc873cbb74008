from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from employees_core.application.dtos import EmployeeDTO
from employees_core.domain.exceptions import EmployeeNotFoundError
from employees_core.domain.value_objects import RegistrationId

if TYPE_CHECKING:
    from employees_core.application.ports import EmployeeRepository
    from employees_core.domain.value_objects.numeric import DecimalLike

logger = logging.getLogger(__name__)


class DismissEmployeeUseCase:
    """Removes an employee from the registry."""

    def __init__(self, employee_repository: EmployeeRepository) -> None:
        self._employee_repo = employee_repository

    def execute(self, registration_number: DecimalLike) -> EmployeeDTO:
        """Remove the employee and return what was stored.

        Raises:
            InvalidRegistrationError: Registration number is invalid.
            EmployeeNotFoundError: No employee with that registration number.
        """
        registration_id = RegistrationId.create(registration_number).unwrap()

        employee = self._employee_repo.get(registration_id)
        if employee is None:
            raise EmployeeNotFoundError(f"Employee not found: {registration_id}")

        self._employee_repo.delete(registration_id)
        logger.info("Dismissed employee %s", registration_id)
        return EmployeeDTO.from_entity(employee)
