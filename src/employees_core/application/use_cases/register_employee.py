from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from employees_core.application.dtos import EmployeeDTO
from employees_core.domain.entities import Employee
from employees_core.domain.exceptions import DomainException, DuplicateEmployeeError

if TYPE_CHECKING:
    from employees_core.application.dtos import RegisterEmployeeRequest
    from employees_core.application.ports import EmployeeRepository, TimeProvider

logger = logging.getLogger(__name__)


class RegisterEmployeeUseCase:
    """Registers a new employee from raw input.

    Responsibilities:
    - Turn raw primitives into value objects (all validation happens here)
    - Reject registration numbers that are already taken
    - Stamp the hiring time from the injected clock
    """

    def __init__(
        self,
        time_provider: TimeProvider,
        employee_repository: EmployeeRepository,
    ) -> None:
        self._time_provider = time_provider
        self._employee_repo = employee_repository

    def execute(self, request: RegisterEmployeeRequest) -> EmployeeDTO:
        """Execute the registration workflow.

        Returns:
            EmployeeDTO of the stored employee.

        Raises:
            InvalidRegistrationError: Registration number is invalid.
            InvalidEmployeeNameError: Name is blank or too long.
            InvalidAmountError: Salary is invalid.
            DuplicateEmployeeError: Registration number already taken.
        """
        try:
            employee = Employee.hire(
                registration_number=request.registration_number,
                full_name=request.full_name,
                salary=request.salary,
                hired_at=self._time_provider.hiring_time(),
            )
        except DomainException as e:
            logger.warning(
                "Rejected registration %s: %s", request.registration_number, e
            )
            raise

        if self._employee_repo.get(employee.registration_id) is not None:
            logger.warning("Registration %s already taken", employee.registration_id)
            raise DuplicateEmployeeError(
                f"Employee already registered: {employee.registration_id}"
            )

        self._employee_repo.save(employee)
        logger.info(
            "Registered employee %s with salary %s",
            employee.registration_id,
            employee.salary,
        )
        return EmployeeDTO.from_entity(employee)
