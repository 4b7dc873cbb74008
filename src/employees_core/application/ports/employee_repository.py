from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from employees_core.domain.entities import Employee
    from employees_core.domain.value_objects import RegistrationId


class EmployeeRepository(ABC):
    """Port for employee persistence.

    Contract:
    - Employees are keyed by RegistrationId
    - get() returns None if the employee does not exist (no exception)
    - save() performs upsert: creates if new, replaces if exists
    - delete() returns False if there was nothing to delete
    - Implementations are NOT thread-safe; callers must ensure serialization

    Entities are immutable, so implementations may hand out the stored
    instance itself.
    """

    @abstractmethod
    def get(self, registration_id: RegistrationId) -> Employee | None:
        """Retrieve an employee by registration number.

        Args:
            registration_id: The employee's registration number.

        Returns:
            The Employee if found, None otherwise.
        """

    @abstractmethod
    def save(self, employee: Employee) -> None:
        """Persist an employee (upsert semantics)."""

    @abstractmethod
    def delete(self, registration_id: RegistrationId) -> bool:
        """Remove an employee.

        Returns:
            True if an employee was removed, False if none was stored.
        """

    @abstractmethod
    def list_all(self) -> list[Employee]:
        """Return every stored employee, ordered by registration number."""
