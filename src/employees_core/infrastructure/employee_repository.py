from __future__ import annotations

from typing import TYPE_CHECKING

from employees_core.application.ports import EmployeeRepository

if TYPE_CHECKING:
    from employees_core.domain.entities import Employee
    from employees_core.domain.value_objects import RegistrationId


class InMemoryEmployeeRepository(EmployeeRepository):
    """Dictionary-backed employee repository for tests and single-process use.

    Implementation notes:
    - Keyed by RegistrationId (hashable frozen dataclass)
    - Stores and returns the Employee instances themselves; they are
      immutable, so no copy is needed to protect stored state
    - NOT thread-safe
    """

    def __init__(self) -> None:
        self._employees: dict[RegistrationId, Employee] = {}

    def get(self, registration_id: RegistrationId) -> Employee | None:
        return self._employees.get(registration_id)

    def save(self, employee: Employee) -> None:
        self._employees[employee.registration_id] = employee

    def delete(self, registration_id: RegistrationId) -> bool:
        return self._employees.pop(registration_id, None) is not None

    def list_all(self) -> list[Employee]:
        return sorted(self._employees.values(), key=lambda e: e.registration_id.value)
