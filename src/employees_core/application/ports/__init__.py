"""Ports - Abstract interfaces for external dependencies.

Ports define the contracts that infrastructure adapters must implement.
This allows the application layer to remain decoupled from concrete implementations.
"""

from employees_core.application.ports.employee_repository import EmployeeRepository
from employees_core.application.ports.time_provider import TimeProvider, require_utc

__all__ = [
    "EmployeeRepository",
    "TimeProvider",
    "require_utc",
]
