"""Infrastructure layer - Concrete implementations of ports.

This layer contains:
- Persistence: In-memory employee repository
- Time Provider: Clock abstraction for testability

Infrastructure adapters implement the ports defined in the application layer.
"""

from employees_core.infrastructure.employee_repository import InMemoryEmployeeRepository
from employees_core.infrastructure.time_provider import FixedTimeProvider, SystemTimeProvider

__all__ = [
    "FixedTimeProvider",
    "InMemoryEmployeeRepository",
    "SystemTimeProvider",
]
