"""Domain entities - Objects with identity and lifecycle."""

from employees_core.domain.entities.employee import Employee

__all__ = [
    "Employee",
]
