"""Shared pytest fixtures for the test suite."""

from datetime import UTC, datetime
from decimal import Decimal

import pytest

from employees_core.domain.entities import Employee
from employees_core.infrastructure.employee_repository import InMemoryEmployeeRepository
from employees_core.infrastructure.time_provider import FixedTimeProvider


@pytest.fixture
def fixed_time() -> datetime:
    """A fixed timestamp for deterministic testing."""
    return datetime(2024, 1, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def time_provider(fixed_time: datetime) -> FixedTimeProvider:
    """A time provider with a fixed timestamp."""
    return FixedTimeProvider(fixed_time)


@pytest.fixture
def employee_repository() -> InMemoryEmployeeRepository:
    return InMemoryEmployeeRepository()


@pytest.fixture
def employee(fixed_time: datetime) -> Employee:
    """An employee earning 5000.00."""
    return Employee.hire(
        registration_number=12345,
        full_name="Ada Lovelace",
        salary=Decimal("5000"),
        hired_at=fixed_time,
    )
