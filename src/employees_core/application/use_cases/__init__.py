"""Use cases - One class per application workflow."""

from employees_core.application.use_cases.adjust_salary import AdjustSalaryUseCase
from employees_core.application.use_cases.dismiss_employee import DismissEmployeeUseCase
from employees_core.application.use_cases.register_employee import RegisterEmployeeUseCase

__all__ = [
    "AdjustSalaryUseCase",
    "DismissEmployeeUseCase",
    "RegisterEmployeeUseCase",
]
