"""Value objects - Immutable objects defined by their attributes."""

from employees_core.domain.value_objects.monetary_amount import MonetaryAmount
from employees_core.domain.value_objects.registration_id import RegistrationId

__all__ = [
    "MonetaryAmount",
    "RegistrationId",
]
