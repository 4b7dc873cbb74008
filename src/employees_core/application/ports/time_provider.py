from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import UTC, datetime


def require_utc(moment: datetime) -> datetime:
    """Return moment unchanged if it carries tzinfo=UTC, else raise ValueError."""
    if moment.tzinfo is not UTC:
        raise ValueError(f"datetime must have tzinfo=UTC, got tzinfo={moment.tzinfo}")
    return moment


class TimeProvider(ABC):
    """Clock port behind Employee.hired_at.

    Adapters implement now(); RegisterEmployeeUseCase reads hiring_time(),
    which holds every adapter to UTC. An employee stamped with a naive or
    offset datetime would serialize an ambiguous hiring date in as_dict().
    """

    @abstractmethod
    def now(self) -> datetime:
        """Current time as seen by the adapter."""
        ...

    def hiring_time(self) -> datetime:
        """Timestamp for a new hire.

        Raises:
            ValueError: If the adapter returned a datetime not in UTC.
        """
        return require_utc(self.now())
