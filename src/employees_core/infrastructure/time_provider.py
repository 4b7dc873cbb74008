from datetime import UTC, datetime, timedelta

from employees_core.application.ports import TimeProvider, require_utc


class SystemTimeProvider(TimeProvider):
    """Production time provider using the system clock."""

    def now(self) -> datetime:
        return datetime.now(UTC)


class FixedTimeProvider(TimeProvider):
    """Test time provider that only moves when told to.

    Not thread-safe; intended for single-threaded unit tests.
    """

    def __init__(self, fixed_time: datetime) -> None:
        self._fixed_time = require_utc(fixed_time)

    def now(self) -> datetime:
        return self._fixed_time

    def advance(self, delta: timedelta) -> datetime:
        """Move the clock forward by delta and return the new time."""
        if delta < timedelta(0):
            raise ValueError(f"Clock cannot move backwards, got delta={delta}")
        self._fixed_time += delta
        return self._fixed_time
