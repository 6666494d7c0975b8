"""Injectable time source."""

from abc import ABC, abstractmethod
from datetime import datetime


class Clock(ABC):
    """Abstract source of the current time."""

    @abstractmethod
    def now(self) -> datetime:
        """Get the current timestamp."""
        pass


class SystemClock(Clock):
    """Wall-clock time in the local zone."""

    def now(self) -> datetime:
        return datetime.now()


class FixedClock(Clock):
    """A clock frozen at a given moment, for tests and replays."""

    def __init__(self, moment: datetime):
        self._moment = moment

    def now(self) -> datetime:
        return self._moment

    def set(self, moment: datetime) -> None:
        """Move the clock to a new moment."""
        self._moment = moment
