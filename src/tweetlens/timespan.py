"""
Timespan value type.

A closed interval of instants, produced by ``extract.get_timespan`` and
consumed by ``filters.in_timespan``.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta

from tweetlens.core.exceptions import InvalidTimespanError


@dataclass(frozen=True)
class Timespan:
    """
    Immutable closed interval ``[start, end]``.

    Attributes:
        start: First instant of the interval
        end: Last instant of the interval, never earlier than ``start``
    """

    start: datetime
    end: datetime

    def __post_init__(self):
        if self.start > self.end:
            raise InvalidTimespanError(self.start, self.end)

    @property
    def duration(self) -> timedelta:
        """Length of the interval."""
        return self.end - self.start

    def contains(self, instant: datetime) -> bool:
        """Whether ``instant`` falls inside the interval, boundaries included."""
        return self.start <= instant <= self.end

    def __str__(self) -> str:
        return f"[{self.start.isoformat()}, {self.end.isoformat()}]"
