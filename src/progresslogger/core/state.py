"""Snapshot of progress handed to the reporting action."""

import math
from dataclasses import dataclass

from progresslogger.utils.errors import ConfigurationError


@dataclass(frozen=True)
class ReportSnapshot:
    """
    Progress at the moment a logger fired.

    All times are in seconds from the logger's clock. The rate and ETA
    properties return None when no time has elapsed over the interval they
    are measured on, which is normal for a firing on the very first trigger.

    Attributes:
        count: Triggers processed so far
        start_count: Count when timing started
        now: Clock value when the logger fired
        started_at: Clock value when timing started
        last_fired_at: Clock value of the previous firing (or start)
        last_fired_count: Count at the previous firing (or start)
        max_count: Expected total count, if configured
    """

    count: int
    start_count: int
    now: float
    started_at: float
    last_fired_at: float
    last_fired_count: int
    max_count: int | None = None

    @property
    def count_delta(self) -> int:
        """Triggers processed since the previous firing."""
        return self.count - self.last_fired_count

    @property
    def time_total(self) -> float:
        """Time elapsed since timing started."""
        return self.now - self.started_at

    @property
    def time_delta(self) -> float:
        """Time elapsed since the previous firing."""
        return self.now - self.last_fired_at

    @property
    def short_rate(self) -> float | None:
        """Triggers per second since the previous firing."""
        if self.now == self.last_fired_at:
            return None
        return self.count_delta / float(self.time_delta)

    @property
    def long_rate(self) -> float | None:
        """Triggers per second since timing started."""
        if self.now == self.started_at:
            return None
        return (self.count - self.start_count) / float(self.time_total)

    @property
    def short_eta(self) -> float | None:
        """Seconds left until max_count, at the short-term rate."""
        return self._eta(self.short_rate)

    @property
    def long_eta(self) -> float | None:
        """Seconds left until max_count, at the long-term rate."""
        return self._eta(self.long_rate)

    def _eta(self, rate: float | None) -> float | None:
        if self.max_count is None:
            raise ConfigurationError("Can't calculate ETA when no max_count specified")
        if rate is None:
            return None
        if rate == 0:
            return math.inf
        return (self.max_count - self.count) / rate
