"""Trigger criteria for a progress logger."""

from dataclasses import dataclass, field

from progresslogger.utils.validation import total_seconds
from progresslogger.utils.validation import validate_criteria
from progresslogger.utils.validation import validate_max_count
from progresslogger.utils.validation import validate_step


@dataclass(frozen=True)
class TriggerConfig:
    """
    When a progress logger should fire.

    Either a step, a time interval, or both must be given. The time interval
    is the sum of seconds, minutes and hours.

    Attributes:
        step: Fire every time the count is a multiple of this
        seconds: Seconds component of the time interval
        minutes: Minutes component of the time interval
        hours: Hours component of the time interval
        max_count: Expected total count, only used for ETA estimates
    """

    step: int | None = None
    seconds: float | None = None
    minutes: float | None = None
    hours: float | None = None
    max_count: int | None = None
    interval_seconds: float | None = field(init=False, default=None)

    def __post_init__(self) -> None:
        validate_criteria(self.step, self.seconds, self.minutes, self.hours)
        validate_step(self.step)
        validate_max_count(self.max_count)
        object.__setattr__(
            self, "interval_seconds", total_seconds(self.seconds, self.minutes, self.hours)
        )

    @property
    def count_based(self) -> bool:
        return self.step is not None

    @property
    def time_based(self) -> bool:
        return self.interval_seconds is not None
