"""Progress logger - decides when a long-running loop should report."""

import logging
import time
from collections.abc import Callable, Iterable, Iterator
from typing import TypeVar

from progresslogger.core.config import TriggerConfig
from progresslogger.core.state import ReportSnapshot
from progresslogger.utils.progress import ReportCallback
from progresslogger.utils.validation import validate_report

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ProgressLogger:
    """
    Call a reporting action at regular points of a long-running loop.

    Every call to trigger() increments the count. The reporting action is
    called with a ReportSnapshot when the count is a multiple of ``step``, or
    when the time interval has passed since the last time-based firing.

    Example:
        >>> progress = ProgressLogger(LogReporter(), step=100_000, minutes=30)
        >>> for row in rows:
        ...     process(row)
        ...     progress.trigger()
    """

    def __init__(
        self,
        report: ReportCallback | None = None,
        *,
        step: int | None = None,
        seconds: float | None = None,
        minutes: float | None = None,
        hours: float | None = None,
        max_count: int | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        config = TriggerConfig(
            step=step,
            seconds=seconds,
            minutes=minutes,
            hours=hours,
            max_count=max_count,
        )
        validate_report(report)

        self._config = config
        self._report = report
        self._clock = clock
        self._count = 0
        # Timing starts on the first trigger() so loop setup cost is not measured.
        self._started = False
        self._start_count = 0
        self._started_at = 0.0
        self._last_fired_at = 0.0
        self._last_fired_count = 0
        # Only advanced by time-based firings, so step firings don't delay them.
        self._last_time_check_at = 0.0

    @classmethod
    def from_config(
        cls,
        config: TriggerConfig,
        report: ReportCallback | None,
        clock: Callable[[], float] = time.monotonic,
    ) -> "ProgressLogger":
        """Create a logger from an existing TriggerConfig."""
        return cls(
            report,
            step=config.step,
            seconds=config.seconds,
            minutes=config.minutes,
            hours=config.hours,
            max_count=config.max_count,
            clock=clock,
        )

    @property
    def count(self) -> int:
        """Number of triggers processed so far."""
        return self._count

    @property
    def started(self) -> bool:
        return self._started

    @property
    def config(self) -> TriggerConfig:
        return self._config

    def start(self, now: float | None = None) -> None:
        """
        Start timing.

        Normally called by the first trigger(). Call it explicitly to include
        loop setup time in the measurements, or again later to begin a new
        measurement epoch from the current count.

        Args:
            now: Clock value to start from (defaults to the current clock)
        """
        if now is None:
            now = self._clock()

        if self._started:
            logger.debug("Restarting progress timing at count %d", self._count)

        self._started = True
        self._started_at = now
        self._last_fired_at = now
        self._last_time_check_at = now
        self._start_count = self._count
        self._last_fired_count = self._count

    def trigger(self) -> ReportSnapshot | None:
        """
        Record one unit of work and report if the criteria are met.

        Exceptions raised by the reporting action propagate to the caller.

        Returns:
            The snapshot passed to the reporting action, or None if it did not fire
        """
        if not self._started:
            # Absorbs any count from before the first call into the start count.
            self.start()

        self._count += 1
        now = self._clock()

        config = self._config
        its_time = config.time_based and now - self._last_time_check_at > config.interval_seconds
        its_enough = config.count_based and self._count % config.step == 0

        if not (its_time or its_enough):
            return None

        snapshot = ReportSnapshot(
            count=self._count,
            start_count=self._start_count,
            now=now,
            started_at=self._started_at,
            last_fired_at=self._last_fired_at,
            last_fired_count=self._last_fired_count,
            max_count=config.max_count,
        )
        logger.debug(
            "Firing at count %d (time=%s, step=%s)", self._count, its_time, its_enough
        )
        self._report(snapshot)

        self._last_fired_at = now
        self._last_fired_count = self._count
        if its_time:
            self._last_time_check_at = now

        return snapshot

    def track(self, iterable: Iterable[T]) -> Iterator[T]:
        """Yield items from iterable, triggering after each one is processed."""
        for item in iterable:
            yield item
            self.trigger()
