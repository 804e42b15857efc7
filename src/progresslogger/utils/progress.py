"""Progress reporting utilities."""

import logging
import math
from typing import Protocol

from rich.console import Console
from rich.markup import escape

from progresslogger.core.state import ReportSnapshot


class ReportCallback(Protocol):
    """Protocol for reporting actions called by a progress logger."""
    def __call__(self, snapshot: ReportSnapshot) -> None: ...


def format_duration(seconds: float | None) -> str:
    """Format a duration as H:MM:SS, or '?' when unknown."""
    if seconds is None or not math.isfinite(seconds):
        return "?"

    total = int(round(seconds))
    sign = "-" if total < 0 else ""
    hours, rest = divmod(abs(total), 3600)
    minutes, secs = divmod(rest, 60)
    return f"{sign}{hours}:{minutes:02d}:{secs:02d}"


def format_snapshot(snapshot: ReportSnapshot) -> str:
    """Summarize a snapshot on one line: count, rate and ETA when known."""
    if snapshot.max_count is not None:
        parts = [f"{snapshot.count:,}/{snapshot.max_count:,}"]
    else:
        parts = [f"{snapshot.count:,}"]

    rate = snapshot.long_rate
    parts.append(f"{rate:.2f}/s" if rate is not None else "?/s")

    if snapshot.max_count is not None:
        parts.append(f"eta {format_duration(snapshot.long_eta)}")

    return " ".join(parts)


class LogReporter:
    """Reporting action that writes a summary line to a logger."""

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.INFO):
        self.logger = logger or logging.getLogger("progresslogger")
        self.level = level

    def __call__(self, snapshot: ReportSnapshot) -> None:
        self.logger.log(self.level, "Processed %s", format_snapshot(snapshot))


class ConsoleReporter:
    """Reporting action that prints a summary line using rich."""

    def __init__(self, description: str, console: Console | None = None):
        self.description = description
        self.console = console or Console(stderr=True)

    def __call__(self, snapshot: ReportSnapshot) -> None:
        self.console.print(f"[cyan]{escape(self.description)}[/cyan]: {format_snapshot(snapshot)}")
