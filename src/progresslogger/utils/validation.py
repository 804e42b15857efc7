"""Trigger criteria validation utilities."""

from progresslogger.utils.errors import ConfigurationError


def validate_criteria(
    step: int | None,
    seconds: float | None,
    minutes: float | None,
    hours: float | None,
) -> None:
    """Validate that at least one count or time criterion was given."""
    if step is None and seconds is None and minutes is None and hours is None:
        raise ConfigurationError(
            "You must specify a step, seconds, minutes or hours interval criterion"
        )


def validate_step(step: int | None) -> None:
    """Validate step size is a positive integer."""
    if step is not None and step <= 0:
        raise ConfigurationError(f"Step size must be greater than 0, got {step}")


def validate_max_count(max_count: int | None) -> None:
    """Validate expected maximum count is positive."""
    if max_count is not None and max_count <= 0:
        raise ConfigurationError(f"Max count must be greater than 0, got {max_count}")


def total_seconds(
    seconds: float | None,
    minutes: float | None,
    hours: float | None,
) -> float | None:
    """
    Combine seconds, minutes and hours into a single interval.

    Components are summed, so a negative component may offset a positive one.

    Returns:
        Interval in seconds, or None if no time component was given
    """
    if seconds is None and minutes is None and hours is None:
        return None

    interval = seconds or 0
    if minutes:
        interval += minutes * 60
    if hours:
        interval += hours * 60 * 60

    if interval <= 0:
        raise ConfigurationError(
            f"You must specify a total time greater than 0, got {interval} seconds"
        )

    return interval


def validate_report(report: object) -> None:
    """Validate a reporting action was supplied."""
    if report is None:
        raise ConfigurationError("You must pass a reporting action")

    if not callable(report):
        raise ConfigurationError(f"Reporting action must be callable, got {type(report).__name__}")
