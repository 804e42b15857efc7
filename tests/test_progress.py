"""Tests for reporting actions."""

import io
import logging

from rich.console import Console

from progresslogger import ConsoleReporter
from progresslogger import LogReporter
from progresslogger import ProgressLogger
from progresslogger import ReportSnapshot
from progresslogger.utils.progress import format_duration
from progresslogger.utils.progress import format_snapshot


def make_snapshot(max_count=None, now=110.0):
    return ReportSnapshot(
        count=1000,
        start_count=0,
        now=now,
        started_at=100.0,
        last_fired_at=105.0,
        last_fired_count=500,
        max_count=max_count,
    )


def test_format_duration():
    """Test durations render as H:MM:SS."""
    assert format_duration(0) == "0:00:00"
    assert format_duration(59.6) == "0:01:00"
    assert format_duration(3725) == "1:02:05"
    assert format_duration(90000) == "25:00:00"
    assert format_duration(-61) == "-0:01:01"
    assert format_duration(None) == "?"


def test_format_snapshot_without_max():
    """Test summary without an expected total."""
    assert format_snapshot(make_snapshot()) == "1,000 100.00/s"


def test_format_snapshot_with_max():
    """Test summary with an expected total includes the ETA."""
    assert format_snapshot(make_snapshot(max_count=4000)) == "1,000/4,000 100.00/s eta 0:00:30"


def test_format_snapshot_unknown_rate():
    """Test summary when no time has elapsed."""
    assert format_snapshot(make_snapshot(max_count=4000, now=100.0)) == "1,000/4,000 ?/s eta ?"


def test_log_reporter(caplog):
    """Test reports are written to the given logger."""
    reporter = LogReporter(logging.getLogger("test.progress"))

    with caplog.at_level(logging.INFO, logger="test.progress"):
        reporter(make_snapshot())

    assert caplog.records[0].name == "test.progress"
    assert caplog.records[0].levelno == logging.INFO
    assert caplog.records[0].getMessage() == "Processed 1,000 100.00/s"


def test_log_reporter_default_logger(caplog):
    """Test the default logger and a custom level."""
    reporter = LogReporter(level=logging.WARNING)

    with caplog.at_level(logging.WARNING):
        reporter(make_snapshot())

    assert caplog.records[0].name == "progresslogger"
    assert caplog.records[0].levelno == logging.WARNING


def test_log_reporter_with_logger(clock, caplog):
    """Test a logger reporting through LogReporter every step."""
    progress = ProgressLogger(LogReporter(), step=2, max_count=4, clock=clock)

    with caplog.at_level(logging.INFO, logger="progresslogger"):
        for _ in range(4):
            clock.jump(1)
            progress.trigger()

    messages = [r.getMessage() for r in caplog.records if r.name == "progresslogger"]
    assert messages == [
        "Processed 2/4 2.00/s eta 0:00:01",
        "Processed 4/4 1.33/s eta 0:00:00",
    ]


def test_console_reporter():
    """Test reports are printed on the console."""
    output = io.StringIO()
    reporter = ConsoleReporter("Rows", console=Console(file=output, width=120))

    reporter(make_snapshot())

    assert output.getvalue().strip() == "Rows: 1,000 100.00/s"


def test_format_duration_infinite():
    """Test an endless ETA renders as unknown."""
    assert format_duration(float("inf")) == "?"


def test_console_reporter_label_with_brackets():
    """Test labels are printed literally, not read as markup."""
    output = io.StringIO()
    console = Console(file=output, width=120)

    ConsoleReporter("Rows [x]", console=console)(make_snapshot())
    ConsoleReporter("rows [/]", console=console)(make_snapshot())

    assert output.getvalue().splitlines() == [
        "Rows [x]: 1,000 100.00/s",
        "rows [/]: 1,000 100.00/s",
    ]
