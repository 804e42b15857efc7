"""Basic usage examples for Progress Logger."""

import logging
import time

from progresslogger import ConsoleReporter, LogReporter, ProgressLogger


def example_step():
    """Example: Report every 1000 rows."""
    def report(state):
        print(f"Processed {state.count} rows")

    progress = ProgressLogger(report, step=1000)
    for _ in range(5000):
        progress.trigger()


def example_time_and_eta():
    """Example: Log every 2 seconds with an ETA."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

    progress = ProgressLogger(LogReporter(), seconds=2, max_count=50)
    for _ in range(50):
        time.sleep(0.1)
        progress.trigger()


def example_track():
    """Example: Wrap an iterable and print reports with rich."""
    progress = ProgressLogger(ConsoleReporter("Items"), step=10, max_count=30)

    for item in progress.track(range(30)):
        time.sleep(0.05)


def example_custom_statistics():
    """Example: Use the snapshot statistics directly."""
    def report(state):
        rate = state.short_rate
        if rate is not None:
            print(f"{state.count_delta} items in {state.time_delta:.1f}s ({rate:.1f}/s)")

    progress = ProgressLogger(report, step=20)
    progress.start()
    for _ in range(100):
        time.sleep(0.01)
        progress.trigger()


if __name__ == '__main__':
    print("Progress Logger Examples")
    print("=" * 50)
    example_step()
    example_track()
