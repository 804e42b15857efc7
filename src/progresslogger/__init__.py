"""Progress Logger - regular progress reporting for long-running loops."""

__version__ = "0.1.0"
__license__ = "GPL-3.0-or-later"

from progresslogger.core.config import TriggerConfig
from progresslogger.core.logger import ProgressLogger
from progresslogger.core.state import ReportSnapshot
from progresslogger.utils.errors import ConfigurationError
from progresslogger.utils.errors import ProgressLoggerError
from progresslogger.utils.progress import ConsoleReporter
from progresslogger.utils.progress import LogReporter


__all__ = [
    "ProgressLogger",
    "TriggerConfig",
    "ReportSnapshot",
    "ConfigurationError",
    "ProgressLoggerError",
    "LogReporter",
    "ConsoleReporter",
    "__version__",
]
