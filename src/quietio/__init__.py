"""quietio - best-effort output and error reporting."""

import logging

__version__ = "0.1.0"

from quietio.application.reporters.error_reporter import ErrorReporter
from quietio.application.writers.formatted_writer import FormattedWriter
from quietio.domain.exceptions import QuietIOError, TemplateError
from quietio.domain.model import Failure, OutputConfig, Success, WriteError, outcome_of
from quietio.infrastructure.adapters.rich_console import RichConsoleDestination
from quietio.presentation.api import report, write_formatted, write_line

logging.getLogger("quietio").addHandler(logging.NullHandler())

__all__ = [
    "ErrorReporter",
    "Failure",
    "FormattedWriter",
    "OutputConfig",
    "QuietIOError",
    "RichConsoleDestination",
    "Success",
    "TemplateError",
    "WriteError",
    "__version__",
    "outcome_of",
    "report",
    "write_formatted",
    "write_line",
]
