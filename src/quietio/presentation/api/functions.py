"""Module-level helpers: report, write_formatted, write_line.

Each call builds a fresh reporter/writer with default configuration,
so nothing is retained between calls.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from quietio.application.reporters.error_reporter import ErrorReporter
from quietio.application.writers.formatted_writer import FormattedWriter

if TYPE_CHECKING:
    from quietio.domain.model.display import DisplayValue
    from quietio.domain.ports.destination import Destination


def report(outcome: object) -> None:
    """Write "ERROR: <message>" to stderr if outcome is a failure.

    Example:
        try:
            do_work()
        except OSError as exc:
            report(exc)
    """
    ErrorReporter().report(outcome)


def write_formatted(destination: Destination, template: str, *args: DisplayValue) -> None:
    """Write template % args to destination. Write failures are discarded."""
    FormattedWriter().write_formatted(destination, template, *args)


def write_line(destination: Destination, *args: DisplayValue) -> None:
    """Write args joined by spaces plus newline. Write failures are discarded."""
    FormattedWriter().write_line(destination, *args)
