"""ErrorReporter: failed outcome -> "ERROR: <message>" on stderr."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from quietio.domain.model.config import OutputConfig
from quietio.domain.model.outcome import outcome_of
from quietio.infrastructure.best_effort import best_effort_flush, best_effort_write

if TYPE_CHECKING:
    from collections.abc import Callable

    from quietio.domain.model.write_error import WriteError
    from quietio.domain.ports.destination import Destination


class ErrorReporter:
    """Reports failed outcomes on the error stream.

    Success produces no output at all. Failure writes the prefix and
    message with no trailing newline. Reporting never raises because a
    write failed: a broken or closed stream is silently ignored.
    """

    def __init__(
        self,
        stream: Destination | None = None,
        *,
        config: OutputConfig | None = None,
        on_error: Callable[[WriteError], object] | None = None,
    ) -> None:
        """Initialize reporter.

        Args:
            stream: Error stream. None = sys.stderr looked up per call.
            config: Output configuration. Uses defaults if None.
            on_error: Observer for swallowed write failures.
        """
        self._stream = stream
        self._config = config or OutputConfig()
        self._on_error = on_error

    @property
    def config(self) -> OutputConfig:
        """Active configuration."""
        return self._config

    def report(self, outcome: object) -> None:
        """Report outcome if it is a failure.

        Args:
            outcome: Success/Failure, exception, None or Describable.

        Raises:
            TypeError: If outcome cannot be interpreted (caller misuse).
        """
        resolved = outcome_of(outcome)
        if not resolved.is_failure:
            return

        stream = self._stream if self._stream is not None else sys.stderr
        if stream is None:
            # No stderr at all (e.g. pythonw): nothing to report to.
            return

        text = f"{self._config.error_prefix}{resolved.describe()}"
        if best_effort_write(stream, text, context="report", on_error=self._on_error):
            if self._config.flush:
                best_effort_flush(stream, on_error=self._on_error)
