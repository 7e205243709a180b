"""Reporters for failed outcomes."""

from quietio.application.reporters.error_reporter import ErrorReporter

__all__ = ["ErrorReporter"]
