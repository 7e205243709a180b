"""Public functional API."""

from quietio.presentation.api.functions import report, write_formatted, write_line

__all__ = ["report", "write_formatted", "write_line"]
