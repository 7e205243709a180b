"""Writers for formatted output."""

from quietio.application.writers.formatted_writer import (
    FormattedWriter,
    format_template,
    join_line,
    render_bad_template,
    render_template,
)

__all__ = [
    "FormattedWriter",
    "format_template",
    "join_line",
    "render_bad_template",
    "render_template",
]
