"""FormattedWriter: printf-style and space-joined line output.

Both operations are fire-and-forget: nothing raised while rendering or
writing reaches the caller. A template that does not fit its arguments
is written with %! markers instead, e.g. "%d items%!(EXTRA str=x)".
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from quietio.domain.exceptions import TemplateError
from quietio.domain.model.config import OutputConfig
from quietio.domain.model.display import to_display_string
from quietio.infrastructure.best_effort import best_effort_write

if TYPE_CHECKING:
    from collections.abc import Callable

    from quietio.domain.model.display import DisplayValue
    from quietio.domain.model.write_error import WriteError
    from quietio.domain.ports.destination import Destination

_log = logging.getLogger("quietio")


def format_template(template: str, args: tuple[DisplayValue, ...]) -> str:
    """Substitute args positionally into a %-style template.

    Args:
        template: printf-style template (%s, %d, %f, %%, ...).
        args: Positional arguments.

    Returns:
        Formatted text.

    Raises:
        TemplateError: If template and args do not fit together.
    """
    if not isinstance(template, str):
        reason = f"template must be str, not {type(template).__name__}"
        raise TemplateError(template, args, reason)
    try:
        return template % args
    except Exception as e:  # noqa: BLE001
        raise TemplateError(template, args, to_display_string(e) or type(e).__name__) from e


def render_bad_template(template: object, args: tuple[DisplayValue, ...]) -> str:
    """Render a template that failed to format, with %! markers.

    Extra arguments: "<template>%!(EXTRA str=x, int=3)".
    No arguments: "<template>%!(NOVERB)".
    """
    head = to_display_string(template)
    if not args:
        return f"{head}%!(NOVERB)"
    extra = ", ".join(f"{type(arg).__name__}={to_display_string(arg)}" for arg in args)
    return f"{head}%!(EXTRA {extra})"


def render_template(template: str, args: tuple[DisplayValue, ...]) -> str:
    """format_template(), falling back to render_bad_template(). Never raises."""
    try:
        return format_template(template, args)
    except TemplateError as e:
        _log.debug("rendering ill-formed template: %s", e.reason)
        return render_bad_template(template, args)


def join_line(args: tuple[DisplayValue, ...], config: OutputConfig) -> str:
    """Join display strings of args with separator and append terminator."""
    body = config.separator.join(to_display_string(arg) for arg in args)
    return f"{body}{config.line_terminator}"


class FormattedWriter:
    """Writes formatted text to caller-supplied destinations.

    Stateless per call: the destination is used only during the call.
    """

    def __init__(
        self,
        default: Destination | None = None,
        *,
        config: OutputConfig | None = None,
        on_error: Callable[[WriteError], object] | None = None,
    ) -> None:
        """Initialize writer.

        Args:
            default: Destination used when a call passes None.
            config: Output configuration. Uses defaults if None.
            on_error: Observer for swallowed write failures.
        """
        self._default = default
        self._config = config or OutputConfig()
        self._on_error = on_error

    @property
    def config(self) -> OutputConfig:
        """Active configuration."""
        return self._config

    def write_formatted(
        self,
        destination: Destination | None,
        template: str,
        *args: DisplayValue,
    ) -> None:
        """Write template % args verbatim, no trailing newline."""
        self._write(destination, render_template(template, args), "write_formatted")

    def write_line(self, destination: Destination | None, *args: DisplayValue) -> None:
        """Write args joined by separator, followed by line terminator."""
        self._write(destination, join_line(args, self._config), "write_line")

    def _write(self, destination: Destination | None, text: str, context: str) -> None:
        target = self._resolve(destination)
        if target is None:
            return
        best_effort_write(target, text, context=context, on_error=self._on_error)

    def _resolve(self, destination: Destination | None) -> Destination | None:
        """Pick destination: explicit, then default, then sys.stdout.

        sys.stdout is looked up per call. When it is None too (e.g. pythonw),
        there is nowhere to write and the call does nothing.
        """
        if destination is not None:
            return destination
        if self._default is not None:
            return self._default
        return sys.stdout
