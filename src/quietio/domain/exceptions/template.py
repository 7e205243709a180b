"""Template formatting exceptions."""

from __future__ import annotations

from quietio.domain.exceptions.base import QuietIOError


class TemplateError(QuietIOError, ValueError):
    """Template and positional arguments do not fit together.

    Raised before anything is written to the destination.

    Attributes:
        template: Format template as passed by caller
        arguments: Positional arguments as passed by caller
        reason: Formatter message
    """

    def __init__(self, template: object, args: tuple[object, ...], reason: str) -> None:
        # FAIL-FIRST: validate required parameters
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.template = template
        self.arguments = args
        self.reason = reason
        super().__init__(f"Cannot format {template!r} with {len(args)} argument(s): {reason}")
