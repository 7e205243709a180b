"""Destination port: a sink accepting text."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Destination(Protocol):
    """Anything that accepts a sequence of characters.

    TextIO, io.StringIO, open files and RichConsoleDestination all satisfy it.
    Caller owns the destination. quietio never closes or retains it.
    """

    def write(self, text: str, /) -> object:
        """Write text. Return value is ignored."""
        ...
