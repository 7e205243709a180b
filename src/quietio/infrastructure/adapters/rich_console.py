"""Rich console adapter: Console -> Destination."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

if TYPE_CHECKING:
    from typing import Self, TextIO


class RichConsoleDestination:
    """Destination writing verbatim text to a rich Console's file.

    Console.print renders through rich.text.Text, which strips control
    codes and expands tabs. Text goes straight to console.file instead,
    so "\\t", "\\r" and "[bold]" arrive unchanged. Output is not recorded
    and bypasses an active `with console:` buffer.
    """

    def __init__(self, console: Console) -> None:
        """Initialize adapter.

        Args:
            console: Rich console whose file receives the text.
        """
        if console is None:
            raise TypeError("console must not be None")
        self._console = console

    @classmethod
    def from_file(cls, file: TextIO, *, width: int = 120) -> Self:
        """Build adapter over an uncoloured Console writing to file."""
        return cls(Console(file=file, color_system=None, width=width))

    @property
    def console(self) -> Console:
        """Wrapped console."""
        return self._console

    def write(self, text: str, /) -> None:
        """Write text as-is."""
        self._console.file.write(text)

    def flush(self) -> None:
        """Flush console's underlying file."""
        self._console.file.flush()
