"""Output configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """Configuration for reporters and writers.

    All fields have defaults matching the plain helpers.
    Immutable (frozen dataclass).

    Attributes:
        error_prefix: Text written before a failure message.
        separator: Text placed between line-writer arguments.
        line_terminator: Text ending every line-writer call.
        flush: Flush destination after writing an error report.
    """

    error_prefix: str = "ERROR: "
    separator: str = " "
    line_terminator: str = "\n"
    flush: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.error_prefix, str):
            raise TypeError("error_prefix must be str")
        if not isinstance(self.separator, str):
            raise TypeError("separator must be str")
        if not isinstance(self.line_terminator, str):
            raise TypeError("line_terminator must be str")
        if not self.line_terminator:
            raise ValueError("line_terminator must be non-empty")
