"""Record of a swallowed write failure."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class WriteError:
    """Write failure observed and discarded by a best-effort write.

    Attributes:
        context: Which operation failed (e.g. "write", "flush")
        exc_type: Exception class name
        exc_msg: Exception message
    """

    context: str
    exc_type: str
    exc_msg: str

    @classmethod
    def from_exception(cls, context: str, exc: BaseException) -> WriteError:
        """Build record from caught exception."""
        return cls(context=context, exc_type=type(exc).__name__, exc_msg=str(exc))

    def __str__(self) -> str:
        """Format as [context] Type: message."""
        return f"[{self.context}] {self.exc_type}: {self.exc_msg}"
