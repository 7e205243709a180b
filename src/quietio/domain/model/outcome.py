"""Outcome value objects: success or a described failure."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, TypeAlias, runtime_checkable

from quietio.domain.model.display import to_display_string, unprintable


@runtime_checkable
class Describable(Protocol):
    """Anything that can describe a failure in human-readable text."""

    def describe(self) -> str:
        """Return human-readable failure message."""
        ...


@dataclass(frozen=True, slots=True)
class Success:
    """Outcome carrying no data."""

    @property
    def is_failure(self) -> bool:
        """Success is never a failure."""
        return False


@dataclass(frozen=True, slots=True)
class Failure:
    """Outcome carrying a human-readable message.

    Attributes:
        message: Failure text (may be empty)
    """

    message: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.message, str):
            raise TypeError(f"message must be str, got {type(self.message).__name__}")

    @property
    def is_failure(self) -> bool:
        """Failure is always a failure."""
        return True

    def describe(self) -> str:
        """Return failure message."""
        return self.message


Outcome: TypeAlias = Success | Failure


def outcome_of(value: object) -> Outcome:
    """Normalize what a caller has in hand into an Outcome.

    None -> Success, exception -> Failure(str(exc)),
    Describable -> Failure(describe()). Outcomes pass through.
    A message that cannot be rendered becomes "<unprintable Type>".

    Args:
        value: None, exception, Outcome or Describable.

    Returns:
        Success or Failure.

    Raises:
        TypeError: If value is none of the above.
    """
    match value:
        case None:
            return Success()
        case Success() | Failure():
            return value
        case BaseException():
            return Failure(to_display_string(value))
        case Describable():
            return Failure(_describe(value))
    raise TypeError(f"cannot interpret {type(value).__name__} as outcome")


def _describe(value: Describable) -> str:
    """describe(), or "<unprintable Type>" if it raises or returns non-str."""
    try:
        text = value.describe()
    except Exception:  # noqa: BLE001
        return unprintable(value)
    return text if isinstance(text, str) else unprintable(value)
