"""Display values accepted by line writers."""

from __future__ import annotations

from typing import Protocol, TypeAlias, runtime_checkable


@runtime_checkable
class SupportsDisplay(Protocol):
    """Anything with a textual representation."""

    def __str__(self) -> str: ...


DisplayValue: TypeAlias = int | float | str | bool | SupportsDisplay


def unprintable(value: object) -> str:
    """Placeholder text for a value whose str() failed."""
    return f"<unprintable {type(value).__name__}>"


def to_display_string(value: DisplayValue) -> str:
    """Convert value to its display text.

    str(value), or "<unprintable Type>" if __str__ raises or returns non-str.
    """
    try:
        text = str(value)
    except Exception:  # noqa: BLE001
        return unprintable(value)
    return text if isinstance(text, str) else unprintable(value)
