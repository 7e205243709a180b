"""Best-effort write primitive.

Writes text to a destination and NEVER raises on write failure.
Failures are captured as WriteError, logged at DEBUG and handed to
an optional observer, then dropped.

Exception Algebra:
  - Success: returns True
  - Exception from destination: WriteError, returns False
  - Exception from observer: dropped, still returns False
  - KeyboardInterrupt / SystemExit: propagate (not write failures)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from quietio.domain.model.write_error import WriteError

if TYPE_CHECKING:
    from collections.abc import Callable

    from quietio.domain.ports.destination import Destination

_log = logging.getLogger("quietio")


def best_effort_write(
    destination: Destination,
    text: str,
    *,
    context: str = "write",
    on_error: Callable[[WriteError], object] | None = None,
) -> bool:
    """Write text to destination, discarding any write failure.

    Args:
        destination: Sink with write(str).
        text: Text written verbatim.
        context: Label recorded in WriteError.
        on_error: Called with WriteError if write failed.

    Returns:
        True if write succeeded, False if failure was swallowed.
    """
    try:
        destination.write(text)
    # BLE001: output is best-effort, any failure of the sink is discarded here.
    except Exception as exc:  # noqa: BLE001
        _discard(WriteError.from_exception(context, exc), on_error)
        return False
    return True


def best_effort_flush(
    destination: Destination,
    *,
    context: str = "flush",
    on_error: Callable[[WriteError], object] | None = None,
) -> bool:
    """Flush destination if it supports flush(), discarding any failure.

    Returns:
        True if flushed (or nothing to flush), False if failure was swallowed.
    """
    flush = getattr(destination, "flush", None)
    if flush is None:
        return True
    try:
        flush()
    except Exception as exc:  # noqa: BLE001
        _discard(WriteError.from_exception(context, exc), on_error)
        return False
    return True


def _discard(error: WriteError, on_error: Callable[[WriteError], object] | None) -> None:
    """Log and hand error to observer. Observer failures are dropped too."""
    _log.debug("discarded output failure %s", error)
    if on_error is None:
        return
    try:
        on_error(error)
    except Exception:  # noqa: BLE001
        _log.debug("error observer raised while handling %s", error, exc_info=True)
