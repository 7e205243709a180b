"""Base exceptions for quietio domain."""


class QuietIOError(Exception):
    """Root exception for all quietio errors.

    Write failures are never raised. Only caller misuse
    (e.g. an ill-formed template) surfaces as a QuietIOError.
    """
