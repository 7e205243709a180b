"""Destination adapters for third-party consoles."""

from quietio.infrastructure.adapters.rich_console import RichConsoleDestination

__all__ = ["RichConsoleDestination"]
