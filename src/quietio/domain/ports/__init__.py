"""Domain ports."""

from quietio.domain.ports.destination import Destination

__all__ = ["Destination"]
