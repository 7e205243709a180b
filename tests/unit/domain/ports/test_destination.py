"""Tests for domain/ports/destination.py."""

import io
import sys

from quietio.domain.ports.destination import Destination
from tests.factories import FailingDestination, RecordingDestination


class TestDestination:
    """Structural checks for Destination protocol."""

    def test_string_io_is_destination(self) -> None:
        assert isinstance(io.StringIO(), Destination)

    def test_stderr_is_destination(self) -> None:
        assert isinstance(sys.stderr, Destination)

    def test_custom_sinks_are_destinations(self) -> None:
        assert isinstance(RecordingDestination(), Destination)
        assert isinstance(FailingDestination(), Destination)

    def test_object_without_write_is_not_destination(self) -> None:
        assert not isinstance(object(), Destination)
