"""Tests for domain/model/display.py."""

from decimal import Decimal

import pytest

from quietio.domain.model.display import SupportsDisplay, to_display_string


class _Point:
    def __str__(self) -> str:
        return "(1, 2)"


class TestToDisplayString:
    """Tests for to_display_string()."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("x", "x"),
            (42, "42"),
            (-7, "-7"),
            (1.5, "1.5"),
            (True, "True"),
            (False, "False"),
            (Decimal("3.10"), "3.10"),
        ],
    )
    def test_builtin_kinds(self, value: object, expected: str) -> None:
        assert to_display_string(value) == expected  # type: ignore[arg-type]

    def test_custom_str(self) -> None:
        assert to_display_string(_Point()) == "(1, 2)"

    def test_custom_type_supports_display(self) -> None:
        assert isinstance(_Point(), SupportsDisplay)


class _RaisingStr:
    def __str__(self) -> str:
        raise RuntimeError("no text")


class _NonStrStr:
    def __str__(self) -> str:
        return 7  # type: ignore[return-value]


class TestUnprintable:
    """Values whose str() cannot be used."""

    def test_raising_str(self) -> None:
        assert to_display_string(_RaisingStr()) == "<unprintable _RaisingStr>"

    def test_non_str_result(self) -> None:
        assert to_display_string(_NonStrStr()) == "<unprintable _NonStrStr>"
