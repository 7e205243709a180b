"""Tests for domain/model/outcome.py."""

import dataclasses

import pytest

from quietio.domain.model.outcome import Describable, Failure, Success, outcome_of
from tests.factories import (
    BrokenDescription,
    DescribedProblem,
    NonStrDescription,
    UnprintableError,
)


class TestSuccess:
    """Tests for Success."""

    def test_is_not_failure(self) -> None:
        assert Success().is_failure is False

    def test_equality(self) -> None:
        assert Success() == Success()


class TestFailure:
    """Tests for Failure."""

    def test_is_failure(self) -> None:
        assert Failure("x").is_failure is True

    def test_describe_returns_message(self) -> None:
        assert Failure("disk full").describe() == "disk full"

    def test_empty_message_allowed(self) -> None:
        assert Failure("").describe() == ""

    def test_non_str_message_raises(self) -> None:
        with pytest.raises(TypeError, match="message must be str"):
            Failure(42)  # type: ignore[arg-type]

    def test_is_frozen(self) -> None:
        failure = Failure("x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            failure.message = "y"  # type: ignore[misc]

    def test_satisfies_describable(self) -> None:
        assert isinstance(Failure("x"), Describable)


class TestOutcomeOf:
    """Tests for outcome_of() normalization."""

    def test_none_is_success(self) -> None:
        assert outcome_of(None) == Success()

    def test_success_passes_through(self) -> None:
        success = Success()
        assert outcome_of(success) is success

    def test_failure_passes_through(self) -> None:
        failure = Failure("x")
        assert outcome_of(failure) is failure

    def test_exception_becomes_failure(self) -> None:
        assert outcome_of(OSError("no such file")) == Failure("no such file")

    def test_exception_without_message(self) -> None:
        assert outcome_of(RuntimeError()) == Failure("")

    def test_describable_becomes_failure(self) -> None:
        assert outcome_of(DescribedProblem("quota exceeded")) == Failure("quota exceeded")

    @pytest.mark.parametrize("value", ["error text", 0, False, [], object()])
    def test_unknown_value_raises(self, value: object) -> None:
        with pytest.raises(TypeError, match="cannot interpret"):
            outcome_of(value)


class TestOutcomeOfUnrenderable:
    """Failure text falls back to a placeholder instead of raising."""

    def test_exception_with_raising_str(self) -> None:
        assert outcome_of(UnprintableError()) == Failure("<unprintable UnprintableError>")

    def test_describe_raises(self) -> None:
        assert outcome_of(BrokenDescription()) == Failure("<unprintable BrokenDescription>")

    def test_describe_returns_non_str(self) -> None:
        assert outcome_of(NonStrDescription()) == Failure("<unprintable NonStrDescription>")
