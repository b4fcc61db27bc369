"""
Unit tests for the Outcome type.

Run with: pytest tests/test_outcome.py -v
"""

import pytest
from adoption_api.domain.outcome import Failure, OutcomeError, Success


class TestSuccess:
    def test_success_is_not_failure(self):
        result = Success(42)
        assert result.is_failure() is False
        assert result.value == 42

    def test_success_matches_by_pattern(self):
        match Success("rex"):
            case Success(value):
                assert value == "rex"
            case Failure():
                pytest.fail("Success matched as Failure")


class TestFailure:
    def test_failure_is_failure(self):
        result = Failure("User does not exist")
        assert result.is_failure() is True
        assert result.reason == "User does not exist"

    def test_reading_value_of_failure_raises(self):
        """Callers must branch on is_failure() before reading value."""
        with pytest.raises(OutcomeError, match="User does not exist"):
            Failure("User does not exist").value

    def test_outcomes_are_immutable(self):
        result = Failure("nope")
        with pytest.raises(AttributeError):
            result.reason = "changed"
