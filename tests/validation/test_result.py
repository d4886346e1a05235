"""Tests for ValidationOutcome and ValidationResult."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from vouch.validation.result import PropertyError, ValidationOutcome, ValidationResult

property_errors = st.builds(
    PropertyError,
    property_name=st.text(alphabet=st.characters(whitelist_categories=("Lu", "Ll")), min_size=1, max_size=10),
    error_message=st.text(min_size=1, max_size=40),
)


class TestValidationOutcome:

    def test_success_has_no_message(self):
        outcome = ValidationOutcome.success()
        assert outcome.passed
        assert outcome.message == ""

    def test_failure_has_message(self):
        outcome = ValidationOutcome.failure("bad")
        assert not outcome.passed
        assert outcome.message == "bad"

    def test_passing_outcome_cannot_carry_message(self):
        with pytest.raises(ValueError):
            ValidationOutcome(passed=True, message="oops")

    def test_failing_outcome_needs_message(self):
        with pytest.raises(ValueError):
            ValidationOutcome(passed=False)


class TestValidationResult:

    def test_empty_result_is_valid(self):
        result = ValidationResult()
        assert result.is_valid
        assert not result.has_errors()
        assert result.errors == []

    @given(st.lists(property_errors, max_size=5))
    def test_is_valid_matches_errors(self, errors):
        result = ValidationResult(errors=errors)
        assert result.is_valid == (len(errors) == 0)

    def test_messages_and_lookup(self):
        result = ValidationResult(errors=[
            PropertyError("name", "too short"),
            PropertyError("age", "too small"),
            PropertyError("name", "bad pattern"),
        ])
        assert result.messages() == ["too short", "too small", "bad pattern"]
        assert result.errors_for("name") == ["too short", "bad pattern"]
        assert result.error_message == "name: too short\nage: too small\nname: bad pattern"

    def test_format(self):
        result = ValidationResult(
            errors=[PropertyError("Name", "The string cannot be empty")],
            subject="Person",
        )
        assert result.format() == (
            "[Person] Validation failed\n"
            "Errors:\n"
            "  - Name: The string cannot be empty"
        )
        assert ValidationResult(subject="Person").format() == "[Person] Validation passed"

    def test_to_json(self):
        result = ValidationResult(errors=[PropertyError("age", "too small")], subject="Person")
        assert result.to_json() == {
            "subject": "Person",
            "is_valid": False,
            "errors": [{"property_name": "age", "error_message": "too small"}],
        }

    @given(st.lists(st.lists(property_errors, max_size=3), max_size=4))
    def test_combine_preserves_order(self, groups):
        results = [ValidationResult(errors=g) for g in groups]
        combined = ValidationResult.combine(results)
        assert combined.errors == [e for g in groups for e in g]
        assert combined.subject == "combined"
