"""Tests for RangeRule."""

from decimal import Decimal
from fractions import Fraction

import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from vouch.validation.exceptions import RuleConfigurationError
from vouch.validation.messages import MessageKind, format_message
from vouch.validation.rules.numbers import RangeRule

finite = st.floats(allow_nan=False, allow_infinity=False, min_value=-1e9, max_value=1e9)


class TestConstruction:

    def test_minimum_above_maximum_rejected(self):
        with pytest.raises(RuleConfigurationError) as exc_info:
            RangeRule(100, 10)

        assert exc_info.value.context["rule_kind"] == "range"

    def test_nan_bound_rejected(self):
        with pytest.raises(RuleConfigurationError):
            RangeRule(float("nan"), 10)

    def test_non_numeric_bound_rejected(self):
        with pytest.raises(RuleConfigurationError):
            RangeRule("0", 10)  # type: ignore[arg-type]

    @pytest.mark.parametrize("flag", ["minimum_is_exclusive", "maximum_is_exclusive"])
    @pytest.mark.parametrize("value", ["false", "true", 1, None])
    def test_exclusivity_flags_must_be_bool(self, flag, value):
        with pytest.raises(RuleConfigurationError) as exc_info:
            RangeRule(0, 10, **{flag: value})

        assert exc_info.value.context["parameter"] == flag

    def test_infinite_bounds_allowed(self):
        rule = RangeRule(float("-inf"), float("inf"))
        assert rule.evaluate(10**6).passed


class TestInclusiveBounds:

    def test_minimum_is_inclusive(self):
        assert RangeRule(10, 100).evaluate(10).passed

    def test_below_minimum_message(self):
        outcome = RangeRule(10, 100).evaluate(9)
        assert not outcome.passed
        assert outcome.message == format_message(MessageKind.VALUE_TOO_SMALL_INCLUSIVE, 9, 10)
        assert "9" in outcome.message
        assert "10" in outcome.message

    def test_maximum_is_inclusive(self):
        assert RangeRule(10, 100).evaluate(100).passed

    def test_above_maximum_message(self):
        outcome = RangeRule(10, 100).evaluate(101)
        assert outcome.message == "The value 101 must be less than or equal to 100"

    def test_fractional_values_rendered(self):
        outcome = RangeRule(0, 1).evaluate(1.5)
        assert outcome.message == "The value 1.5 must be less than or equal to 1"


class TestExclusiveBounds:

    def test_exclusive_minimum_rejects_boundary(self):
        outcome = RangeRule(10, 100, minimum_is_exclusive=True).evaluate(10)
        assert not outcome.passed
        assert outcome.message == "The value 10 must be greater than 10"

    def test_exclusive_maximum_rejects_boundary(self):
        outcome = RangeRule(10, 100, maximum_is_exclusive=True).evaluate(100)
        assert outcome.message == "The value 100 must be less than 100"

    def test_minimum_checked_first(self):
        outcome = RangeRule(5, 5, minimum_is_exclusive=True, maximum_is_exclusive=True).evaluate(5)
        assert outcome.message == format_message(MessageKind.VALUE_TOO_SMALL, 5, 5)


class TestValueTypes:

    def test_none_fails(self):
        outcome = RangeRule(0, 1).evaluate(None)
        assert outcome.message == format_message(MessageKind.VALUE_CANNOT_BE_NULL)

    @pytest.mark.parametrize("value", ["5", b"5", True, [5], float("nan"), Decimal("NaN")])
    def test_non_numeric_fails(self, value):
        outcome = RangeRule(0, 10).evaluate(value)
        assert not outcome.passed
        assert outcome.message == format_message(MessageKind.VALUE_MUST_BE_NUMERIC, value)

    @pytest.mark.parametrize("value", [5, 5.0, Decimal("5.00"), Fraction(10, 2)])
    def test_numeric_types_accepted(self, value):
        assert RangeRule(0, 10).evaluate(value).passed

    def test_huge_int_compares_as_infinite(self):
        outcome = RangeRule(0, 10).evaluate(10**400)
        assert not outcome.passed


@given(finite, finite, finite)
def test_inclusive_range_property(a, b, value):
    """A value passes an inclusive range exactly when it lies between the bounds."""
    low, high = sorted((a, b))
    assume(low != high)
    rule = RangeRule(low, high)
    assert rule.evaluate(value).passed == (low <= value <= high)


@given(st.integers(min_value=-1000, max_value=1000))
def test_evaluation_is_idempotent(value):
    rule = RangeRule(-10, 10, minimum_is_exclusive=True)
    assert rule.evaluate(value) == rule.evaluate(value)
