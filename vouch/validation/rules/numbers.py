"""Numeric range rule."""

import math
from dataclasses import dataclass
from decimal import Decimal
from numbers import Real
from typing import Any, ClassVar

from vouch.core.contract import require
from vouch.validation.exceptions import RuleConfigurationError
from vouch.validation.messages import MessageKind, format_message
from vouch.validation.protocols import RuleKind
from vouch.validation.result import ValidationOutcome
from vouch.validation.rules.checks import require_flag


@dataclass(frozen=True)
class RangeRule:
    """Validates that a numeric value lies within bounds.

    Every accepted input (int, float, Decimal, Fraction and other
    ``numbers.Real`` types) is converted to float before comparison, so
    integers beyond 2**53 are compared approximately.

    ``bool`` and ``str`` are rejected even though Python can coerce them.

    Attributes:
        minimum: Lower bound
        maximum: Upper bound
        minimum_is_exclusive: Whether a value equal to minimum fails
        maximum_is_exclusive: Whether a value equal to maximum fails

    Example:
        >>> rule = RangeRule(10, 100)
        >>> rule.evaluate(10).passed
        True
        >>> rule.evaluate(9).message
        'The value 9 must be greater than or equal to 10'
    """

    kind: ClassVar[RuleKind] = RuleKind.RANGE

    minimum: float
    maximum: float
    minimum_is_exclusive: bool = False
    maximum_is_exclusive: bool = False

    def __post_init__(self) -> None:
        require_flag(self.kind, "minimum_is_exclusive", self.minimum_is_exclusive)
        require_flag(self.kind, "maximum_is_exclusive", self.maximum_is_exclusive)

        for name in ("minimum", "maximum"):
            bound = getattr(self, name)
            require(
                _is_number(bound),
                lambda: RuleConfigurationError(
                    f"{name} must be a real number, got {bound!r}",
                    rule_kind=self.kind.value,
                    parameter=name,
                    value=bound,
                ),
            )

        require(
            _to_float(self.minimum) <= _to_float(self.maximum),
            lambda: RuleConfigurationError(
                f"Minimum ({self.minimum}) must be <= maximum ({self.maximum})",
                rule_kind=self.kind.value,
                parameter="minimum",
                value=self.minimum,
            ),
        )

    def evaluate(self, value: Any) -> ValidationOutcome:
        """Check ``value`` against the bounds, minimum first.

        Returns:
            ValidationOutcome; failures use VALUE_CANNOT_BE_NULL,
            VALUE_MUST_BE_NUMERIC, VALUE_TOO_SMALL[_INCLUSIVE] or
            VALUE_TOO_LARGE[_INCLUSIVE]
        """
        if value is None:
            return ValidationOutcome.failure(format_message(MessageKind.VALUE_CANNOT_BE_NULL))

        if not _is_number(value):
            return ValidationOutcome.failure(
                format_message(MessageKind.VALUE_MUST_BE_NUMERIC, value)
            )

        number = _to_float(value)
        minimum = _to_float(self.minimum)
        maximum = _to_float(self.maximum)

        if self.minimum_is_exclusive:
            if number <= minimum:
                return ValidationOutcome.failure(
                    format_message(MessageKind.VALUE_TOO_SMALL, _show(number), _show(minimum))
                )
        elif number < minimum:
            return ValidationOutcome.failure(
                format_message(MessageKind.VALUE_TOO_SMALL_INCLUSIVE, _show(number), _show(minimum))
            )

        if self.maximum_is_exclusive:
            if number >= maximum:
                return ValidationOutcome.failure(
                    format_message(MessageKind.VALUE_TOO_LARGE, _show(number), _show(maximum))
                )
        elif number > maximum:
            return ValidationOutcome.failure(
                format_message(MessageKind.VALUE_TOO_LARGE_INCLUSIVE, _show(number), _show(maximum))
            )

        return ValidationOutcome.success()


def _is_number(value: Any) -> bool:
    """True for real, non-NaN numbers other than bool."""
    if isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
        return False
    if isinstance(value, Decimal):
        return not value.is_nan()
    return not math.isnan(_to_float(value))


def _to_float(value: Any) -> float:
    try:
        return float(value)
    except OverflowError:
        # ints too large for a double
        return math.inf if value > 0 else -math.inf


def _show(number: float) -> str:
    # 9.0 -> "9", keeps 9.5 and inf as-is
    if number.is_integer():
        return str(int(number))
    return str(number)
