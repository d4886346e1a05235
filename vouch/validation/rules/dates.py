"""Datetime rule.

This module provides the DateRule that checks a datetime's timezone and/or
its position relative to the current time.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Flag
from typing import Any, ClassVar

from vouch.core.contract import require
from vouch.core.exceptions import MissingValueError, ValueTypeError
from vouch.validation.exceptions import RuleConfigurationError
from vouch.validation.messages import MessageKind, format_message
from vouch.validation.protocols import RuleKind
from vouch.validation.result import ValidationOutcome

logger = logging.getLogger(__name__)


class DateOptions(Flag):
    """Constraints a DateRule can apply. Combine with ``|``.

    Not every combination is meaningful; see DateRule for the supported set.
    """

    NONE = 0
    UTC_ONLY = 1
    NOT_UTC = 2
    FUTURE_ONLY = 4
    PAST_ONLY = 8


# Supported option combinations -> (requires_utc, time check, failure message).
# requires_utc: True = must be UTC, False = must not be UTC, None = either.
# time check: "future", "past" or None.
_DISPATCH: dict[DateOptions, tuple[bool | None, str | None, MessageKind | None]] = {
    DateOptions.NONE: (None, None, None),
    DateOptions.UTC_ONLY: (True, None, MessageKind.DATE_MUST_BE_UTC),
    DateOptions.NOT_UTC: (False, None, MessageKind.DATE_MUST_NOT_BE_UTC),
    DateOptions.FUTURE_ONLY: (None, "future", MessageKind.DATE_MUST_BE_IN_FUTURE),
    DateOptions.PAST_ONLY: (None, "past", MessageKind.DATE_MUST_BE_IN_PAST),
    DateOptions.UTC_ONLY | DateOptions.FUTURE_ONLY: (
        True, "future", MessageKind.DATE_MUST_BE_UTC_AND_IN_FUTURE,
    ),
    DateOptions.UTC_ONLY | DateOptions.PAST_ONLY: (
        True, "past", MessageKind.DATE_MUST_BE_UTC_AND_IN_PAST,
    ),
    DateOptions.NOT_UTC | DateOptions.FUTURE_ONLY: (
        False, "future", MessageKind.DATE_MUST_BE_NON_UTC_AND_IN_FUTURE,
    ),
    DateOptions.NOT_UTC | DateOptions.PAST_ONLY: (
        False, "past", MessageKind.DATE_MUST_BE_NON_UTC_AND_IN_PAST,
    ),
}


@dataclass(frozen=True)
class DateRule:
    """Validates a datetime's timezone and/or its relation to now.

    A datetime counts as UTC when it is timezone-aware with a zero UTC offset.
    Naive datetimes, and aware ones with any other offset, count as not UTC.
    Future and past are strict: a value equal to now is neither.

    Aware values are compared with ``datetime.now(timezone.utc)`` and naive
    values with the local ``datetime.now()``.

    Supported options are NONE, UTC_ONLY, NOT_UTC, FUTURE_ONLY, PAST_ONLY and
    each of UTC_ONLY/NOT_UTC combined with one of FUTURE_ONLY/PAST_ONLY. Any
    other combination, e.g. ``FUTURE_ONLY | PAST_ONLY``, makes every
    evaluation fail with DATE_VALIDATION_FAILED.

    Unlike the other rules, a None or non-datetime value is treated as misuse
    and raised rather than reported.

    Attributes:
        options: Constraints to apply (default UTC_ONLY)

    Example:
        >>> rule = DateRule(DateOptions.UTC_ONLY | DateOptions.FUTURE_ONLY)
        >>> rule.evaluate(datetime.now(timezone.utc) + timedelta(days=1)).passed
        True
    """

    kind: ClassVar[RuleKind] = RuleKind.DATE

    options: DateOptions = DateOptions.UTC_ONLY

    def __post_init__(self) -> None:
        require(
            isinstance(self.options, DateOptions),
            lambda: RuleConfigurationError(
                f"options must be DateOptions, got {self.options!r}",
                rule_kind=self.kind.value,
                parameter="options",
                value=self.options,
            ),
        )
        if self.options not in _DISPATCH:
            logger.warning(
                "DateRule built with unsupported options %s; every evaluation will fail",
                self.options,
            )

    def evaluate(self, value: Any) -> ValidationOutcome:
        """Check ``value`` against the configured options.

        Args:
            value: A ``datetime.datetime``

        Returns:
            ValidationOutcome with the message matching the option combination

        Raises:
            MissingValueError: If value is None
            ValueTypeError: If value is not a datetime
        """
        require(
            value is not None,
            MissingValueError,
            "A value must be supplied to the DateRule",
        )
        require(
            isinstance(value, datetime),
            lambda: ValueTypeError(
                f"The value supplied to the DateRule ({value!r}) was not a datetime",
                expected_type="datetime",
                actual_type=type(value).__name__,
            ),
        )

        spec = _DISPATCH.get(self.options)
        if spec is None:
            return ValidationOutcome.failure(format_message(MessageKind.DATE_VALIDATION_FAILED))

        requires_utc, when, message = spec

        passed = True
        if requires_utc is not None:
            passed = _is_utc(value) == requires_utc
        if passed and when is not None:
            now = _now_for(value)
            passed = value > now if when == "future" else value < now

        if passed:
            return ValidationOutcome.success()
        return ValidationOutcome.failure(format_message(message))


def _is_utc(value: datetime) -> bool:
    offset = value.utcoffset()
    return offset is not None and offset == timedelta(0)


def _now_for(value: datetime) -> datetime:
    if value.utcoffset() is None:
        return datetime.now()
    return datetime.now(timezone.utc)
