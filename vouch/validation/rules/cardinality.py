"""Collection cardinality rule.

This module provides the CollectionRule that checks how many elements an
iterable holds.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, ClassVar

from vouch.core.contract import require
from vouch.core.exceptions import MissingValueError, ValueTypeError
from vouch.validation.exceptions import RuleConfigurationError
from vouch.validation.messages import MessageKind, format_message
from vouch.validation.protocols import RuleKind
from vouch.validation.result import ValidationOutcome
from vouch.validation.rules.checks import require_count

# max_count value meaning "no upper bound"
NO_MAXIMUM_LIMIT = 0

DEFAULT_MINIMUM_COUNT = 1


@dataclass(frozen=True)
class CollectionRule:
    """Validates the number of elements in a collection.

    Elements are counted by iterating the whole value, so generators and
    other one-shot iterators are consumed. ``str`` and ``bytes`` are not
    treated as collections.

    A None or non-iterable value is treated as misuse and raised rather than
    reported, mirroring DateRule.

    Attributes:
        min_count: Minimum number of elements (inclusive, default 1)
        max_count: Maximum number of elements (inclusive). NO_MAXIMUM_LIMIT (0)
                  means unbounded.

    Example:
        >>> rule = CollectionRule(min_count=1, max_count=5)
        >>> rule.evaluate([1, 2, 3]).passed
        True
        >>> rule.evaluate([]).message
        'The collection length of 0 is less than the minimum required of 1'
    """

    kind: ClassVar[RuleKind] = RuleKind.COLLECTION

    min_count: int = DEFAULT_MINIMUM_COUNT
    max_count: int = NO_MAXIMUM_LIMIT

    def __post_init__(self) -> None:
        require_count(self.kind, "min_count", self.min_count)
        require_count(self.kind, "max_count", self.max_count)
        require(
            self.max_count == NO_MAXIMUM_LIMIT or self.max_count >= self.min_count,
            lambda: RuleConfigurationError(
                f"Maximum count ({self.max_count}) must be >= minimum count ({self.min_count})",
                rule_kind=self.kind.value,
                parameter="max_count",
                value=self.max_count,
            ),
        )

    @property
    def is_bounded(self) -> bool:
        return self.max_count != NO_MAXIMUM_LIMIT

    def evaluate(self, value: Any) -> ValidationOutcome:
        """Count the elements of ``value`` and compare against the limits.

        Raises:
            MissingValueError: If value is None
            ValueTypeError: If value is not iterable, or is a str/bytes
        """
        require(
            value is not None,
            MissingValueError,
            format_message(MessageKind.COLLECTION_CANNOT_BE_NULL),
        )
        require(
            isinstance(value, Iterable) and not isinstance(value, (str, bytes, bytearray)),
            lambda: ValueTypeError(
                f"The value supplied to the CollectionRule ({type(value).__name__}) is not a collection",
                expected_type="Iterable",
                actual_type=type(value).__name__,
            ),
        )

        count = sum(1 for _ in value)

        if count < self.min_count:
            return ValidationOutcome.failure(
                format_message(MessageKind.COLLECTION_TOO_SMALL, count, self.min_count)
            )

        if not self.is_bounded or count <= self.max_count:
            return ValidationOutcome.success()

        return ValidationOutcome.failure(
            format_message(MessageKind.COLLECTION_TOO_LARGE, count, self.max_count)
        )
