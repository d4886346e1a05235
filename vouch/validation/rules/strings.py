"""String length and pattern rule."""

import re
from dataclasses import dataclass, field
from typing import Any, ClassVar

from vouch.core.contract import require
from vouch.validation.exceptions import RuleConfigurationError
from vouch.validation.messages import MessageKind, format_message
from vouch.validation.protocols import RuleKind
from vouch.validation.result import ValidationOutcome
from vouch.validation.rules.checks import require_count, require_flag


@dataclass(frozen=True)
class StringRule:
    """Validates that a value is a string of acceptable length and shape.

    Checks run in a fixed order and the first failure wins: presence, type,
    emptiness, minimum length, maximum length, pattern. The pattern must match
    the whole string (``re.fullmatch``), not just a prefix or substring.

    Attributes:
        min_length: Minimum length in characters (inclusive)
        max_length: Maximum length in characters (inclusive), or None for no limit
        pattern: Regular expression the whole value must match, or None
        allow_empty: Whether "" passes. Empty strings skip the length and
                    pattern checks entirely.

    Example:
        >>> rule = StringRule(min_length=2, max_length=5, pattern=r"[a-z]+")
        >>> rule.evaluate("abc").passed
        True
        >>> rule.evaluate("abc1").message
        'The string does not match the required pattern: [a-z]+'
    """

    kind: ClassVar[RuleKind] = RuleKind.STRING

    min_length: int = 0
    max_length: int | None = None
    pattern: str | None = None
    allow_empty: bool = False
    _regex: re.Pattern[str] | None = field(init=False, default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Check configuration and compile the pattern once.

        Raises:
            RuleConfigurationError: If a length is not a non-negative int,
                max_length is below min_length, allow_empty is not a bool, or
                the pattern is not a string, is blank or does not compile
        """
        require_count(self.kind, "min_length", self.min_length)
        if self.max_length is not None:
            require_count(self.kind, "max_length", self.max_length)
        require_flag(self.kind, "allow_empty", self.allow_empty)
        require(
            self.max_length is None or self.max_length >= self.min_length,
            lambda: RuleConfigurationError(
                f"Maximum length ({self.max_length}) must be >= minimum length ({self.min_length})",
                rule_kind=self.kind.value,
                parameter="max_length",
                value=self.max_length,
            ),
        )

        if self.pattern is None:
            return

        require(
            isinstance(self.pattern, str),
            lambda: RuleConfigurationError(
                f"Pattern must be a string, got {type(self.pattern).__name__}",
                rule_kind=self.kind.value,
                parameter="pattern",
                value=self.pattern,
            ),
        )
        require(
            bool(self.pattern.strip()),
            lambda: RuleConfigurationError(
                "Pattern must not be blank",
                rule_kind=self.kind.value,
                parameter="pattern",
                value=self.pattern,
            ),
        )

        try:
            regex = re.compile(self.pattern)
        except re.error as e:
            raise RuleConfigurationError(
                f"Invalid regular expression pattern: {self.pattern}",
                rule_kind=self.kind.value,
                parameter="pattern",
                value=self.pattern,
                reason=str(e),
            ) from e

        object.__setattr__(self, "_regex", regex)

    def evaluate(self, value: Any) -> ValidationOutcome:
        """Check ``value`` against the string constraints.

        Args:
            value: Value to validate

        Returns:
            ValidationOutcome; failures use VALUE_CANNOT_BE_NULL,
            VALUE_MUST_BE_OF_TYPE, STRING_CANNOT_BE_EMPTY, STRING_TOO_SHORT,
            STRING_TOO_LONG or STRING_DOES_NOT_MATCH_PATTERN
        """
        if value is None:
            return ValidationOutcome.failure(format_message(MessageKind.VALUE_CANNOT_BE_NULL))

        if not isinstance(value, str):
            return ValidationOutcome.failure(
                format_message(MessageKind.VALUE_MUST_BE_OF_TYPE, "str", type(value).__name__)
            )

        if value == "":
            if self.allow_empty:
                return ValidationOutcome.success()
            return ValidationOutcome.failure(format_message(MessageKind.STRING_CANNOT_BE_EMPTY))

        length = len(value)

        if length < self.min_length:
            return ValidationOutcome.failure(
                format_message(MessageKind.STRING_TOO_SHORT, length, self.min_length)
            )

        if self.max_length is not None and length > self.max_length:
            return ValidationOutcome.failure(
                format_message(MessageKind.STRING_TOO_LONG, length, self.max_length)
            )

        if self._regex is not None and self._regex.fullmatch(value) is None:
            return ValidationOutcome.failure(
                format_message(MessageKind.STRING_DOES_NOT_MATCH_PATTERN, self.pattern)
            )

        return ValidationOutcome.success()
