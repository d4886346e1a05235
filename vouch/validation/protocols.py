"""Rule protocol definitions.

This module defines the Rule protocol that every validation rule implements.

All implementations must:
    - Validate their own configuration at construction time and raise
      RuleConfigurationError for contradictory settings
    - Be immutable after construction
    - Return the failure message inside the ValidationOutcome rather than
      storing it on the rule, so one rule instance can be shared freely
    - Be deterministic for a given value (date rules excepted, which compare
      against the current time)
"""

from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from vouch.validation.result import ValidationOutcome


class RuleKind(Enum):
    """The constraint families a rule can belong to."""

    STRING = "string"
    RANGE = "range"
    DATE = "date"
    GUID = "guid"
    COLLECTION = "collection"


@runtime_checkable
class Rule(Protocol):
    """Protocol for declarative validation rules.

    A rule checks a single value. Data that breaks the rule produces a failed
    ValidationOutcome; it is never raised. Input the rule cannot meaningfully
    evaluate may be rejected with a ContractViolation, as documented per rule.

    Example:
        >>> class EvenRule:
        ...     kind = RuleKind.RANGE
        ...
        ...     def evaluate(self, value: Any) -> ValidationOutcome:
        ...         if value % 2:
        ...             return ValidationOutcome.failure(f"{value} is odd")
        ...         return ValidationOutcome.success()
    """

    kind: RuleKind

    def evaluate(self, value: Any) -> "ValidationOutcome":
        """Evaluate ``value`` against the rule.

        Args:
            value: The property value to check. May be None.

        Returns:
            ValidationOutcome with ``passed`` and, on failure, the message.
        """
        ...
