"""Custom exception classes for vouch error handling.

This module defines the two error channels used throughout vouch:
- ContractViolation: the caller misused the API (absent input, wrong type,
  malformed rule configuration). Always raised immediately.
- ValidationFailure: a value failed a declared rule and the caller asked for
  that to be raised (validate_collection, ensure_valid).

Both inherit from VouchError, but neither inherits from the other, so an
``except ContractViolation`` clause never swallows a ValidationFailure.
"""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from vouch.validation.result import ValidationResult


class VouchError(Exception):
    """Base exception for all vouch errors.

    Provides a common base class for all custom exceptions in vouch,
    enabling catch-all error handling when needed.
    """

    def __init__(self, message: str = "", context: dict[str, Any] | None = None) -> None:
        """Initialize the exception with a message and optional context.

        Args:
            message: Human-readable error description
            context: Optional dictionary of contextual information (property
                    names, rule kinds, offending values, etc.)
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """Return a formatted error message with context."""
        if not self.context:
            return self.message

        context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"{self.message} [{context_str}]"


class ContractViolation(VouchError):
    """Exception raised when a caller breaks the API contract.

    Contract violations signal a programming error rather than a data-quality
    issue. They are never folded into a ValidationResult.
    """

    def __init__(self, message: str = "", **context: Any) -> None:
        super().__init__(message, context)


class MissingValueError(ContractViolation, ValueError):
    """Exception raised when a required input is None.

    Raised for an absent instance or collection passed to the model
    validator, and for None values handed to rules that treat absence as
    misuse (DateRule, CollectionRule).

    Context typically includes:
        - parameter: Name of the missing argument
    """

    def __init__(self, message: str = "", parameter: str | None = None, **extra_context: Any) -> None:
        context: dict[str, Any] = {}
        if parameter is not None:
            context["parameter"] = parameter
        context.update(extra_context)

        super().__init__(message, **context)


class ValueTypeError(ContractViolation, TypeError):
    """Exception raised when a value has a type a rule cannot evaluate at all.

    Context typically includes:
        - expected_type: Name of the accepted type(s)
        - actual_type: Name of the type received
    """

    def __init__(
        self,
        message: str = "",
        expected_type: str | None = None,
        actual_type: str | None = None,
        **extra_context: Any,
    ) -> None:
        context: dict[str, Any] = {}
        if expected_type is not None:
            context["expected_type"] = expected_type
        if actual_type is not None:
            context["actual_type"] = actual_type
        context.update(extra_context)

        super().__init__(message, **context)


class ValidationFailure(VouchError):
    """Exception raised when validation failures are escalated to an error.

    Rules and ``ModelValidator.validate`` return failures as data. This
    exception is only raised by the entry points that promise a valid model
    or nothing: ``ModelValidator.validate_collection`` and
    ``ModelValidator.ensure_valid``.

    Attributes:
        result: The ValidationResult that triggered the failure
        index: Position of the failing item when validating a collection

    Example:
        >>> try:
        ...     validator.validate_collection(people)
        ... except ValidationFailure as e:
        ...     print(e.index, e.result.messages())
    """

    def __init__(
        self,
        message: str,
        result: "ValidationResult | None" = None,
        index: int | None = None,
        **extra_context: Any,
    ) -> None:
        context: dict[str, Any] = {}
        if index is not None:
            context["index"] = index
        context.update(extra_context)

        super().__init__(message, context)
        self.result = result
        self.index = index
