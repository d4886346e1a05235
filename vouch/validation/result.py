"""Validation outcome data structures.

This module defines the values returned by validation:

- ValidationOutcome: the pass/fail verdict of one rule against one value
- PropertyError: one failed rule, attributed to a property
- ValidationResult: every PropertyError collected for one model instance

All of them are created fresh per call and owned by the caller.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ValidationOutcome:
    """Verdict of a single rule evaluation.

    ``message`` is empty if and only if ``passed`` is True. Use the
    ``success`` and ``failure`` constructors rather than building outcomes by
    hand.

    Attributes:
        passed: Whether the value satisfied the rule
        message: Failure message from the catalog, or "" on success

    Example:
        >>> StringRule(min_length=3).evaluate("ab")
        ValidationOutcome(passed=False, message='The string length of 2 is less than the minimum required of 3')
    """

    passed: bool
    message: str = ""

    def __post_init__(self) -> None:
        if self.passed and self.message:
            raise ValueError("A passing outcome cannot carry a message")
        if not self.passed and not self.message:
            raise ValueError("A failing outcome must carry a message")

    @classmethod
    def success(cls) -> "ValidationOutcome":
        """Return a passing outcome."""
        return cls(passed=True)

    @classmethod
    def failure(cls, message: str) -> "ValidationOutcome":
        """Return a failing outcome with ``message``."""
        return cls(passed=False, message=message)


@dataclass(frozen=True)
class PropertyError:
    """A rule failure attributed to one property.

    Attributes:
        property_name: Display name of the property that failed
        error_message: Message produced by the failing rule
    """

    property_name: str
    error_message: str

    def __str__(self) -> str:
        return f"{self.property_name}: {self.error_message}"


@dataclass
class ValidationResult:
    """Aggregate outcome of validating one model instance.

    ``is_valid`` is derived from ``errors`` so the two can never disagree.
    Errors are kept in the order the properties were declared.

    Attributes:
        errors: Failures in property declaration order
        subject: Label for what was validated (model class name, row label).
                Used when formatting reports.

    Example:
        >>> result = ValidationResult(
        ...     errors=[PropertyError("Name", "The string cannot be empty")],
        ...     subject="Person",
        ... )
        >>> result.is_valid
        False
        >>> print(result.format())
        [Person] Validation failed
        Errors:
          - Name: The string cannot be empty
    """

    errors: list[PropertyError] = field(default_factory=list)
    subject: str = ""

    @property
    def is_valid(self) -> bool:
        """True when no property failed."""
        return len(self.errors) == 0

    def has_errors(self) -> bool:
        """Check if validation failed with errors."""
        return len(self.errors) > 0

    def messages(self) -> list[str]:
        """Return the raw error messages in order."""
        return [error.error_message for error in self.errors]

    def errors_for(self, property_name: str) -> list[str]:
        """Return the messages recorded against a single property."""
        return [
            error.error_message
            for error in self.errors
            if error.property_name == property_name
        ]

    @property
    def error_message(self) -> str:
        """All errors as ``name: message`` lines, joined by newlines."""
        return "\n".join(str(error) for error in self.errors)

    def format(self) -> str:
        """Format result as human-readable string.

        Returns:
            Header line with the subject and status, followed by one line per
            error when validation failed.
        """
        status = "passed" if self.is_valid else "failed"
        lines = [f"[{self.subject}] Validation {status}"]

        if self.has_errors():
            lines.append("Errors:")
            for error in self.errors:
                lines.append(f"  - {error}")

        return "\n".join(lines)

    def to_json(self) -> dict[str, Any]:
        """Export the result as a JSON-serialisable dictionary."""
        return {
            "subject": self.subject,
            "is_valid": self.is_valid,
            "errors": [
                {"property_name": e.property_name, "error_message": e.error_message}
                for e in self.errors
            ],
        }

    @staticmethod
    def combine(results: list["ValidationResult"], subject: str = "combined") -> "ValidationResult":
        """Combine multiple results into one, preserving error order.

        Args:
            results: Results to merge, in the order their errors should appear
            subject: Subject label for the combined result

        Returns:
            ValidationResult holding every error from every input
        """
        all_errors: list[PropertyError] = []
        for result in results:
            all_errors.extend(result.errors)

        return ValidationResult(errors=all_errors, subject=subject)
