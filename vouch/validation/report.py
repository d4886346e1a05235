"""ValidationReport aggregation.

This module defines the ValidationReport class that aggregates the
ValidationResults of many instances (for example, every row of a frame).
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from vouch.validation.result import ValidationResult


@dataclass
class ValidationReport:
    """Aggregated report of validation results.

    Attributes:
        results: One ValidationResult per validated instance, in order
        timestamp: When validation was performed
        total: Number of instances validated
        passed: Number of instances without errors
        failed: Number of instances with errors

    Example:
        >>> report = create_report([result1, result2])
        >>> print(report.summary())
        Validation Summary: 1/2 passed, 1 failed
    """

    results: list[ValidationResult]
    timestamp: datetime
    total: int
    passed: int
    failed: int

    def is_valid(self) -> bool:
        """Check if every instance passed."""
        return self.failed == 0

    def failures(self) -> list[ValidationResult]:
        """Return only the results that have errors."""
        return [r for r in self.results if r.has_errors()]

    def summary(self) -> str:
        """Generate summary string."""
        return f"Validation Summary: {self.passed}/{self.total} passed, {self.failed} failed"

    def to_json(self) -> dict[str, Any]:
        """Export report as JSON for programmatic access.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        return {
            "timestamp": self.timestamp.isoformat(),
            "summary": {
                "total": self.total,
                "passed": self.passed,
                "failed": self.failed,
                "is_valid": self.is_valid(),
            },
            "results": [r.to_json() for r in self.results],
        }

    def format(self, errors_only: bool = False) -> str:
        """Format report as human-readable text.

        Args:
            errors_only: Only list results that have errors

        Returns:
            Formatted string with summary and results

        Example:
            >>> print(report.format(errors_only=True))
            Validation Report (2024-01-15 10:30:00)
            ============================================================
            Validation Summary: 1/2 passed, 1 failed

            [row 1] Validation failed
            Errors:
              - name: The string cannot be empty
        """
        lines = [
            f"Validation Report ({self.timestamp.strftime('%Y-%m-%d %H:%M:%S')})",
            "=" * 60,
            self.summary(),
            "",
        ]

        results = self.failures() if errors_only else self.results
        for result in results:
            lines.append(result.format())
            lines.append("")

        return "\n".join(lines)


def create_report(results: list[ValidationResult]) -> ValidationReport:
    """Create ValidationReport from a list of ValidationResults.

    Calculates summary statistics and stamps the report with the current
    UTC time.
    """
    passed = sum(1 for r in results if r.is_valid)

    return ValidationReport(
        results=results,
        timestamp=datetime.now(timezone.utc),
        total=len(results),
        passed=passed,
        failed=len(results) - passed,
    )
