"""Type checks shared by rule constructors.

Rule parameters often arrive from YAML or dicts, where ``"false"`` or
``"3"`` look plausible but are the wrong type. These helpers reject them
with RuleConfigurationError before any comparison is attempted.
"""

from typing import Any

from vouch.core.contract import require
from vouch.validation.exceptions import RuleConfigurationError
from vouch.validation.protocols import RuleKind


def require_flag(kind: RuleKind, name: str, value: Any) -> None:
    """Require ``value`` to be a real bool."""
    require(
        isinstance(value, bool),
        lambda: RuleConfigurationError(
            f"{name} must be a bool, got {type(value).__name__}",
            rule_kind=kind.value,
            parameter=name,
            value=value,
        ),
    )


def require_count(kind: RuleKind, name: str, value: Any) -> None:
    """Require ``value`` to be a non-negative int (bool excluded)."""
    require(
        isinstance(value, int) and not isinstance(value, bool),
        lambda: RuleConfigurationError(
            f"{name} must be an int, got {type(value).__name__}",
            rule_kind=kind.value,
            parameter=name,
            value=value,
        ),
    )
    require(
        value >= 0,
        lambda: RuleConfigurationError(
            f"{name} must be non-negative, got {value}",
            rule_kind=kind.value,
            parameter=name,
            value=value,
        ),
    )
