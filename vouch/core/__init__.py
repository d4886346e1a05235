"""Core building blocks shared by every vouch module."""

from vouch.core.contract import require, require_else
from vouch.core.exceptions import (
    ContractViolation,
    MissingValueError,
    ValidationFailure,
    ValueTypeError,
    VouchError,
)

__all__ = [
    "require",
    "require_else",
    "VouchError",
    "ContractViolation",
    "MissingValueError",
    "ValueTypeError",
    "ValidationFailure",
]
