"""vouch: precondition checks and declarative model validation.

Two utilities:

- ``require`` / ``require_else`` turn ``if not cond: raise Error(...)`` into
  a single call.
- Validation rules plus a ModelValidator that applies them to an object's
  properties and reports every failure.
"""

from vouch.core import (
    ContractViolation,
    MissingValueError,
    ValidationFailure,
    ValueTypeError,
    VouchError,
    require,
    require_else,
)
from vouch.validation import (
    CollectionRule,
    ConfigurationSchemaError,
    DateOptions,
    DateRule,
    Display,
    GuidRule,
    ModelSchema,
    ModelValidator,
    PropertyError,
    RangeRule,
    Rule,
    RuleConfigurationError,
    RuleKind,
    StringRule,
    ValidationMode,
    ValidationOutcome,
    ValidationReport,
    ValidationResult,
    ensure_valid,
    load_schema_config,
    parse_schema,
    validate,
    validate_collection,
    validate_frame,
)

__version__ = "0.1.0"

__all__ = [
    "require",
    "require_else",
    "VouchError",
    "ContractViolation",
    "MissingValueError",
    "ValueTypeError",
    "ValidationFailure",
    "RuleConfigurationError",
    "ConfigurationSchemaError",
    "Rule",
    "RuleKind",
    "StringRule",
    "RangeRule",
    "DateRule",
    "DateOptions",
    "GuidRule",
    "CollectionRule",
    "ValidationOutcome",
    "PropertyError",
    "ValidationResult",
    "ValidationReport",
    "ModelSchema",
    "Display",
    "ModelValidator",
    "validate",
    "ensure_valid",
    "validate_collection",
    "parse_schema",
    "load_schema_config",
    "validate_frame",
    "ValidationMode",
]
