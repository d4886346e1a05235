"""Declarative validation for vouch.

This package provides rules that check single values (strings, numbers,
datetimes, UUIDs, collections), a ModelValidator that applies them to an
object's properties, declarative schema configuration, and row-wise
validation of polars DataFrames.
"""

# Declarative configuration
from vouch.validation.declarative import (
    get_configuration_schema,
    load_schema_config,
    parse_schema,
)

# Exceptions
from vouch.validation.exceptions import ConfigurationSchemaError, RuleConfigurationError

# Frame validation
from vouch.validation.frame import ValidationMode, validate_frame

# Messages
from vouch.validation.messages import MESSAGES, MessageKind, format_message

# Core protocols
from vouch.validation.protocols import Rule, RuleKind

# Reporting
from vouch.validation.report import ValidationReport, create_report
from vouch.validation.result import PropertyError, ValidationOutcome, ValidationResult

# Rules
from vouch.validation.rules import (
    NIL_UUID,
    NO_MAXIMUM_LIMIT,
    CollectionRule,
    DateOptions,
    DateRule,
    GuidRule,
    RangeRule,
    StringRule,
)

# Schemas and orchestration
from vouch.validation.schema import Display, ModelSchema, PropertyRule
from vouch.validation.validator import (
    ModelValidator,
    ensure_valid,
    validate,
    validate_collection,
)

__all__ = [
    # Core protocols and data structures
    "Rule",
    "RuleKind",
    "ValidationOutcome",
    "PropertyError",
    "ValidationResult",
    "ValidationReport",
    "create_report",
    # Messages
    "MessageKind",
    "MESSAGES",
    "format_message",
    # Rules
    "StringRule",
    "RangeRule",
    "DateRule",
    "DateOptions",
    "GuidRule",
    "NIL_UUID",
    "CollectionRule",
    "NO_MAXIMUM_LIMIT",
    # Schemas and orchestration
    "ModelSchema",
    "PropertyRule",
    "Display",
    "ModelValidator",
    "validate",
    "ensure_valid",
    "validate_collection",
    # Frame validation
    "validate_frame",
    "ValidationMode",
    # Declarative configuration
    "load_schema_config",
    "parse_schema",
    "get_configuration_schema",
    # Exceptions
    "RuleConfigurationError",
    "ConfigurationSchemaError",
]
