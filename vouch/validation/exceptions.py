"""Validation-specific exceptions.

Both exceptions are contract violations: they report a mistake in how rules
or schemas were declared, never a data-quality problem.
"""

from typing import Any

from vouch.core.exceptions import ContractViolation


class RuleConfigurationError(ContractViolation, ValueError):
    """Exception raised when a rule is constructed with invalid parameters.

    Context typically includes:
        - rule_kind: Kind of rule being constructed
        - parameter: Name of the invalid parameter
        - value: Invalid value provided
        - reason: Why the value is invalid

    Example:
        >>> raise RuleConfigurationError(
        ...     "max_length (2) must be >= min_length (5)",
        ...     rule_kind="string",
        ...     parameter="max_length",
        ...     value=2,
        ... )
    """

    def __init__(
        self,
        message: str = "",
        rule_kind: str | None = None,
        parameter: str | None = None,
        value: Any = None,
        reason: str | None = None,
        **extra_context: Any,
    ) -> None:
        context: dict[str, Any] = {}
        if rule_kind is not None:
            context["rule_kind"] = rule_kind
        if parameter is not None:
            context["parameter"] = parameter
        if value is not None:
            context["value"] = value
        if reason is not None:
            context["reason"] = reason
        context.update(extra_context)

        super().__init__(message, **context)


class ConfigurationSchemaError(ContractViolation):
    """Exception raised when a declarative schema configuration is invalid.

    This exception is raised when building a ModelSchema from a dict or YAML
    document that violates the configuration format (missing required fields,
    unknown rule types, parameters the rule rejects).

    Context typically includes:
        - property_index: Index of the property entry in the configuration
        - rule_type: Rule type specified
        - field: Configuration field that is invalid
        - value: Invalid value provided
        - reason: Why the configuration is invalid

    Example:
        >>> raise ConfigurationSchemaError(
        ...     "Unknown rule type: 'email'",
        ...     property_index=0,
        ...     rule_type="email",
        ...     field="rule",
        ...     reason="Rule type not found in registry"
        ... )
    """

    def __init__(
        self,
        message: str = "",
        property_index: int | None = None,
        rule_type: str | None = None,
        field: str | None = None,
        value: Any = None,
        reason: str | None = None,
        **extra_context: Any,
    ) -> None:
        context: dict[str, Any] = {}
        if property_index is not None:
            context["property_index"] = property_index
        if rule_type is not None:
            context["rule_type"] = rule_type
        if field is not None:
            context["field"] = field
        if value is not None:
            context["value"] = value
        if reason is not None:
            context["reason"] = reason
        context.update(extra_context)

        super().__init__(message, **context)
