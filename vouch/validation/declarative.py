"""Declarative schema configuration support.

This module builds ModelSchema instances from Python dictionaries or YAML
documents, so property rules can live in configuration rather than code.

The declarative format supports:
- Property name and optional display name
- Rule type specification (e.g., "string", "range", "date")
- Parameters for each rule, passed to the rule constructor

Example configuration:
    {
        "properties": [
            {
                "name": "email",
                "display_name": "Email address",
                "rule": "string",
                "params": {"max_length": 254, "pattern": "[^@]+@[^@]+"}
            },
            {
                "name": "age",
                "rule": "range",
                "params": {"minimum": 0, "maximum": 150}
            },
            {
                "name": "joined",
                "rule": "date",
                "params": {"options": ["utc_only", "past_only"]}
            }
        ]
    }
"""

from functools import reduce
from typing import Any

import yaml

from vouch.validation.exceptions import ConfigurationSchemaError
from vouch.validation.protocols import Rule
from vouch.validation.rules.cardinality import CollectionRule
from vouch.validation.rules.dates import DateOptions, DateRule
from vouch.validation.rules.guids import GuidRule
from vouch.validation.rules.numbers import RangeRule
from vouch.validation.rules.strings import StringRule
from vouch.validation.schema import ModelSchema

# Registry mapping rule type names to rule classes
RULE_REGISTRY: dict[str, type[Rule]] = {
    "string": StringRule,
    "range": RangeRule,
    "date": DateRule,
    "guid": GuidRule,
    "uuid": GuidRule,  # Alias
    "collection": CollectionRule,
}

# Config spellings of DateOptions members
DATE_OPTION_NAMES: dict[str, DateOptions] = {
    "none": DateOptions.NONE,
    "utc_only": DateOptions.UTC_ONLY,
    "not_utc": DateOptions.NOT_UTC,
    "future_only": DateOptions.FUTURE_ONLY,
    "past_only": DateOptions.PAST_ONLY,
}


def load_schema_config(config_source: dict[str, Any] | str) -> dict[str, Any]:
    """Load schema configuration from a dict or a YAML document.

    Args:
        config_source: Either a dict containing the configuration, or a string
                      holding a YAML document (not a file path)

    Returns:
        Dictionary containing the validated configuration

    Raises:
        ConfigurationSchemaError: If the YAML does not parse or the
                                 configuration is invalid

    Example:
        >>> config = load_schema_config('''
        ... properties:
        ...   - name: email
        ...     rule: string
        ...     params: {max_length: 254}
        ... ''')
        >>> schema = parse_schema(config)
    """
    if isinstance(config_source, dict):
        _validate_config_schema(config_source)
        return config_source

    try:
        config = yaml.safe_load(config_source)
    except yaml.YAMLError as e:
        msg = f"Configuration is not valid YAML: {e}"
        raise ConfigurationSchemaError(msg, reason="Invalid YAML syntax") from e

    if not isinstance(config, dict):
        msg = f"Configuration must contain a YAML mapping, got: {type(config).__name__}"
        raise ConfigurationSchemaError(msg, reason="Invalid YAML structure")

    _validate_config_schema(config)

    return config


def parse_schema(config: dict[str, Any]) -> ModelSchema:
    """Parse declarative configuration and construct a ModelSchema.

    Built-in rule types:
        - string: StringRule(min_length, max_length, pattern, allow_empty)
        - range: RangeRule(minimum, maximum, minimum_is_exclusive, maximum_is_exclusive)
        - date: DateRule(options); options is a name or list of names
        - guid / uuid: GuidRule()
        - collection: CollectionRule(min_count, max_count)

    Args:
        config: Dictionary with a "properties" list of property specifications

    Returns:
        ModelSchema with one PropertyRule per entry, in configuration order

    Raises:
        ConfigurationSchemaError: If configuration is invalid or a rule
                                 rejects its parameters
    """
    _validate_config_schema(config)

    schema = ModelSchema()
    for idx, spec in enumerate(config["properties"]):
        rule = _construct_rule(spec, idx)
        schema.add(spec["name"], rule, display_name=spec.get("display_name"))

    return schema


def _validate_config_schema(config: dict[str, Any]) -> None:
    """Validate configuration against schema.

    Raises:
        ConfigurationSchemaError: If configuration violates schema
    """
    if not isinstance(config, dict):
        msg = f"Configuration must be a dictionary, got: {type(config).__name__}"
        raise ConfigurationSchemaError(msg, reason="Invalid configuration type")

    if "properties" not in config:
        msg = "Configuration must contain 'properties' key"
        raise ConfigurationSchemaError(msg, field="properties", reason="Required field missing")

    properties = config["properties"]
    if not isinstance(properties, list):
        msg = f"'properties' must be a list, got: {type(properties).__name__}"
        raise ConfigurationSchemaError(
            msg,
            field="properties",
            value=properties,
            reason="Invalid field type"
        )

    for idx, spec in enumerate(properties):
        _validate_property_spec(spec, idx)


def _validate_property_spec(spec: dict[str, Any], index: int) -> None:
    """Validate a single property specification."""
    if not isinstance(spec, dict):
        msg = f"Property at index {index} must be a dictionary, got: {type(spec).__name__}"
        raise ConfigurationSchemaError(
            msg,
            property_index=index,
            reason="Invalid property specification type"
        )

    for required in ("name", "rule"):
        if required not in spec:
            msg = f"Property at index {index} missing required '{required}' field"
            raise ConfigurationSchemaError(
                msg,
                property_index=index,
                field=required,
                reason="Required field missing"
            )

    for text_field in ("name", "rule", "display_name"):
        if text_field in spec and not isinstance(spec[text_field], str):
            msg = (
                f"Property '{text_field}' at index {index} must be a string, "
                f"got: {type(spec[text_field]).__name__}"
            )
            raise ConfigurationSchemaError(
                msg,
                property_index=index,
                field=text_field,
                value=spec[text_field],
                reason="Invalid field type"
            )

    rule_type = spec["rule"]
    if rule_type not in RULE_REGISTRY:
        available = ", ".join(sorted(RULE_REGISTRY.keys()))
        msg = (
            f"Unknown rule type at index {index}: '{rule_type}'. "
            f"Available types: {available}"
        )
        raise ConfigurationSchemaError(
            msg,
            property_index=index,
            rule_type=rule_type,
            field="rule",
            reason="Rule type not found in registry"
        )

    if "params" in spec and not isinstance(spec["params"], dict):
        msg = (
            f"Rule params at index {index} must be a dictionary, "
            f"got: {type(spec['params']).__name__}"
        )
        raise ConfigurationSchemaError(
            msg,
            property_index=index,
            rule_type=rule_type,
            field="params",
            value=spec["params"],
            reason="Invalid field type"
        )


def _construct_rule(spec: dict[str, Any], index: int) -> Rule:
    """Construct a rule instance from its specification.

    Raises:
        ConfigurationSchemaError: If rule construction fails
    """
    rule_type = spec["rule"]
    params = dict(spec.get("params") or {})
    rule_class = RULE_REGISTRY[rule_type]

    if rule_class is DateRule and "options" in params:
        params["options"] = _parse_date_options(params["options"], index)

    try:
        return rule_class(**params)
    except TypeError as e:
        msg = f"Invalid parameters for rule '{rule_type}' at index {index}: {e}"
        raise ConfigurationSchemaError(
            msg,
            property_index=index,
            rule_type=rule_type,
            field="params",
            value=params,
            reason=str(e)
        ) from e
    except ValueError as e:
        # RuleConfigurationError is a ValueError
        msg = f"Rule '{rule_type}' at index {index} rejected parameters: {e}"
        raise ConfigurationSchemaError(
            msg,
            property_index=index,
            rule_type=rule_type,
            field="params",
            value=params,
            reason=str(e)
        ) from e


def _parse_date_options(raw: Any, index: int) -> DateOptions:
    if isinstance(raw, DateOptions):
        return raw

    names = [raw] if isinstance(raw, str) else raw
    if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
        msg = f"Date options at index {index} must be a name or list of names"
        raise ConfigurationSchemaError(
            msg,
            property_index=index,
            rule_type="date",
            field="options",
            value=raw,
            reason="Invalid field type"
        )

    unknown = [n for n in names if n.lower() not in DATE_OPTION_NAMES]
    if unknown:
        available = ", ".join(sorted(DATE_OPTION_NAMES))
        msg = f"Unknown date options at index {index}: {unknown}. Available options: {available}"
        raise ConfigurationSchemaError(
            msg,
            property_index=index,
            rule_type="date",
            field="options",
            value=raw,
            reason="Unknown date option"
        )

    return reduce(
        lambda acc, name: acc | DATE_OPTION_NAMES[name.lower()], names, DateOptions.NONE
    )


def get_configuration_schema() -> dict[str, Any]:
    """Export configuration schema for documentation.

    Returns:
        Dictionary describing the configuration format in JSON Schema style
    """
    return {
        "type": "object",
        "required": ["properties"],
        "properties": {
            "properties": {
                "type": "array",
                "description": "Property rules, evaluated and reported in order",
                "items": {
                    "type": "object",
                    "required": ["name", "rule"],
                    "properties": {
                        "name": {
                            "type": "string",
                            "description": "Attribute or key the value is read from",
                        },
                        "display_name": {
                            "type": "string",
                            "description": "Name used in error reports",
                        },
                        "rule": {
                            "type": "string",
                            "description": "Rule type identifier",
                            "enum": sorted(RULE_REGISTRY.keys()),
                        },
                        "params": {
                            "type": "object",
                            "description": "Rule constructor parameters",
                        },
                    },
                },
            },
        },
    }
