"""ModelValidator orchestration.

This module defines the ModelValidator that applies a ModelSchema to model
instances, plus module-level shortcuts backed by an annotation-driven
validator.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from vouch.core.contract import require
from vouch.core.exceptions import ContractViolation, MissingValueError, ValidationFailure
from vouch.validation.result import PropertyError, ValidationResult
from vouch.validation.schema import ModelSchema

logger = logging.getLogger(__name__)


class ModelValidator:
    """Applies property rules to model instances.

    ``validate`` checks every property and collects every failure; it never
    stops early and never raises for data failures. ``validate_collection``
    and ``ensure_valid`` turn failures into a raised ValidationFailure.

    Attributes:
        schema: Explicit ModelSchema, or None to derive one from each
               instance's ``Annotated`` class annotations

    Example:
        >>> validator = ModelValidator(
        ...     ModelSchema().add("name", StringRule(min_length=1))
        ... )
        >>> result = validator.validate({"name": ""})
        >>> result.is_valid
        False
        >>> result.errors[0]
        PropertyError(property_name='name', error_message='The string cannot be empty')
    """

    def __init__(self, schema: ModelSchema | None = None):
        self.schema = schema
        self._derived: dict[type, ModelSchema] = {}

    def schema_for(self, instance: Any) -> ModelSchema:
        """Return the schema used to validate ``instance``.

        Annotation-derived schemas are built once per model type.

        Raises:
            ContractViolation: If there is no explicit schema and instance is
                              a mapping, which carries no annotations
        """
        if self.schema is not None:
            return self.schema

        require(
            not isinstance(instance, Mapping),
            lambda: ContractViolation(
                "Mappings have no annotated rules; pass an explicit ModelSchema",
                model=type(instance).__name__,
            ),
        )

        model = type(instance)
        schema = self._derived.get(model)
        if schema is None:
            schema = ModelSchema.from_annotations(model)
            self._derived[model] = schema
        return schema

    def validate(self, instance: Any) -> ValidationResult:
        """Validate every declared property of ``instance``.

        Args:
            instance: Object or mapping to validate

        Returns:
            ValidationResult with one PropertyError per failing rule, in
            declaration order

        Raises:
            MissingValueError: If instance is None
            ContractViolation: If a rule rejects a value outright (e.g. a
                              DateRule given a non-datetime), or instance is
                              a mapping and no explicit schema was given
        """
        require(
            instance is not None,
            lambda: MissingValueError(
                "The item passed for validation was None", parameter="instance"
            ),
        )

        schema = self.schema_for(instance)
        subject = type(instance).__name__
        errors: list[PropertyError] = []

        for prop in schema:
            outcome = prop.rule.evaluate(prop.read(instance))
            if not outcome.passed:
                logger.debug("%s.%s failed: %s", subject, prop.name, outcome.message)
                errors.append(PropertyError(prop.label, outcome.message))

        logger.debug(
            "Validated %s against %d rule(s): %d error(s)", subject, len(schema), len(errors)
        )
        return ValidationResult(errors=errors, subject=subject)

    def ensure_valid(self, instance: Any) -> None:
        """Validate ``instance`` and raise if any property fails.

        Raises:
            MissingValueError: If instance is None
            ValidationFailure: If validation fails; carries the result
        """
        result = self.validate(instance)
        if not result.is_valid:
            raise ValidationFailure(result.error_message, result=result)

    def validate_collection(self, items: Iterable[Any]) -> None:
        """Validate each item in order, stopping at the first invalid one.

        Args:
            items: Instances to validate

        Raises:
            MissingValueError: If items is None
            ValidationFailure: For the first invalid item, with its result
                              and position
        """
        require(
            items is not None,
            lambda: MissingValueError(
                "The collection passed for validation was None", parameter="items"
            ),
        )

        for index, item in enumerate(items):
            result = self.validate(item)
            if not result.is_valid:
                logger.debug("Item %d (%s) failed validation", index, result.subject)
                raise ValidationFailure(result.error_message, result=result, index=index)


_default_validator = ModelValidator()


def validate(instance: Any) -> ValidationResult:
    """Validate ``instance`` using its ``Annotated`` class annotations."""
    return _default_validator.validate(instance)


def ensure_valid(instance: Any) -> None:
    """Raise ValidationFailure unless ``instance`` passes its annotated rules."""
    _default_validator.ensure_valid(instance)


def validate_collection(items: Iterable[Any]) -> None:
    """Validate each item using its annotated rules, failing on the first invalid one."""
    _default_validator.validate_collection(items)
