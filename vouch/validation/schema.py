"""Property/rule registration.

A ModelSchema is an ordered list of (property, rule) pairs that tells the
ModelValidator what to check. Schemas can be built explicitly::

    schema = (
        ModelSchema()
        .add("name", StringRule(min_length=1, max_length=50))
        .add("born", DateRule(DateOptions.PAST_ONLY), display_name="Date of birth")
    )

or derived from ``typing.Annotated`` class annotations::

    @dataclass
    class Person:
        name: Annotated[str, StringRule(min_length=1, max_length=50)]
        born: Annotated[datetime, DateRule(DateOptions.PAST_ONLY), Display("Date of birth")]

    schema = ModelSchema.from_annotations(Person)

Declaration order is preserved and determines the order of reported errors.
"""

from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Annotated, Any, get_args, get_origin, get_type_hints

from vouch.core.contract import require
from vouch.core.exceptions import ContractViolation
from vouch.validation.protocols import Rule

Accessor = Callable[[Any], Any]


@dataclass(frozen=True)
class Display:
    """``Annotated`` marker giving a property a human-readable name."""

    name: str


@dataclass(frozen=True)
class PropertyRule:
    """One rule bound to one property.

    Attributes:
        name: Attribute or key the value is read from
        rule: Rule applied to the value
        display_name: Name used in error reports (defaults to ``name``)
        accessor: Custom function reading the value from an instance. When
                 None, mappings are read with ``.get(name)`` and other
                 objects with ``getattr``.
    """

    name: str
    rule: Rule
    display_name: str | None = None
    accessor: Accessor | None = None

    @property
    def label(self) -> str:
        return self.display_name or self.name

    def read(self, instance: Any) -> Any:
        """Read this property's current value from ``instance``.

        Raises:
            ContractViolation: If the object has no such attribute
        """
        if self.accessor is not None:
            return self.accessor(instance)

        if isinstance(instance, Mapping):
            return instance.get(self.name)

        try:
            return getattr(instance, self.name)
        except AttributeError as e:
            raise ContractViolation(
                f"{type(instance).__name__} has no property '{self.name}'",
                property_name=self.name,
                model=type(instance).__name__,
            ) from e


class ModelSchema:
    """Ordered collection of PropertyRules for one model type.

    A property may carry several rules; each is evaluated and reported on
    its own.
    """

    def __init__(self, properties: Iterable[PropertyRule] = ()) -> None:
        self._properties: list[PropertyRule] = list(properties)

    def add(
        self,
        name: str,
        rule: Rule,
        *,
        display_name: str | None = None,
        accessor: Accessor | None = None,
    ) -> "ModelSchema":
        """Register ``rule`` for property ``name`` and return the schema.

        Raises:
            ContractViolation: If name is empty or rule is not a Rule
        """
        require(
            isinstance(name, str) and bool(name),
            lambda: ContractViolation("Property name must be a non-empty string", value=name),
        )
        require(
            isinstance(rule, Rule),
            lambda: ContractViolation(
                f"Rule for property '{name}' must implement evaluate(), got {type(rule).__name__}",
                property_name=name,
            ),
        )

        self._properties.append(
            PropertyRule(name=name, rule=rule, display_name=display_name, accessor=accessor)
        )
        return self

    @property
    def properties(self) -> tuple[PropertyRule, ...]:
        return tuple(self._properties)

    def names(self) -> list[str]:
        """Distinct property names in declaration order."""
        return list(dict.fromkeys(p.name for p in self._properties))

    def __iter__(self) -> Iterator[PropertyRule]:
        return iter(self._properties)

    def __len__(self) -> int:
        return len(self._properties)

    def __repr__(self) -> str:
        return f"ModelSchema({self._properties!r})"

    @classmethod
    def from_annotations(cls, model: type) -> "ModelSchema":
        """Build a schema from ``Annotated`` rules on ``model``'s annotations.

        Base-class annotations come first, then the class's own, each in
        declaration order. Annotations without rules are ignored.

        Args:
            model: Class to inspect

        Returns:
            ModelSchema, empty when the class declares no rules
        """
        schema = cls()
        hints = get_type_hints(model, include_extras=True)

        for name, hint in hints.items():
            if get_origin(hint) is not Annotated:
                continue

            metadata = get_args(hint)[1:]
            display = next((m.name for m in metadata if isinstance(m, Display)), None)

            for item in metadata:
                if isinstance(item, Rule):
                    schema.add(name, item, display_name=display)

        return schema
