"""Tests for ModelSchema registration and annotation discovery."""

from dataclasses import dataclass
from typing import Annotated, ClassVar

import pytest

from vouch.core.exceptions import ContractViolation
from vouch.validation.rules import CollectionRule, GuidRule, RangeRule, StringRule
from vouch.validation.schema import Display, ModelSchema, PropertyRule


class TestBuilder:

    def test_add_chains_and_preserves_order(self):
        schema = (
            ModelSchema()
            .add("b", StringRule())
            .add("a", RangeRule(0, 1))
            .add("b", StringRule(min_length=2))
        )
        assert [p.name for p in schema] == ["b", "a", "b"]
        assert schema.names() == ["b", "a"]
        assert len(schema) == 3

    def test_empty_name_rejected(self):
        with pytest.raises(ContractViolation):
            ModelSchema().add("", StringRule())

    def test_non_rule_rejected(self):
        with pytest.raises(ContractViolation) as exc_info:
            ModelSchema().add("name", "not a rule")  # type: ignore[arg-type]

        assert "must implement evaluate()" in exc_info.value.message

    def test_properties_are_a_snapshot(self):
        schema = ModelSchema().add("a", GuidRule())
        snapshot = schema.properties
        schema.add("b", GuidRule())
        assert len(snapshot) == 1


class TestPropertyRule:

    def test_label_defaults_to_name(self):
        assert PropertyRule("age", RangeRule(0, 1)).label == "age"
        assert PropertyRule("age", RangeRule(0, 1), display_name="Age").label == "Age"

    def test_reads_mappings_with_get(self):
        prop = PropertyRule("age", RangeRule(0, 1))
        assert prop.read({"age": 1}) == 1
        assert prop.read({}) is None

    def test_reads_attributes(self):
        @dataclass
        class Box:
            size: int

        assert PropertyRule("size", RangeRule(0, 1)).read(Box(3)) == 3

    def test_missing_attribute_is_contract_violation(self):
        with pytest.raises(ContractViolation) as exc_info:
            PropertyRule("nmae", StringRule()).read(object())

        assert exc_info.value.context["property_name"] == "nmae"

    def test_custom_accessor(self):
        prop = PropertyRule("total", RangeRule(0, 10), accessor=lambda order: sum(order["lines"]))
        assert prop.read({"lines": [1, 2, 3]}) == 6


class TestFromAnnotations:

    def test_declaration_order_and_display_names(self, person_cls):
        schema = ModelSchema.from_annotations(person_cls)
        assert schema.names() == ["name", "age", "born", "id", "tags"]
        labels = {p.name: p.label for p in schema}
        assert labels["born"] == "Date of birth"
        assert labels["name"] == "name"

    def test_base_class_annotations_first(self):
        @dataclass
        class Base:
            id: Annotated[str, StringRule(min_length=1)]

        @dataclass
        class Child(Base):
            tags: Annotated[list, CollectionRule()] = None

        assert ModelSchema.from_annotations(Child).names() == ["id", "tags"]

    def test_multiple_rules_per_property(self):
        @dataclass
        class Code:
            value: Annotated[str, StringRule(min_length=2), StringRule(pattern=r"[A-Z]+")]

        schema = ModelSchema.from_annotations(Code)
        assert len(schema) == 2

    def test_plain_annotations_ignored(self):
        class Loose:
            counter: ClassVar[int] = 0
            name: str
            note: Annotated[str, "just documentation"]

        assert len(ModelSchema.from_annotations(Loose)) == 0
