"""Shared test fixtures for vouch tests."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Annotated
from uuid import UUID, uuid4

import pytest
from hypothesis import settings

from vouch.validation.rules import CollectionRule, DateOptions, DateRule, GuidRule, RangeRule, StringRule
from vouch.validation.schema import Display

settings.register_profile("vouch", max_examples=100, deadline=None)
settings.load_profile("vouch")


@dataclass
class Person:
    """Model used across validator tests."""

    name: Annotated[str, StringRule(min_length=1, max_length=50)]
    age: Annotated[int, RangeRule(0, 150)]
    born: Annotated[datetime, DateRule(DateOptions.UTC_ONLY | DateOptions.PAST_ONLY), Display("Date of birth")]
    id: Annotated[UUID, GuidRule()]
    tags: Annotated[list[str], CollectionRule(min_count=1, max_count=5)]


@pytest.fixture
def person_cls() -> type[Person]:
    """The annotated Person model class."""
    return Person


@pytest.fixture
def valid_person() -> Person:
    """A Person that satisfies every rule."""
    return Person(
        name="Ada",
        age=36,
        born=datetime.now(timezone.utc) - timedelta(days=365 * 36),
        id=uuid4(),
        tags=["maths"],
    )

