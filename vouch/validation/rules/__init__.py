"""Built-in validation rules.

- StringRule: length bounds, full-match pattern, optional empty strings
- RangeRule: numeric bounds, inclusive or exclusive
- DateRule: UTC / non-UTC and future / past constraints on datetimes
- GuidRule: populated, non-nil UUIDs
- CollectionRule: element count bounds
"""

from vouch.validation.rules.cardinality import NO_MAXIMUM_LIMIT, CollectionRule
from vouch.validation.rules.dates import DateOptions, DateRule
from vouch.validation.rules.guids import NIL_UUID, GuidRule
from vouch.validation.rules.numbers import RangeRule
from vouch.validation.rules.strings import StringRule

__all__ = [
    "StringRule",
    "RangeRule",
    "DateRule",
    "DateOptions",
    "GuidRule",
    "NIL_UUID",
    "CollectionRule",
    "NO_MAXIMUM_LIMIT",
]
