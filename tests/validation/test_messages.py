"""Tests for the error message catalog."""

import pytest

from vouch.validation.messages import MESSAGES, MessageKind, format_message


def test_every_kind_has_template():
    assert set(MESSAGES) == set(MessageKind)


def test_catalog_is_read_only():
    with pytest.raises(TypeError):
        MESSAGES[MessageKind.VALUE_CANNOT_BE_NULL] = "changed"  # type: ignore[index]


@pytest.mark.parametrize(
    ("kind", "args", "expected"),
    [
        (MessageKind.VALUE_CANNOT_BE_NULL, (), "The value cannot be null"),
        (MessageKind.VALUE_MUST_BE_OF_TYPE, ("str", "int"), "The value must be of type str, but was int"),
        (MessageKind.VALUE_MUST_BE_NUMERIC, ("abc",), "The value 'abc' is not a valid numeric type"),
        (
            MessageKind.COLLECTION_TOO_SMALL,
            (0, 1),
            "The collection length of 0 is less than the minimum required of 1",
        ),
        (MessageKind.VALUE_TOO_SMALL_INCLUSIVE, (9, 10), "The value 9 must be greater than or equal to 10"),
        (MessageKind.DATE_MUST_BE_UTC_AND_IN_FUTURE, (), "The datetime must be in UTC and in the future"),
    ],
)
def test_format_message(kind, args, expected):
    assert format_message(kind, *args) == expected


def test_missing_placeholder_args_is_an_error():
    with pytest.raises(IndexError):
        format_message(MessageKind.STRING_TOO_SHORT, 3)
