"""Error message catalog.

Every failure message produced by a rule comes from this catalog so wording
stays consistent across rule types. Templates use ``str.format`` positional
placeholders.
"""

from enum import Enum
from types import MappingProxyType
from typing import Any


class MessageKind(Enum):
    """Identifiers for the message templates."""

    VALUE_CANNOT_BE_NULL = "value_cannot_be_null"
    STRING_CANNOT_BE_EMPTY = "string_cannot_be_empty"
    COLLECTION_CANNOT_BE_NULL = "collection_cannot_be_null"

    VALUE_MUST_BE_OF_TYPE = "value_must_be_of_type"
    VALUE_MUST_BE_NUMERIC = "value_must_be_numeric"

    GUID_CANNOT_BE_EMPTY = "guid_cannot_be_empty"
    VALUE_MUST_BE_GUID = "value_must_be_guid"

    COLLECTION_TOO_SMALL = "collection_too_small"
    COLLECTION_TOO_LARGE = "collection_too_large"

    STRING_TOO_SHORT = "string_too_short"
    STRING_TOO_LONG = "string_too_long"
    STRING_DOES_NOT_MATCH_PATTERN = "string_does_not_match_pattern"

    VALUE_TOO_SMALL = "value_too_small"
    VALUE_TOO_SMALL_INCLUSIVE = "value_too_small_inclusive"
    VALUE_TOO_LARGE = "value_too_large"
    VALUE_TOO_LARGE_INCLUSIVE = "value_too_large_inclusive"

    DATE_MUST_BE_UTC = "date_must_be_utc"
    DATE_MUST_NOT_BE_UTC = "date_must_not_be_utc"
    DATE_MUST_BE_IN_FUTURE = "date_must_be_in_future"
    DATE_MUST_BE_IN_PAST = "date_must_be_in_past"
    DATE_MUST_BE_UTC_AND_IN_FUTURE = "date_must_be_utc_and_in_future"
    DATE_MUST_BE_UTC_AND_IN_PAST = "date_must_be_utc_and_in_past"
    DATE_MUST_BE_NON_UTC_AND_IN_FUTURE = "date_must_be_non_utc_and_in_future"
    DATE_MUST_BE_NON_UTC_AND_IN_PAST = "date_must_be_non_utc_and_in_past"
    DATE_VALIDATION_FAILED = "date_validation_failed"


MESSAGES = MappingProxyType({
    MessageKind.VALUE_CANNOT_BE_NULL: "The value cannot be null",
    MessageKind.STRING_CANNOT_BE_EMPTY: "The string cannot be empty",
    MessageKind.COLLECTION_CANNOT_BE_NULL: "The collection cannot be null",
    MessageKind.VALUE_MUST_BE_OF_TYPE: "The value must be of type {0}, but was {1}",
    MessageKind.VALUE_MUST_BE_NUMERIC: "The value '{0}' is not a valid numeric type",
    MessageKind.GUID_CANNOT_BE_EMPTY: "The GUID cannot be empty",
    MessageKind.VALUE_MUST_BE_GUID: "The value must be of type GUID",
    MessageKind.COLLECTION_TOO_SMALL: (
        "The collection length of {0} is less than the minimum required of {1}"
    ),
    MessageKind.COLLECTION_TOO_LARGE: (
        "The collection length of {0} is greater than the maximum allowed of {1}"
    ),
    MessageKind.STRING_TOO_SHORT: (
        "The string length of {0} is less than the minimum required of {1}"
    ),
    MessageKind.STRING_TOO_LONG: (
        "The string length of {0} is greater than the maximum allowed of {1}"
    ),
    MessageKind.STRING_DOES_NOT_MATCH_PATTERN: (
        "The string does not match the required pattern: {0}"
    ),
    MessageKind.VALUE_TOO_SMALL: "The value {0} must be greater than {1}",
    MessageKind.VALUE_TOO_SMALL_INCLUSIVE: "The value {0} must be greater than or equal to {1}",
    MessageKind.VALUE_TOO_LARGE: "The value {0} must be less than {1}",
    MessageKind.VALUE_TOO_LARGE_INCLUSIVE: "The value {0} must be less than or equal to {1}",
    MessageKind.DATE_MUST_BE_UTC: "The datetime must be in UTC",
    MessageKind.DATE_MUST_NOT_BE_UTC: "The datetime should not be in UTC",
    MessageKind.DATE_MUST_BE_IN_FUTURE: "The datetime must be in the future",
    MessageKind.DATE_MUST_BE_IN_PAST: "The datetime must be in the past",
    MessageKind.DATE_MUST_BE_UTC_AND_IN_FUTURE: "The datetime must be in UTC and in the future",
    MessageKind.DATE_MUST_BE_UTC_AND_IN_PAST: "The datetime must be in UTC and in the past",
    MessageKind.DATE_MUST_BE_NON_UTC_AND_IN_FUTURE: (
        "The datetime should not be in UTC and must be in the future"
    ),
    MessageKind.DATE_MUST_BE_NON_UTC_AND_IN_PAST: (
        "The datetime should not be in UTC and must be in the past"
    ),
    MessageKind.DATE_VALIDATION_FAILED: (
        "The datetime did not pass validation. "
        "Please check that it meets supported validation rules"
    ),
})


def format_message(kind: MessageKind, *args: Any) -> str:
    """Render the template for ``kind`` with positional arguments.

    Args:
        kind: Which template to use
        *args: Values substituted into the ``{0}``, ``{1}``... placeholders

    Returns:
        The formatted message

    Raises:
        KeyError: If ``kind`` has no template (a programming error)

    Example:
        >>> format_message(MessageKind.STRING_TOO_SHORT, 2, 5)
        'The string length of 2 is less than the minimum required of 5'
    """
    return MESSAGES[kind].format(*args)
