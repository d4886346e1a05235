"""UUID rule."""

from dataclasses import dataclass
from typing import Any, ClassVar
from uuid import UUID

from vouch.validation.messages import MessageKind, format_message
from vouch.validation.protocols import RuleKind
from vouch.validation.result import ValidationOutcome

NIL_UUID = UUID(int=0)


@dataclass(frozen=True)
class GuidRule:
    """Validates that a value is a populated ``uuid.UUID``.

    Strings that look like UUIDs are rejected; parse them first.

    Example:
        >>> GuidRule().evaluate(uuid4()).passed
        True
        >>> GuidRule().evaluate(UUID(int=0)).message
        'The GUID cannot be empty'
    """

    kind: ClassVar[RuleKind] = RuleKind.GUID

    def evaluate(self, value: Any) -> ValidationOutcome:
        if value is None:
            return ValidationOutcome.failure(format_message(MessageKind.VALUE_CANNOT_BE_NULL))

        if not isinstance(value, UUID):
            return ValidationOutcome.failure(format_message(MessageKind.VALUE_MUST_BE_GUID))

        if value == NIL_UUID:
            return ValidationOutcome.failure(format_message(MessageKind.GUID_CANNOT_BE_EMPTY))

        return ValidationOutcome.success()
