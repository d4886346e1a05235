"""Unit tests for precondition checking."""

import pytest

from vouch.core.contract import require, require_else
from vouch.core.exceptions import MissingValueError


class TestRequireWithExceptionClass:
    """Tests for require_else given an exception class."""

    def test_true_condition_is_noop(self) -> None:
        """A satisfied precondition does nothing."""
        assert require_else(True, ValueError, "This should not raise") is None

    def test_false_condition_raises_with_message(self) -> None:
        """A failed precondition raises the requested type with the message."""
        with pytest.raises(ValueError) as exc_info:
            require_else(False, ValueError, "Validation test")

        assert str(exc_info.value) == "Validation test"
        assert exc_info.value.__cause__ is None

    def test_message_formatted_with_args(self) -> None:
        """Positional args are substituted into the message."""
        with pytest.raises(ValueError) as exc_info:
            require_else(False, ValueError, "Message {0} and {1}", "param1", "param2")

        assert str(exc_info.value) == "Message param1 and param2"

    def test_message_without_args_is_verbatim(self) -> None:
        """Braces survive when no args are given."""
        with pytest.raises(ValueError) as exc_info:
            require_else(False, ValueError, "expected {name}")

        assert str(exc_info.value) == "expected {name}"

    def test_cause_is_chained(self) -> None:
        """The cause is attached as __cause__."""
        inner = RuntimeError("Inner exception")

        with pytest.raises(ValueError) as exc_info:
            require_else(False, ValueError, "Test {0} {1}", 1, "2", cause=inner)

        assert str(exc_info.value) == "Test 1 2"
        assert exc_info.value.__cause__ is inner

    def test_cause_ignored_when_condition_holds(self) -> None:
        """Nothing is raised for a true condition even with a cause."""
        require_else(True, ValueError, "Message {0}", "arg1", cause=RuntimeError("Inner"))

    def test_works_with_vouch_errors(self) -> None:
        """Library exceptions accept the message positionally."""
        with pytest.raises(MissingValueError) as exc_info:
            require(False, MissingValueError, "{0} is required", "name")

        assert exc_info.value.message == "name is required"


class TestRequireWithFactory:
    """Tests for require_else given an exception factory."""

    def test_factory_not_called_when_condition_holds(self) -> None:
        """The factory is only invoked on failure."""
        calls = []

        def factory() -> Exception:
            calls.append(1)
            return ValueError("Should not be called")

        require_else(True, factory)
        assert calls == []

    def test_factory_exception_is_raised_as_is(self) -> None:
        """The exact instance built by the factory is raised."""
        custom = KeyError("Custom message")

        with pytest.raises(KeyError) as exc_info:
            require_else(False, lambda: custom)

        assert exc_info.value is custom

    def test_factory_with_cause(self) -> None:
        """A cause is chained onto factory-built exceptions too."""
        inner = OSError("disk")

        with pytest.raises(RuntimeError) as exc_info:
            require_else(False, lambda: RuntimeError("Factory test"), cause=inner)

        assert exc_info.value.__cause__ is inner

    def test_factory_must_return_exception(self) -> None:
        """A factory returning a non-exception is a TypeError."""
        with pytest.raises(TypeError) as exc_info:
            require_else(False, lambda: "not an exception")

        assert "must return an exception instance" in str(exc_info.value)


def test_require_is_alias() -> None:
    """require and require_else are the same function."""
    assert require is require_else
