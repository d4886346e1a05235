"""Precondition checking.

Collapses the ``if not condition: raise SomeError(...)`` idiom into a single
call::

    require(name, MissingValueError, "name is required")
    require(0 <= age <= 150, ValueError, "age {0} out of range", age)
    require(path.exists(), lambda: FileNotFoundError(errno.ENOENT, "missing", str(path)))

The error argument is either an exception class, which is instantiated with
the (optionally formatted) message, or a zero-argument factory that builds
the exception itself. Nothing is formatted or constructed unless the
condition is false.
"""

from collections.abc import Callable
from typing import Any, NoReturn

ErrorSource = type[BaseException] | Callable[[], BaseException]


def require_else(
    condition: bool,
    error: ErrorSource,
    message: str = "",
    *args: Any,
    cause: BaseException | None = None,
) -> None:
    """Raise ``error`` unless ``condition`` holds.

    Args:
        condition: The precondition that must be true
        error: Exception class, or zero-argument factory returning an exception
        message: Message for the exception class. Formatted with
                ``str.format(*args)`` when args are given, used verbatim
                otherwise. Ignored for factories.
        *args: Positional values substituted into ``message``
        cause: Optional exception chained as ``__cause__``

    Raises:
        The requested exception when ``condition`` is false.
        TypeError: If a factory returns something that is not an exception.

    Example:
        >>> require_else(False, ValueError, "Value {0} is invalid", "test")
        Traceback (most recent call last):
        ...
        ValueError: Value test is invalid
    """
    if condition:
        return

    _fail(_build(error, message, args), cause)


# Short alias for the common case.
require = require_else


def _build(error: ErrorSource, message: str, args: tuple[Any, ...]) -> BaseException:
    if isinstance(error, type) and issubclass(error, BaseException):
        text = message.format(*args) if args else message
        return error(text)

    exc = error()
    if not isinstance(exc, BaseException):
        raise TypeError(
            f"Error factory must return an exception instance, got: {type(exc).__name__}"
        )
    return exc


def _fail(exc: BaseException, cause: BaseException | None) -> NoReturn:
    if cause is not None:
        raise exc from cause
    raise exc
