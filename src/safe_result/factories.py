"""Helpers that build results from plain values, errors, or callables."""

import functools
import logging
from typing import Any, Callable, Optional, TypeVar, Union

from .exceptions import StructuredError
from .result import Failure, Result, Success

T = TypeVar("T")

logger = logging.getLogger(__name__)

_MISSING = object()


def ok(value: Any = _MISSING) -> Success:
    """Wrap a value into a successful result.

    Without arguments the shared ``Success.VOID`` is returned. A ``Success``
    is passed through unchanged, while a ``Failure`` becomes a ``Success``
    whose value is its error.
    """
    if value is _MISSING:
        return Success.VOID
    if isinstance(value, Success):
        return value
    if isinstance(value, Failure):
        return Success(value.error)
    return Success(value)


def err(error: Union[StructuredError, BaseException, str, Any]) -> Failure:
    """Wrap an error, exception or message into a failed result."""
    if isinstance(error, str):
        return Failure(StructuredError(error))
    return Failure(StructuredError.coerce(error))


def if_truthy(value: Optional[T]) -> Optional[Success[T]]:
    """Return a successful result for truthy values, None otherwise.

    Meant to be combined with a fallback::

        result = if_truthy(config.get("name")) or err("Missing name.")
    """
    return ok(value) if value else None


def attempt(func: Callable[[], T]) -> Result[T]:
    """Call ``func`` right away, capturing its return value or exception."""
    try:
        return ok(func())
    except Exception as e:
        logger.debug(f"Captured exception raised in attempt(): {e!r}")
        return err(e)


def wrap(message_or_func, func: Optional[Callable] = None):
    """Turn a raising callable into one that returns a result.

    Can be called as ``wrap(func)`` or ``wrap(message, func)``, or used as a
    decorator with ``@wrap`` and ``@wrap(message)``. When a message is given,
    it is added as a cause description over errors raised by ``func``.

    The returned callable is a plain function, so wrapping a method keeps
    ``self`` flowing through. ``func`` is only called when the wrapped
    callable is.
    """
    if isinstance(message_or_func, str):
        message = message_or_func
        if func is None:
            return functools.partial(wrap, message)
    else:
        message, func = None, message_or_func

    name = getattr(func, "__qualname__", repr(func))

    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> Result:
        try:
            return ok(func(*args, **kwargs))
        except Exception as e:
            logger.debug(f"Captured exception raised in {name}(): {e!r}")
            error = StructuredError.coerce(e)
            if message:
                error = error.causes(message)
            return err(error)

    return wrapper
