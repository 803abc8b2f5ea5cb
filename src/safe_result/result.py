"""Result type for explicit error handling.

Provides a Result[T] type, either a ``Success`` carrying a value or a
``Failure`` carrying a ``StructuredError``, similar to Rust's Result enum.
"""

import logging
from dataclasses import dataclass
from typing import Callable, ClassVar, Generic, Optional, TypeVar, Union

from .exceptions import RescueError, StructuredError

T = TypeVar("T")
U = TypeVar("U")

logger = logging.getLogger(__name__)


class BaseResult(Generic[T]):
    """Operations shared by both result variants.

    Every result exposes ``value`` and ``error``; the one that does not
    apply to the variant is always None. They are declared as annotations
    only, so ``Success`` can keep ``value`` as a dataclass field.
    """

    value: Optional[T]
    error: Optional[StructuredError]

    def is_ok(self) -> bool:
        raise NotImplementedError

    def is_err(self) -> bool:
        raise NotImplementedError

    def voidify(self) -> "Result[None]":
        """Discard the payload, keeping the variant."""
        raise NotImplementedError

    def map(self, func: Callable[[T], Union[U, "Result[U]"]]) -> "Result[U]":
        """Apply ``func`` to the value of a successful result.

        A result returned by ``func`` is passed through as is; any other
        return value is wrapped into a ``Success``. Exceptions raised by
        ``func`` become a ``Failure``.
        """
        raise NotImplementedError

    def map_err(
        self, func: Callable[[StructuredError], StructuredError]
    ) -> "Result[T]":
        """Replace the error of a failed result with ``func(error)``."""
        raise NotImplementedError

    def rescue(
        self, onerror: Optional[Callable[[StructuredError], T]] = None
    ) -> Optional[T]:
        """Return the value, or the fallback's result (None without one) on failure."""
        raise NotImplementedError

    def raises(self, message: Optional[str] = None) -> T:
        """Return the value, or raise the stored error on failure.

        Args:
            message: Added as a cause description over the error before raising
        """
        raise NotImplementedError


@dataclass(frozen=True)
class Success(BaseResult[T]):
    """Represents a successful result."""

    VOID: ClassVar["Success[None]"]

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    @property
    def error(self) -> None:
        return None

    def voidify(self) -> "Success[None]":
        return Success.VOID

    def map(self, func):
        try:
            mapped = func(self.value)
        except Exception as e:
            logger.debug(f"Captured exception raised in map(): {e!r}")
            return Failure(StructuredError.coerce(e))
        return mapped if isinstance(mapped, BaseResult) else Success(mapped)

    def map_err(self, func) -> "Success[T]":
        return self

    def rescue(self, onerror=None) -> T:
        return self.value

    def raises(self, message: Optional[str] = None) -> T:
        return self.value


Success.VOID = Success(None)


@dataclass
class Failure(BaseResult[T]):
    """Represents an error result."""

    error: StructuredError

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    @property
    def value(self) -> None:
        return None

    def voidify(self) -> "Failure[None]":
        return self

    def map(self, func) -> "Failure":
        return self

    def map_err(self, func) -> "Failure[T]":
        self.error = func(self.error)
        return self

    def rescue(self, onerror=None) -> Optional[T]:
        if onerror is None:
            return None
        try:
            return onerror(self.error)
        except StructuredError:
            raise
        except Exception as e:
            logger.debug(f"Rescue fallback failed: {e!r}")
            raise RescueError(self.error, e) from e

    def raises(self, message: Optional[str] = None) -> T:
        if message:
            self.error = self.error.causes(message)
        raise self.error


Result = Union[Success[T], Failure[T]]
