"""Structured errors carried by failed results.

This module provides the error type stored inside a ``Failure`` and the
helpers that turn arbitrary raised values into it.
"""

from enum import Enum
from typing import Any, Iterator, List, Optional


class ErrorType(Enum):
    """Types of errors a failed result can carry."""

    # General errors
    UNKNOWN_ERROR = "unknown_error"

    # Captured from callables
    EXCEPTION = "exception"
    NON_EXCEPTION = "non_exception"

    # Unwrapping errors
    RESCUE_FAILED = "rescue_failed"


_JSON_SCALARS = (str, int, float, bool, type(None))


def _serializable(value: Any) -> Any:
    if isinstance(value, StructuredError):
        return value.to_dict()
    if isinstance(value, _JSON_SCALARS):
        return value
    if isinstance(value, dict):
        return {str(k): _serializable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_serializable(v) for v in value]
    return repr(value)


class StructuredError(Exception):
    """Base exception for all errors carried by results.

    Attributes:
        message: Human-readable error message
        error_type: Type of error from ErrorType enum
        details: Optional dict with additional error context
        cause: The exception this error explains, if any
    """

    def __init__(
        self,
        message: str,
        error_type: ErrorType = ErrorType.UNKNOWN_ERROR,
        details: Optional[dict] = None,
        cause: Optional[BaseException] = None,
    ):
        self.message = message
        self.error_type = error_type
        self.details = details or {}
        self.cause = cause
        super().__init__(self.message)
        if cause is not None:
            self.__cause__ = cause

    @classmethod
    def coerce(cls, thrown: Any) -> "StructuredError":
        """Normalize any raised or caught value into a StructuredError.

        Structured errors are returned unchanged. Native exceptions become the
        cause of a new error that reuses their message. Anything else is kept
        in ``details["value"]``.
        """
        if isinstance(thrown, StructuredError):
            return thrown
        if isinstance(thrown, BaseException):
            return cls(
                str(thrown) or type(thrown).__name__,
                ErrorType.EXCEPTION,
                {"exception_type": type(thrown).__name__},
                cause=thrown,
            )
        return cls(str(thrown), ErrorType.NON_EXCEPTION, {"value": thrown})

    def causes(self, message: str) -> "StructuredError":
        """Return a new error describing ``message`` with this error as its cause."""
        return StructuredError(message, self.error_type, cause=self)

    def with_details(self, **details) -> "StructuredError":
        """Merge extra context into this error and return it."""
        self.details.update(details)
        return self

    def chain(self) -> Iterator["StructuredError"]:
        """Iterate over this error and its structured causes, outermost first."""
        current: Optional[BaseException] = self
        while isinstance(current, StructuredError):
            yield current
            current = current.cause

    def messages(self) -> List[str]:
        """Messages along the cause chain, outermost first."""
        return [error.message for error in self.chain()]

    def to_result(self):
        """Wrap this error into a failed result."""
        from .result import Failure

        return Failure(self)

    def __str__(self) -> str:
        base = f"[{self.error_type.value}] {self.message}"
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{base} ({details_str})"
        return base

    def to_dict(self) -> dict:
        """Convert exception to dictionary for logging/serialization."""
        data = {
            "error_type": self.error_type.value,
            "message": self.message,
            "details": {k: _serializable(v) for k, v in self.details.items()},
        }
        if isinstance(self.cause, StructuredError):
            data["cause"] = self.cause.to_dict()
        elif self.cause is not None:
            data["cause"] = repr(self.cause)
        return data


class RescueError(StructuredError):
    """Raised when the fallback given to ``rescue`` fails itself.

    Attributes:
        original_error: Error of the failure that was being rescued
        rescue_error: Exception raised by the fallback
    """

    def __init__(self, original_error: StructuredError, rescue_error: BaseException):
        self.original_error = original_error
        self.rescue_error = rescue_error
        super().__init__(
            "Error rescue failed.",
            ErrorType.RESCUE_FAILED,
            {
                "original_error": original_error.to_dict(),
                "rescue_error": repr(rescue_error),
            },
            cause=rescue_error,
        )
