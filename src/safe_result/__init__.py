"""Safe result - Explicit, chainable success/failure values"""

__version__ = "0.1.0"

from .exceptions import ErrorType, RescueError, StructuredError
from .factories import attempt, err, if_truthy, ok, wrap
from .result import BaseResult, Failure, Result, Success

__all__ = [
    # Result type
    "Result",
    "BaseResult",
    "Success",
    "Failure",
    # Construction
    "ok",
    "err",
    "if_truthy",
    "attempt",
    "wrap",
    # Exceptions
    "StructuredError",
    "RescueError",
    "ErrorType",
]
