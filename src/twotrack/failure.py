"""
Failure description — an optional, structured payload for the failure track.

Result is generic in its failure type, so plain strings or lists of strings
work fine. When a pipeline needs something richer, FailureDescription carries
an ErrorCode, a message, the originating exception and a timestamp.

FailureDescription.from_exception plugs straight into try_catch:

    parse = try_catch(json.loads, FailureDescription.from_exception)
"""

from __future__ import annotations

import traceback
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum, unique
from typing import Optional


@unique
class ErrorCode(Enum):
    """Coarse classification of what went wrong."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    """Input has the wrong shape, type or value."""

    NOT_FOUND = "NOT_FOUND"
    """A looked-up key or resource does not exist."""

    BUSINESS_RULE_ERROR = "BUSINESS_RULE_ERROR"
    """Input is well formed but violates a domain rule."""

    AUTHORIZATION_ERROR = "AUTHORIZATION_ERROR"
    """The caller is not allowed to do this."""

    TIMEOUT_ERROR = "TIMEOUT_ERROR"
    """Operation exceeded its time limit."""

    TECHNICAL_ERROR = "TECHNICAL_ERROR"
    """Infrastructure or operating system failure."""

    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    """Anything not classified above."""


@dataclass(frozen=True, slots=True)
class FailureDescription:
    """
    Immutable failure descriptor.

    Two descriptions are equal when code and message match; the exception and
    timestamp are carried along but do not take part in comparison.

    >>> desc = FailureDescription(ErrorCode.VALIDATION_ERROR, "Name is required")
    >>> desc.code
    <ErrorCode.VALIDATION_ERROR: 'VALIDATION_ERROR'>
    >>> desc == FailureDescription(ErrorCode.VALIDATION_ERROR, "Name is required")
    True
    """

    code: ErrorCode
    message: str
    exception: Optional[BaseException] = field(default=None, repr=False, compare=False)
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC), repr=False, compare=False)

    @staticmethod
    def from_exception(exception: BaseException) -> FailureDescription:
        """Describe an exception, classifying it by type and using its message."""
        return FailureDescription(
            code=map_exception_to_code(exception),
            message=str(exception) or type(exception).__name__,
            exception=exception,
        )

    def full_stack_trace(self) -> str:
        """The message followed by the formatted exception chain, if any."""
        if self.exception is None:
            return self.message
        tb = "".join(
            traceback.format_exception(type(self.exception), self.exception, self.exception.__traceback__)
        )
        return f"{self.message}\n{tb}"


def map_exception_to_code(exception: BaseException) -> ErrorCode:
    """Map a Python exception type to the most appropriate ErrorCode."""
    match exception:
        case ValueError() | TypeError() | KeyError():
            return ErrorCode.VALIDATION_ERROR
        case LookupError():
            return ErrorCode.NOT_FOUND
        case PermissionError():
            return ErrorCode.AUTHORIZATION_ERROR
        case TimeoutError():
            return ErrorCode.TIMEOUT_ERROR
        case OSError():
            return ErrorCode.TECHNICAL_ERROR
        case _:
            return ErrorCode.UNKNOWN_ERROR
