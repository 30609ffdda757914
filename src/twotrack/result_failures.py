"""
Shortcuts for failures carrying a FailureDescription.

    from twotrack import ResultFailures

    # Instead of:
    fail(FailureDescription(ErrorCode.VALIDATION_ERROR, "Name is required"))

    # Write:
    ResultFailures.validation_error("Name is required")
"""

from __future__ import annotations

from typing import Any

from twotrack.failure import ErrorCode, FailureDescription
from twotrack.result import Failure, Result


class ResultFailures:
    """Factory methods for common failure types."""

    @staticmethod
    def validation_error(message: str) -> Result[Any, FailureDescription]:
        return Failure(FailureDescription(ErrorCode.VALIDATION_ERROR, message))

    @staticmethod
    def business_rule_error(message: str) -> Result[Any, FailureDescription]:
        return Failure(FailureDescription(ErrorCode.BUSINESS_RULE_ERROR, message))

    @staticmethod
    def not_found(resource_type: str, identifier: str) -> Result[Any, FailureDescription]:
        return Failure(
            FailureDescription(
                ErrorCode.NOT_FOUND,
                f"{resource_type} not found with identifier: {identifier}",
            )
        )

    @staticmethod
    def technical_error(message: str, exception: BaseException | None = None) -> Result[Any, FailureDescription]:
        return Failure(FailureDescription(ErrorCode.TECHNICAL_ERROR, message, exception))

    @staticmethod
    def from_exception(exception: BaseException) -> Result[Any, FailureDescription]:
        """Classify the exception by type, using its own message."""
        return Failure(FailureDescription.from_exception(exception))
