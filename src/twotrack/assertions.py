"""
Test assertions for Result values.

Gives test suites that use twotrack clear messages when a pipeline ends up
on the wrong track:

    from twotrack import ResultAssertions

    def test_signup_rejects_blank_names():
        result = validate(Person("", ""))
        errors = ResultAssertions.assert_failure(result)
        assert len(errors) == 2
"""

from __future__ import annotations

from typing import Any, TypeVar

from twotrack.failure import ErrorCode, FailureDescription
from twotrack.result import Failure, Result, Success

S = TypeVar("S")
F = TypeVar("F")


def _suffix(message: str) -> str:
    return f" — {message}" if message else ""


class ResultAssertions:
    """Expressive test assertions for Result values."""

    @staticmethod
    def assert_success(result: Result[S, F], message: str = "") -> S:
        """
        Assert the Result is a Success and return its payload.

            data = ResultAssertions.assert_success(result)
        """
        match result:
            case Success(data):
                return data
            case Failure(error):
                raise AssertionError(f"Expected Success but got Failure({error!r}){_suffix(message)}")
        raise AssertionError(f"Expected a Result but got {result!r}{_suffix(message)}")

    @staticmethod
    def assert_failure(
        result: Result[S, F],
        expected_code: ErrorCode | None = None,
        message: str = "",
    ) -> F:
        """
        Assert the Result is a Failure and return its payload.

        When `expected_code` is given the payload must be a FailureDescription
        with that code.
        """
        match result:
            case Failure(error):
                if expected_code is not None:
                    assert isinstance(error, FailureDescription), (
                        f"Expected a FailureDescription but got {error!r}{_suffix(message)}"
                    )
                    assert error.code == expected_code, (
                        f"Expected error code {expected_code.value} "
                        f"but got {error.code.value}: {error.message!r}{_suffix(message)}"
                    )
                return error
            case Success(data):
                raise AssertionError(f"Expected Failure but got Success({data!r}){_suffix(message)}")
        raise AssertionError(f"Expected a Result but got {result!r}{_suffix(message)}")

    @staticmethod
    def assert_success_value(result: Result[S, F], expected_value: Any) -> None:
        data = ResultAssertions.assert_success(result)
        assert data == expected_value, f"Expected success value {expected_value!r} but got {data!r}"

    @staticmethod
    def assert_failure_value(result: Result[S, F], expected_error: Any) -> None:
        error = ResultAssertions.assert_failure(result)
        assert error == expected_error, f"Expected failure {expected_error!r} but got {error!r}"

    @staticmethod
    def assert_failure_message_contains(result: Result[S, F], substring: str) -> None:
        """
        Assert the failure message contains `substring`, case-insensitively.

        Uses FailureDescription.message when present, str(payload) otherwise.
        """
        error = ResultAssertions.assert_failure(result)
        text = error.message if isinstance(error, FailureDescription) else str(error)
        assert substring.lower() in text.lower(), (
            f"Expected failure message to contain {substring!r} but message was: {text!r}"
        )
