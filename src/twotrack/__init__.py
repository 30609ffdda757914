"""
twotrack — Railway-Oriented Programming for Python.

Chain fallible single-input functions so the first failure short-circuits the
rest, without exceptions or if/else ladders.

    from twotrack import SwitchComposable, fail, succeed

    def not_empty(s: str):
        return succeed(s) if s else fail("empty")

    def not_too_long(s: str):
        return succeed(s) if len(s) < 5 else fail("long")

    validate = SwitchComposable(not_empty) >> not_too_long
    validate("")        # → Failure('empty')
    validate("123456")  # → Failure('long')
    validate("1234")    # → Success('1234')
"""

from twotrack.result import Result, Success, Failure, succeed, fail, either
from twotrack.composition import (
    Composable,
    SwitchComposable,
    bind,
    compose,
    kleisli,
    pipe,
    pipe_switch,
)
from twotrack.lifting import double_map, fmap, switch, tee, try_catch
from twotrack.combination import plus
from twotrack.failure import ErrorCode, FailureDescription
from twotrack.result_failures import ResultFailures
from twotrack.execution import (
    ExecutionContext,
    NoOpExecutionContext,
    LoggingExecutionContext,
    ComposableExecutionContext,
    with_context,
)
from twotrack.assertions import ResultAssertions
from twotrack.settings import LoggingSettings
from twotrack.log import configure_structlog

__all__ = [
    "Result",
    "Success",
    "Failure",
    "succeed",
    "fail",
    "either",
    "compose",
    "pipe",
    "Composable",
    "bind",
    "pipe_switch",
    "kleisli",
    "SwitchComposable",
    "switch",
    "fmap",
    "tee",
    "try_catch",
    "double_map",
    "plus",
    "ErrorCode",
    "FailureDescription",
    "ResultFailures",
    "ExecutionContext",
    "NoOpExecutionContext",
    "LoggingExecutionContext",
    "ComposableExecutionContext",
    "with_context",
    "ResultAssertions",
    "LoggingSettings",
    "configure_structlog",
]

__version__ = "1.0.0"
