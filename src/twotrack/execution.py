"""
Execution contexts — run a Result-returning computation with behaviour around it.

Pipelines describe WHAT happens and return a Result. A context describes HOW
the pipeline is run (today: with logging around it) and never changes the
value that comes out.

    def signup(request: dict) -> Result[User, list[str]]:
        return validate(request).flat_map(normalise).map(User.from_dict)

    result = signup(request).within(LoggingExecutionContext(operation="signup"))

    # or as a decorator
    @with_context(LoggingExecutionContext(operation="signup"))
    def handle(request: dict) -> Result[User, list[str]]:
        return signup(request)

Contexts do not catch exceptions. A computation that raises is logged and
the exception continues upward; convert exceptions with try_catch instead.
"""

from __future__ import annotations

import functools
import logging
import time
from typing import Any, Callable, Protocol, TypeVar, runtime_checkable

import structlog

from twotrack.result import Result

S = TypeVar("S")
F = TypeVar("F")

log = structlog.get_logger()


@runtime_checkable
class ExecutionContext(Protocol):
    """Anything with execute(computation) -> Result; no inheritance needed."""

    def execute(self, computation: Callable[[], Result[S, F]]) -> Result[S, F]:
        ...


class NoOpExecutionContext:
    """
    Passthrough context. Runs the computation and nothing else.

    Handy as a default and in tests.
    """

    def execute(self, computation: Callable[[], Result[S, F]]) -> Result[S, F]:
        return computation()


class LoggingExecutionContext:
    """
    Logs start, duration and track of a computation.

    Wraps another context, so it can be stacked:

        ctx = LoggingExecutionContext(other_ctx, operation="import-orders")
    """

    def __init__(
        self,
        inner: ExecutionContext | None = None,
        operation: str = "unknown",
        log_level: int = logging.INFO,
    ) -> None:
        self._inner = inner or NoOpExecutionContext()
        self._operation = operation
        self._log_level = log_level

    def execute(self, computation: Callable[[], Result[S, F]]) -> Result[S, F]:
        log.log(self._log_level, "execution.started", operation=self._operation)
        start = time.monotonic()

        try:
            result = self._inner.execute(computation)
        except Exception as e:
            log.error(
                "execution.raised",
                operation=self._operation,
                elapsed_s=round(time.monotonic() - start, 3),
                exc_type=type(e).__name__,
                error=str(e),
            )
            raise

        log.log(
            self._log_level,
            "execution.completed",
            operation=self._operation,
            elapsed_s=round(time.monotonic() - start, 3),
            track="success" if result.is_success() else "failure",
        )
        return result


class ComposableExecutionContext:
    """
    Stack several contexts into one. The first context is the outermost:

        composed = ComposableExecutionContext(
            LoggingExecutionContext(operation="outer"),
            LoggingExecutionContext(operation="inner"),
        )
        # outer wraps inner wraps the computation
    """

    def __init__(self, *contexts: ExecutionContext) -> None:
        if not contexts:
            raise ValueError("At least one execution context is required")
        self._contexts = list(contexts)

    def execute(self, computation: Callable[[], Result[S, F]]) -> Result[S, F]:
        wrapped = computation
        for ctx in reversed(self._contexts):
            wrapped = functools.partial(ctx.execute, wrapped)
        return wrapped()


def with_context(ctx: ExecutionContext) -> Callable:
    """
    Decorator running a Result-returning function inside `ctx`.

        @with_context(LoggingExecutionContext(operation="signup"))
        def handle(request: dict) -> Result[User, list[str]]:
            ...
    """

    def decorator(fn: Callable[..., Result[S, F]]) -> Callable[..., Result[S, F]]:
        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Result[S, F]:
            return ctx.execute(lambda: fn(*args, **kwargs))

        return wrapper

    return decorator
