"""
Lifting — adapters that fit ordinary functions onto the railway.

  switch      one-track function  → switch (always succeeds)
  fmap        one-track function  → two-track function
  tee         dead-end function   → one-track function
  try_catch   raising function    → switch (exceptions become failures)
  double_map  two one-track fns   → two-track function

try_catch is the only boundary where an exception turns into a Failure.
Everything else lets exceptions propagate untouched.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

import structlog

from twotrack.composition import compose
from twotrack.result import Failure, Result, Success, either, fail, succeed

I = TypeVar("I")  # noqa: E741
S1 = TypeVar("S1")
S2 = TypeVar("S2")
F = TypeVar("F")
F1 = TypeVar("F1")
F2 = TypeVar("F2")

log = structlog.get_logger()


def switch(fn: Callable[[S1], S2]) -> Callable[[S1], Result[S2, Any]]:
    """Convert a one-track function into a switch that always succeeds."""
    return compose(fn, succeed)


def fmap(fn: Callable[[S1], S2]) -> Callable[[Result[S1, F]], Result[S2, F]]:
    """
    Convert a one-track function into a two-track function.

    This is the railway `map`, named fmap so it does not shadow the builtin.

    Only the success payload is transformed; a Failure comes out as it went in.
    """

    def mapped(result: Result[S1, F]) -> Result[S2, F]:
        return result.map(fn)

    return mapped


def tee(fn: Callable[[I], Any]) -> Callable[[I], I]:
    """
    Convert a dead-end function into a one-track function.

    `fn` runs for its effect and its return value is discarded. If it raises,
    the exception propagates and nothing is returned.
    """

    def passthrough(value: I) -> I:
        fn(value)
        return value

    return passthrough


def try_catch(
    fn: Callable[[S1], S2],
    exception_handler: Callable[[Exception], F],
) -> Callable[[S1], Result[S2, F]]:
    """
    Convert a one-track function into a switch with exception handling.

        parse = try_catch(int, lambda exc: f"not a number: {exc}")
        parse("42")   # → Success(42)
        parse("4x2")  # → Failure("not a number: invalid literal for int() ...")

    Only Exception subclasses are captured; KeyboardInterrupt and friends
    still propagate.
    """

    def guarded(value: S1) -> Result[S2, F]:
        try:
            output = fn(value)
        except Exception as exc:
            failure = Failure(exception_handler(exc))
            log.debug("try_catch.captured", exc_type=type(exc).__name__)
            return failure
        return Success(output)

    return guarded


def double_map(
    success_fn: Callable[[S1], S2],
    failure_fn: Callable[[F1], F2],
) -> Callable[[Result[S1, F1]], Result[S2, F2]]:
    """Convert two one-track functions into a two-track function, one per track."""
    return either(compose(success_fn, succeed), compose(failure_fn, fail))
