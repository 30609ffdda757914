"""
Sequencing — composing plain functions and switch functions.

Two kinds of plumbing:

  - Plain composition: `compose(f, g)` is `lambda a: g(f(a))`, and
    `pipe(value, f, g)` is `g(f(value))`.
  - Switch composition: `bind(f)` turns a switch function (one-track in,
    two-track out) into a two-track function, and `kleisli(f, g)` glues two
    switches into one. Once a step fails, later switches are never called.

Operator forms are opt-in through explicit wrappers:

    count_digits = Composable(str) >> len
    count_digits(123)  # → 3

    validate = SwitchComposable(not_empty) >> not_too_long
    validate("")       # → Failure('empty')
"""

from __future__ import annotations

from functools import reduce
from typing import Any, Callable, Generic, TypeVar

from twotrack.result import Result, fail

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
S = TypeVar("S")
F = TypeVar("F")
S1 = TypeVar("S1")
F1 = TypeVar("F1")


def _identity(value: A) -> A:
    return value


def _compose2(first: Callable[[A], B], second: Callable[[B], C]) -> Callable[[A], C]:
    def composed(value: A) -> C:
        return second(first(value))

    return composed


def compose(*functions: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """
    Compose functions left to right: compose(f, g, h)(x) == h(g(f(x))).

    compose() with no arguments is the identity function.
    """
    return reduce(_compose2, functions, _identity)


def pipe(value: Any, *functions: Callable[[Any], Any]) -> Any:
    """Push `value` through `functions` in order: pipe(x, f, g) == g(f(x))."""
    return compose(*functions)(value)


def bind(switch_fn: Callable[[S], Result[S1, F1]]) -> Callable[[Result[S, F]], Result[S1, F | F1]]:
    """
    Convert a switch function into a two-track function.

    bind(f)(Success(s)) == f(s)
    bind(f)(Failure(e)) == Failure(e), and f is never called.
    """

    def bound(result: Result[S, F]) -> Result[S1, F | F1]:
        return result.either(switch_fn, fail)

    return bound


def pipe_switch(result: Result[S, F], switch_fn: Callable[[S], Result[S1, F1]]) -> Result[S1, F | F1]:
    """Pipe a two-track value into a switch function. Same as `result >> switch_fn`."""
    return bind(switch_fn)(result)


def kleisli(*switches: Callable[[Any], Result[Any, Any]]) -> Callable[[Any], Result[Any, Any]]:
    """
    Compose switch functions into one switch.

    kleisli(f1, f2)(x) == bind(f2)(f1(x)). At least one switch is required.
    """
    if not switches:
        raise ValueError("kleisli() needs at least one switch function")
    first, *rest = switches
    return compose(first, *(bind(switch_fn) for switch_fn in rest))


class Composable(Generic[A, B]):
    """
    Callable wrapper whose `>>` composes plain functions.

        shout = Composable(str.strip) >> str.upper
        shout("  hi ")  # → 'HI'
    """

    __slots__ = ("_fn",)

    def __init__(self, fn: Callable[[A], B]) -> None:
        self._fn = fn

    def __rshift__(self, next_fn: Callable[[B], C]) -> Composable[A, C]:
        return Composable(compose(self._fn, next_fn))

    def __call__(self, value: A) -> B:
        return self._fn(value)

    def __repr__(self) -> str:
        return f"Composable({self._fn!r})"


class SwitchComposable(Generic[A, S, F]):
    """
    Callable wrapper whose `>>` composes switch functions (Kleisli composition).

        validate = SwitchComposable(not_empty) >> not_too_long >> no_digits
    """

    __slots__ = ("_switch",)

    def __init__(self, switch_fn: Callable[[A], Result[S, F]]) -> None:
        self._switch = switch_fn

    def __rshift__(self, next_switch: Callable[[S], Result[S1, F]]) -> SwitchComposable[A, S1, F]:
        return SwitchComposable(kleisli(self._switch, next_switch))

    def __call__(self, value: A) -> Result[S, F]:
        return self._switch(value)

    def __repr__(self) -> str:
        return f"SwitchComposable({self._switch!r})"
