"""
Result — the two-track value at the heart of Railway-Oriented Programming.

A Result[S, F] is either Success(data: S) or Failure(error: F). Nothing else.
Failures are ordinary values: they flow down the failure track and every
subsequent step passes them through untouched.

    ┌───────────┐   flat_map    ┌───────────┐   flat_map    ┌──────────┐
    │ validate  │──Success──────│ normalise │──Success──────│  build   │──→ Result[S, F]
    │           │               │           │               │          │
    └─────┬─────┘               └─────┬─────┘               └─────┬────┘
          │ Failure                   │ Failure                   │ Failure
          └───────────────────────────┴───────────────────────────┴──→ Result[S, F]

Both variants are frozen dataclasses, so equality is structural and a Result
never changes after construction. Pattern match on them directly:

    match result:
        case Success(data):
            ...
        case Failure(error):
            ...

`either` is the one place that dispatches on the variant; every other
operation here and in the combinator modules is built on top of it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

S = TypeVar("S")
F = TypeVar("F")
S1 = TypeVar("S1")
F1 = TypeVar("F1")
R = TypeVar("R")


class Result(Generic[S, F]):
    """
    Two-track value: Success(data) or Failure(error).

    Do not subclass; Success and Failure are the only variants.

        >>> Result.success(5).map(lambda x: x * 2)
        Success(10)

        >>> Result.failure("bad input").map(lambda x: x * 2)
        Failure('bad input')
    """

    __slots__ = ()

    def __new__(cls, *args: Any, **kwargs: Any) -> Result[S, F]:
        if cls is Result:
            raise TypeError("Result cannot be instantiated directly; use Success or Failure")
        return object.__new__(cls)

    # ──────────────────────── Introspection ────────────────────────

    def is_success(self) -> bool:
        return isinstance(self, Success)

    def is_failure(self) -> bool:
        return isinstance(self, Failure)

    def value(self) -> S:
        """
        Extract the success payload. Raises ValueError on a Failure.

        Prefer .either() or match/case for safe access.
        """
        return self.either(
            lambda data: data,
            lambda error: _raise(ValueError(f"Cannot get value from a Failure: {error!r}")),
        )

    def error(self) -> F:
        """
        Extract the failure payload. Raises ValueError on a Success.

        Prefer .either() or match/case for safe access.
        """
        return self.either(
            lambda data: _raise(ValueError(f"Cannot get error from a Success: {data!r}")),
            lambda error: error,
        )

    # ──────────────────────── Dispatch ────────────────────────

    def either(
        self,
        on_success: Callable[[S], R],
        on_failure: Callable[[F], R],
    ) -> R:
        """
        Apply on_success to a success payload or on_failure to a failure payload.

        This is the fundamental destructor; everything else goes through it.

            result.either(
                on_success=lambda name: f"Hello {name}",
                on_failure=lambda err: f"Error: {err}",
            )
        """
        match self:
            case Success(data):
                return on_success(data)
            case Failure(error):
                return on_failure(error)
        raise TypeError(f"Not a two-track value: {self!r}")  # pragma: no cover

    # ──────────────────────── Core Transformations ────────────────────────

    def flat_map(self, mapper: Callable[[S], Result[S1, F1]]) -> Result[S1, F | F1]:
        """
        Chain a switch function. Failures pass through and never reach `mapper`.

        Equivalent to Haskell's >>= and Rust's .and_then(). Also spelled
        `result >> mapper`.

            def validate(x: int) -> Result[int, str]:
                return Result.success(x) if x > 0 else Result.failure("Must be positive")

            Result.success(5).flat_map(validate)   # → Success(5)
            Result.success(-1).flat_map(validate)  # → Failure('Must be positive')
        """
        return self.either(mapper, Failure)

    def map(self, mapper: Callable[[S], S1]) -> Result[S1, F]:
        """
        Transform the success payload. Failures pass through unchanged.

            Result.success(5).map(lambda x: x * 2)  # → Success(10)
        """
        return self.flat_map(lambda data: Success(mapper(data)))

    def map_failure(self, mapper: Callable[[F], F1]) -> Result[S, F1]:
        """Transform the failure payload. Successes pass through unchanged."""
        return self.either(Success, lambda error: Failure(mapper(error)))

    def ensure(self, predicate: Callable[[S], bool], error: F) -> Result[S, F]:
        """
        Keep the success only if `predicate` holds for it, otherwise fail with `error`.

            Result.success(order).ensure(lambda o: o.total > 0, "Order total must be positive")
        """
        return self.flat_map(lambda data: Success(data) if predicate(data) else Failure(error))

    # ──────────────────────── Side Effects ────────────────────────

    def peek(self, action: Callable[[S], Any]) -> Result[S, F]:
        """
        Run `action` on the success payload and return this Result unchanged.

        Exceptions raised by `action` propagate.

            result.peek(lambda user: log.info("user.created", user_id=user.id))
        """
        self.either(action, lambda _: None)
        return self

    def peek_failure(self, action: Callable[[F], Any]) -> Result[S, F]:
        """Run `action` on the failure payload and return this Result unchanged."""
        self.either(lambda _: None, action)
        return self

    # ──────────────────────── Recovery ────────────────────────

    def recover(self, recovery_fn: Callable[[F], S]) -> Result[S, F]:
        """Switch back to the success track with a value computed from the failure."""
        return self.either(Success, lambda error: Success(recovery_fn(error)))

    def get_or_else(self, default: S) -> S:
        """Extract the success payload or return `default` on failure."""
        return self.either(lambda data: data, lambda _: default)

    # ──────────────────────── Execution Context ────────────────────────

    def within(self, execution_context: Any) -> Result[S, F]:
        """
        Hand this Result to an execution context (see twotrack.execution).

            result = validate(request).flat_map(normalise).within(LoggingExecutionContext(operation="signup"))
        """
        return execution_context.execute(lambda: self)

    # ──────────────────────── Static Factories ────────────────────────

    @staticmethod
    def success(data: S) -> Result[S, Any]:
        return Success(data)

    @staticmethod
    def failure(error: F) -> Result[Any, F]:
        return Failure(error)

    # ──────────────────────── Dunder methods ────────────────────────

    def __rshift__(self, switch_fn: Callable[[S], Result[S1, F1]]) -> Result[S1, F | F1]:
        """`result >> switch_fn` pipes a two-track value into a switch function."""
        return self.flat_map(switch_fn)

    def __bool__(self) -> bool:
        """Truthy only on the success track, whatever the payload."""
        return self.is_success()


@dataclass(frozen=True, slots=True, repr=False)
class Success(Result[S, F]):
    """The success track."""

    _data: S

    def __repr__(self) -> str:
        return f"Success({self._data!r})"


@dataclass(frozen=True, slots=True, repr=False)
class Failure(Result[S, F]):
    """The failure track."""

    _error: F

    def __repr__(self) -> str:
        return f"Failure({self._error!r})"


def _raise(exc: Exception) -> Any:
    raise exc


def succeed(data: S) -> Result[S, Any]:
    """Wrap `data` in a Success."""
    return Success(data)


def fail(error: F) -> Result[Any, F]:
    """Wrap `error` in a Failure."""
    return Failure(error)


def either(
    on_success: Callable[[S], Result[S1, F1]],
    on_failure: Callable[[F], Result[S1, F1]],
) -> Callable[[Result[S, F]], Result[S1, F1]]:
    """
    Build a two-track function that applies `on_success` or `on_failure`
    depending on the track of its input.

        handle = either(lambda s: succeed(s.upper()), lambda f: succeed(f"recovered: {f}"))
        handle(fail("boom"))  # → Success('recovered: boom')
    """

    def dispatch(result: Result[S, F]) -> Result[S1, F1]:
        return result.either(on_success, on_failure)

    return dispatch
