"""
Combination — run two switches side by side and merge their outcomes.

Sequential composition stops at the first failure. `plus` does not: both
switches always run against the same input, so every failure is reported.
This is what you want for validation, where the caller should see all the
problems with a form at once instead of one per round trip.

    validate = plus(lambda a, b: b, list)(first_name_not_blank, last_name_not_blank)
    validate(Person("", ""))
    # → Failure(['FirstName cannot be blank', 'LastName cannot be blank'])
"""

from __future__ import annotations

from typing import Callable, Sequence, TypeVar

from twotrack.result import Failure, Result, Success

S = TypeVar("S")
F = TypeVar("F")
AS = TypeVar("AS")
AF = TypeVar("AF")

Switch = Callable[[S], Result[S, F]]


def plus(
    add_success: Callable[[S, S], AS],
    add_failures: Callable[[Sequence[F]], AF],
) -> Callable[[Switch, Switch], Callable[[S], Result[AS, AF]]]:
    """
    Build a combiner for two switches.

    `add_success` merges the two success payloads. `add_failures` receives the
    failure payloads in switch order, as a tuple of length 1 or 2:

      switch1      switch2      combined
      Success(a)   Success(b)   Success(add_success(a, b))
      Failure(x)   Success(_)   Failure(add_failures((x,)))
      Success(_)   Failure(y)   Failure(add_failures((y,)))
      Failure(x)   Failure(y)   Failure(add_failures((x, y)))
    """

    def combine(switch1: Switch, switch2: Switch) -> Callable[[S], Result[AS, AF]]:
        def combined(value: S) -> Result[AS, AF]:
            match switch1(value), switch2(value):
                case Success(first), Success(second):
                    return Success(add_success(first, second))
                case Failure(first), Success(_):
                    return Failure(add_failures((first,)))
                case Success(_), Failure(second):
                    return Failure(add_failures((second,)))
                case Failure(first), Failure(second):
                    return Failure(add_failures((first, second)))
            raise TypeError("plus() switches must return Success or Failure")

        return combined

    return combine
