"""
Tests for plus — parallel switches with failure accumulation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import pytest

from twotrack import Failure, Result, Success, fail, plus, succeed


@dataclass(frozen=True)
class Input:
    first_name: str
    last_name: str


def cannot_be_blank(accessor: Callable[[Input], str], attribute: str) -> Callable[[Input], Result[Input, str]]:
    def validate(value: Input) -> Result[Input, str]:
        return fail(f"{attribute} cannot be blank") if not accessor(value) else succeed(value)

    return validate


first_name_not_blank = cannot_be_blank(lambda i: i.first_name, "FirstName")
last_name_not_blank = cannot_be_blank(lambda i: i.last_name, "LastName")


def take_last(first: Input, second: Input) -> Input:
    return second


class TestPlus:
    @pytest.fixture()
    def validate(self):
        return plus(take_last, list)(first_name_not_blank, last_name_not_blank)

    def test_both_succeed(self, validate):
        assert validate(Input("first", "last")) == Success(Input("first", "last"))

    def test_first_fails(self, validate):
        assert validate(Input("", "last")) == Failure(["FirstName cannot be blank"])

    def test_second_fails(self, validate):
        assert validate(Input("first", "")) == Failure(["LastName cannot be blank"])

    def test_both_fail_accumulates_in_order(self, validate):
        assert validate(Input("", "")) == Failure(["FirstName cannot be blank", "LastName cannot be blank"])

    def test_success_combiner_sees_both_payloads(self):
        def double(x: int) -> Result[int, str]:
            return succeed(x * 2)

        def square(x: int) -> Result[int, str]:
            return succeed(x * x)

        assert plus(lambda a, b: (a, b), list)(double, square)(3) == Success((6, 9))

    def test_failure_combiner_receives_a_sequence(self):
        received: list[tuple] = []

        def record(failures):
            received.append(tuple(failures))
            return len(failures)

        combined = plus(take_last, record)(first_name_not_blank, last_name_not_blank)
        assert combined(Input("", "")) == Failure(2)
        assert combined(Input("", "x")) == Failure(1)
        assert received == [
            ("FirstName cannot be blank", "LastName cannot be blank"),
            ("FirstName cannot be blank",),
        ]

    def test_evaluates_both_switches_even_after_a_failure(self):
        calls: list[str] = []

        def failing(x: int) -> Result[int, str]:
            calls.append("failing")
            return fail("no")

        def tracking(x: int) -> Result[int, str]:
            calls.append("tracking")
            return succeed(x)

        assert plus(take_last, list)(failing, tracking)(1) == Failure(["no"])
        assert calls == ["failing", "tracking"]

    def test_exceptions_from_switches_propagate(self):
        def broken(x: int) -> Result[int, str]:
            raise RuntimeError("broken switch")

        with pytest.raises(RuntimeError, match="broken switch"):
            plus(take_last, list)(broken, succeed)(1)
