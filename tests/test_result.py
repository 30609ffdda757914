"""
Tests for the Result type.

Tests cover:
  - succeed/fail construction and introspection
  - either (method and curried free function)
  - map, flat_map, map_failure, ensure, the >> operator
  - Side effects (peek, peek_failure) and recovery
  - Pattern matching, structural equality, immutability, repr
"""

from __future__ import annotations

import dataclasses

import pytest

from twotrack import Failure, Result, Success, either, fail, succeed


# ═══════════════════════════════════════════════════════════════
# 1. Creation & Introspection
# ═══════════════════════════════════════════════════════════════


class TestConstruction:
    def test_succeed_wraps_in_success(self):
        result = succeed("Some data")
        assert isinstance(result, Success)
        assert result.is_success()
        assert not result.is_failure()
        assert result.value() == "Some data"

    def test_fail_wraps_in_failure(self):
        error = NotImplementedError()
        result = fail(error)
        assert isinstance(result, Failure)
        assert result.is_failure()
        assert result.error() is error

    def test_static_factories(self):
        assert Result.success(1) == Success(1)
        assert Result.failure("x") == Failure("x")

    def test_base_type_cannot_be_instantiated(self):
        with pytest.raises(TypeError, match="cannot be instantiated directly"):
            Result()

    def test_none_is_a_legal_payload(self):
        assert succeed(None).is_success()
        assert fail(None).is_failure()

    def test_truthiness_follows_track(self):
        assert succeed(0)
        assert succeed(False)
        assert not fail("bad")


class TestExtraction:
    def test_value_on_failure_raises(self):
        with pytest.raises(ValueError, match="Cannot get value from a Failure"):
            fail("missing").value()

    def test_error_on_success_raises(self):
        with pytest.raises(ValueError, match="Cannot get error from a Success"):
            succeed(42).error()

    def test_get_or_else(self):
        assert succeed(1).get_or_else(0) == 1
        assert fail("x").get_or_else(0) == 0


# ═══════════════════════════════════════════════════════════════
# 2. Either
# ═══════════════════════════════════════════════════════════════


def _on_success(i: int) -> Result[str, str]:
    return succeed(f"SuccessFunc called with input {i}")


def _on_failure(f: str) -> Result[str, str]:
    return succeed(f"FailureFunc called with input {f}")


class TestEither:
    def test_applies_success_function_to_success(self):
        assert either(_on_success, _on_failure)(Success(5)) == Success("SuccessFunc called with input 5")

    def test_applies_failure_function_to_failure(self):
        assert either(_on_success, _on_failure)(Failure("FAILING")) == Success(
            "FailureFunc called with input FAILING"
        )

    def test_method_form_returns_branch_value(self):
        msg = fail("not found").either(
            on_success=lambda v: f"Got: {v}",
            on_failure=lambda err: f"Error: {err}",
        )
        assert msg == "Error: not found"


# ═══════════════════════════════════════════════════════════════
# 3. Transformations
# ═══════════════════════════════════════════════════════════════


class TestMap:
    def test_map_transforms_success(self):
        assert succeed("abc").map(str.upper) == Success("ABC")

    def test_map_leaves_failure_untouched(self):
        assert fail(123).map(str.upper) == Failure(123)

    def test_map_chain(self):
        assert succeed(3).map(lambda x: x + 1).map(lambda x: x * 2).map(str) == Success("8")


class TestFlatMap:
    def test_chains_switches(self, not_empty, not_too_long):
        assert succeed("abc").flat_map(not_empty).flat_map(not_too_long) == Success("abc")

    def test_short_circuits_on_first_failure(self):
        calls: list[str] = []

        def step_a(x: int) -> Result[int, str]:
            calls.append("a")
            return fail("fail at a")

        def step_b(x: int) -> Result[int, str]:
            calls.append("b")
            return succeed(x + 1)

        result = succeed(1).flat_map(step_a).flat_map(step_b)
        assert result == Failure("fail at a")
        assert calls == ["a"]

    def test_rshift_pipes_into_switch(self):
        def max_five_chars(s: str) -> Result[str, str]:
            return fail("Too long") if len(s) > 5 else succeed(s)

        assert (succeed("input") >> max_five_chars) == Success("input")
        assert (succeed("Too many chars") >> max_five_chars) == Failure("Too long")
        assert (fail("FAIL") >> max_five_chars) == Failure("FAIL")


class TestMapFailure:
    def test_transforms_failure(self):
        assert fail("original").map_failure(lambda e: f"Wrapped: {e}") == Failure("Wrapped: original")

    def test_passes_success_through(self):
        assert succeed(42).map_failure(lambda e: "never") == Success(42)


class TestEnsure:
    def test_keeps_success_when_predicate_holds(self):
        assert succeed(10).ensure(lambda x: x > 0, "Must be positive") == Success(10)

    def test_fails_when_predicate_false(self):
        assert succeed(-1).ensure(lambda x: x > 0, "Must be positive") == Failure("Must be positive")

    def test_existing_failure_wins(self):
        assert fail("missing").ensure(lambda x: False, "never reached") == Failure("missing")


# ═══════════════════════════════════════════════════════════════
# 4. Side effects & Recovery
# ═══════════════════════════════════════════════════════════════


class TestPeek:
    def test_peek_runs_on_success_only(self):
        seen: list[int] = []
        assert succeed(1).peek(seen.append) == Success(1)
        assert fail("x").peek(seen.append) == Failure("x")
        assert seen == [1]

    def test_peek_failure_runs_on_failure_only(self):
        seen: list[str] = []
        succeed(1).peek_failure(seen.append)
        fail("x").peek_failure(seen.append)
        assert seen == ["x"]

    def test_peek_propagates_exceptions(self):
        def boom(_):
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            succeed(1).peek(boom)


class TestRecover:
    def test_recover_moves_failure_to_success(self):
        assert fail("gone").recover(len) == Success(4)

    def test_recover_leaves_success(self):
        assert succeed(1).recover(lambda e: 0) == Success(1)


# ═══════════════════════════════════════════════════════════════
# 5. Pattern Matching, Equality, Immutability
# ═══════════════════════════════════════════════════════════════


class TestPatternMatching:
    @pytest.mark.parametrize(
        ("result", "expected"),
        [(Success(1), 1), (Failure("f"), "f")],
    )
    def test_match_extracts_payload(self, result, expected):
        match result:
            case Success(data):
                outcome = data
            case Failure(error):
                outcome = error
        assert outcome == expected


class TestEquality:
    def test_success_equality_is_structural(self):
        assert Success([1, 2]) == Success([1, 2])
        assert Success(1) != Success(2)

    def test_failure_equality_is_structural(self):
        assert Failure("x") == Failure("x")
        assert Failure("x") != Failure("y")

    def test_success_never_equals_failure(self):
        assert Success("same") != Failure("same")
        assert Failure("same") != Success("same")

    def test_hashable_with_hashable_payload(self):
        assert len({Success(1), Success(1), Failure(1)}) == 2


class TestImmutability:
    def test_success_is_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            Success(1)._data = 2  # type: ignore[misc]

    def test_transformations_return_new_results(self):
        original = succeed(1)
        mapped = original.map(lambda x: x + 1)
        assert original == Success(1)
        assert mapped is not original


class TestRepr:
    def test_repr(self):
        assert repr(Success("abc")) == "Success('abc')"
        assert repr(Failure("empty")) == "Failure('empty')"
