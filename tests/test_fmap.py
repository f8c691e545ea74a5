"""
Tests for the fmap dispatcher and its built-in instances.

Checked:
1. Result: Ok mapped, Error passed through without calling fn
2. LazyCoroResult: mapping deferred until awaited
3. list / tuple / dict / .map fallback
4. Functor laws on sampled values
5. Registration of new contexts and NotMappableError
"""

import logging
from dataclasses import dataclass

import pytest
from kungfu import Error, LazyCoroResult, Ok, Result

from between import NotMappableError, compose, fmap, identity, map_over
from between.lift import lift
from tests.fakes import Box, Calls, error_value, ok_value, run_lazy


inc = lambda x: x + 1


class TestResultInstance:
    def test_maps_ok(self):
        assert ok_value(fmap(inc, Ok(1))) == 2

    def test_error_passes_through_untouched(self, calls: Calls):
        assert error_value(fmap(calls.fn("fn", inc), Error("missing"))) == "missing"
        assert calls.log == []


class TestLazyCoroResultInstance:
    def test_maps_when_awaited(self, calls: Calls):
        async def run() -> Result[int, str]:
            return Ok(20)

        mapped = fmap(calls.fn("fn", inc), LazyCoroResult(run))
        assert calls.log == []
        assert ok_value(run_lazy(mapped)) == 21
        assert calls.log == ["fn"]

    def test_error_skips_function(self, calls: Calls):
        async def run() -> Result[int, str]:
            return Error("down")

        mapped = fmap(calls.fn("fn", inc), LazyCoroResult(run))
        assert error_value(run_lazy(mapped)) == "down"
        assert calls.log == []


class TestBuiltinContainers:
    def test_list(self):
        assert fmap(str, [1, 2]) == ["1", "2"]

    def test_tuple(self):
        assert fmap(inc, (1, 2, 3)) == (2, 3, 4)

    def test_dict_maps_values(self):
        assert fmap(len, {"a": "xyz", "b": ""}) == {"a": 3, "b": 0}

    def test_empty_list_never_calls(self, calls: Calls):
        assert fmap(calls.fn("fn", inc), []) == []
        assert calls.log == []

    def test_map_method_fallback(self, caplog: pytest.LogCaptureFixture):
        with caplog.at_level(logging.DEBUG, logger="between.lift.fmap"):
            assert fmap(inc, Box(41)) == Box(42)
        assert "using its .map method" in caplog.text


class TestFunctorLaws:
    @pytest.mark.parametrize("fa", [Error("e"), [1, 2], (4,), {"k": 5}, Box(6)])
    def test_identity(self, fa):
        assert fmap(identity, fa) == fa

    def test_identity_on_ok(self):
        assert ok_value(fmap(identity, Ok(3))) == 3

    @pytest.mark.parametrize("fa", [[1, 2, 3], (0, -1), {"x": 2}, Box(7)])
    def test_composition(self, fa):
        f = lambda x: x * 3
        g = lambda x: x - 1
        assert fmap(compose(f, g), fa) == fmap(f, fmap(g, fa))

    def test_composition_on_result(self):
        f = lambda x: x * 3
        g = lambda x: x - 1
        assert ok_value(fmap(compose(f, g), Ok(5))) == ok_value(fmap(f, fmap(g, Ok(5)))) == 12


class TestRegistration:
    def test_unknown_context_raises(self):
        with pytest.raises(NotMappableError) as exc_info:
            fmap(inc, 42)
        assert exc_info.value.context_type is int
        assert isinstance(exc_info.value, TypeError)

    def test_register_new_context(self):
        @dataclass(frozen=True)
        class Pair:
            left: int
            right: int

        @map_over.register(Pair)
        def _(fa: Pair, fn):
            return Pair(fn(fa.left), fn(fa.right))

        assert fmap(inc, Pair(1, 2)) == Pair(2, 3)


class TestLift:
    def test_lift_is_fmap_section(self):
        lifted = lift(inc)
        assert lifted([1, 2]) == [2, 3]
        assert ok_value(lifted(Ok(1))) == 2

    def test_lift_with_custom_fmap(self):
        reversed_map = lambda fn, xs: [fn(x) for x in reversed(xs)]
        assert lift(inc, fmap=reversed_map)([1, 2]) == [3, 2]
