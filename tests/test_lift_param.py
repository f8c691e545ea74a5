"""
Tests for lifted parametrised combinators (lift.param).
"""

import pytest
from kungfu import Error, Ok

from between import (
    between_param_both,
    between_param_both_fmap_both,
    between_param_both_fmap_both_flipped,
    between_param_both_fmap_left,
    between_param_both_fmap_left_flipped,
    between_param_both_fmap_right,
    between_param_both_fmap_right_flipped,
    between_param_left,
    between_param_left_fmap_left,
    between_param_left_fmap_left_flipped,
    fmap,
    identity,
)
from between.lift import between_param_both_fmap_bothM, between_param_left_fmap_leftM
from tests.fakes import Box, Calls, error_value, ok_value


add = lambda a: lambda x: x + a
mul = lambda a: lambda x: x * a

# pair lens: setter first, getter second
set_first = lambda pair: lambda x: (x, pair[1])
get_first = lambda pair: pair[0]


# =============================================================================
# between_param_left_fmap_left (lens shape)
# =============================================================================


class TestLensShape:
    def test_modify_through_result(self):
        first = between_param_left_fmap_left(set_first, get_first)
        assert ok_value(first(lambda x: Ok(x + 1))((1, "a"))) == (2, "a")

    def test_failed_modifier_leaves_no_structure(self):
        first = between_param_left_fmap_left(set_first, get_first)
        rejecting = lambda _: Error("rejected")
        assert error_value(first(rejecting)((1, "a"))) == "rejected"

    def test_view_through_constant_like_context(self):
        # a context that ignores the mapped function reads the focus
        class Const:
            def __init__(self, value):
                self.value = value

            def map(self, fn):
                return self

        first = between_param_left_fmap_left(set_first, get_first)
        assert first(Const)((7, "b")).value == 7

    def test_set_through_box(self):
        first = between_param_left_fmap_left(set_first, get_first)
        assert first(lambda _: Box("new"))(("old", 1)) == Box(("new", 1))

    def test_matches_unlifted_for_present_values(self):
        h = lambda x: x * 10
        lifted_result = between_param_left_fmap_left(set_first, get_first)(lambda x: Ok(h(x)))((3, "z"))
        assert ok_value(lifted_result) == between_param_left(set_first, get_first)(h)((3, "z"))

    def test_flipped(self):
        h = lambda x: [x, -x]
        assert (
            between_param_left_fmap_left_flipped(get_first, set_first)(h)((2, "q"))
            == between_param_left_fmap_left(set_first, get_first)(h)((2, "q"))
            == [(2, "q"), (-2, "q")]
        )

    def test_generic_with_custom_fmap(self):
        reversed_map = lambda fn, xs: [fn(x) for x in reversed(xs)]
        first = between_param_left_fmap_leftM(set_first, get_first, fmap=reversed_map)
        assert first(lambda x: [x, x + 1])((0, "s")) == [(1, "s"), (0, "s")]


# =============================================================================
# between_param_both lifted variants
# =============================================================================


class TestParamBothFmapBoth:
    @pytest.mark.parametrize(("a", "b"), [(2, 5), (3, -1)])
    def test_present_value_matches_unlifted(self, a, b):
        h = lambda fc: fmap(lambda x: x - 1, fc)
        expected = between_param_both(add, mul)(lambda x: x - 1)(a)(b)
        assert ok_value(between_param_both_fmap_both(add, mul)(h)(a)(Ok(b))) == expected

    def test_absent_value_propagates(self, calls: Calls):
        h = lambda fc: fmap(calls.fn("h", identity), fc)
        combined = between_param_both_fmap_both(add, mul)(h)(2)
        assert error_value(combined(Error("absent"))) == "absent"
        assert calls.log == []

    def test_flipped(self):
        h = identity
        assert (
            between_param_both_fmap_both_flipped(mul, add)(h)(2)([5, 6])
            == between_param_both_fmap_both(add, mul)(h)(2)([5, 6])
            == [12, 14]
        )

    def test_generic_with_custom_fmap(self):
        head_map = lambda fn, xs: [fn(xs[0])]
        combined = between_param_both_fmap_bothM(add, mul, fmap=head_map)(identity)(2)
        assert combined([5, 6, 7]) == [12]


class TestParamBothFmapLeft:
    def test_middle_returns_context(self):
        # h: C -> F[D]
        safe_recip = lambda x: Ok(1 / x) if x else Error("zero")
        combined = between_param_both_fmap_left(add, mul)(safe_recip)
        assert ok_value(combined(2)(4)) == 1 / 8 + 2
        assert error_value(combined(0)(4)) == "zero"

    def test_flipped(self):
        h = lambda c: [c, c]
        assert (
            between_param_both_fmap_left_flipped(mul, add)(h)(3)(1)
            == between_param_both_fmap_left(add, mul)(h)(3)(1)
            == [6, 6]
        )


class TestParamBothFmapRight:
    def test_argument_is_context(self):
        # h: F[C] -> D
        first_or_zero = lambda xs: xs[0] if xs else 0
        combined = between_param_both_fmap_right(add, mul)(first_or_zero)
        assert combined(2)([5, 9]) == 12
        assert combined(2)([]) == 2

    def test_flipped(self):
        h = sum
        assert (
            between_param_both_fmap_right_flipped(mul, add)(h)(2)([1, 2])
            == between_param_both_fmap_right(add, mul)(h)(2)([1, 2])
            == 8
        )

    def test_boundaries_parametrised_before_context_arrives(self, calls: Calls):
        combined = between_param_both_fmap_right(calls.fn("f", add), calls.fn("g", mul))(sum)
        with_a = combined(3)
        assert calls.log == ["f", "g"]
        assert with_a((1, 1)) == 9
