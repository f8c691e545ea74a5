"""
Arity-extended between combinators
==================================

Apply the same inner boundary to every argument of an n-ary middle
function. Built by self-composing between, never by hand.

Suffix "2l"/"3l": the number is the arity of the middle function,
"l" is for "left associative" (the nesting of between).
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from functools import reduce

from .._helpers import curry2, curry3, identity, uncurry2, uncurry3
from .between import between


def between2l[A, B, C, D](
    f: Callable[[C], D],
    g: Callable[[A], B],
) -> Callable[[Callable[[B, B], C]], Callable[[A, A], D]]:
    """
    Apply g to each argument of a binary function and f to its result.

    between2l(f, g)(h)(a, b) == f(h(g(a), g(b)))

    Defined as between(between(f, g), g) over the curried middle function.

    Example:
        between2l(operator.neg, lambda x: x + 1)(operator.add)(3, 4)  # -9
    """
    curried = between(between(f, g), g)

    def with_middle(h: Callable[[B, B], C]) -> Callable[[A, A], D]:
        return uncurry2(curried(curry2(h)))

    return with_middle


def between3l[A, B, C, D](
    f: Callable[[C], D],
    g: Callable[[A], B],
) -> Callable[[Callable[[B, B, B], C]], Callable[[A, A, A], D]]:
    """
    Ternary analogue of between2l.

    between3l(f, g)(h)(a, b, c) == f(h(g(a), g(b), g(c)))

    Defined as between(between(between(f, g), g), g).
    """
    curried = between(between(between(f, g), g), g)

    def with_middle(h: Callable[[B, B, B], C]) -> Callable[[A, A, A], D]:
        return uncurry3(curried(curry3(h)))

    return with_middle


def on[A, B, C](
    op: Callable[[B, B], C],
    g: Callable[[A], B],
) -> Callable[[A, A], C]:
    """
    Classic "on": on(op, g)(a, b) == op(g(a), g(b)).

    Same thing as between2l(identity, g)(op).

    Example:
        same_length = on(operator.eq, len)
        same_length("abc", "xyz")  # True
    """
    return between2l(identity, g)(op)


def between_chain(
    f: Callable[[typing.Any], typing.Any],
    *gs: Callable[[typing.Any], typing.Any],
) -> Callable[[Callable[..., typing.Any]], Callable[..., typing.Any]]:
    """
    Left fold of between over inner boundaries.

    between_chain(f, g1, g2) == between(between(f, g1), g2)

    The middle function is curried, one argument per inner boundary.
    As with nested between, the last boundary prepares the first argument:
    between_chain(f, g1, g2)(h)(a)(b) == f(h(g2(a))(g1(b))).
    """
    if not gs:
        raise ValueError("between_chain(): at least one inner boundary is required")

    return reduce(between, gs, f)


__all__ = ("between2l", "between3l", "on", "between_chain")
