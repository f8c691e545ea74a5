"""
Parametrised between combinators
================================

Further parametrise the boundaries of between with an extra argument.
"""

from __future__ import annotations

from collections.abc import Callable

from .._types import Between
from .between import between


def between_param_left[A, B, C, D](
    f: Callable[[A], Callable[[C], D]],
    g: Callable[[A], B],
) -> Between[A, B, C, D]:
    """
    As between, but the outer boundary also receives the argument.

    between_param_left(f, g)(h)(a) == f(a)(h(g(a)))

    The same a feeds f and g. f(a) is evaluated first, then g(a).

    Operator form: f ^@~ g.
    """

    def with_middle(h: Callable[[B], C]) -> Callable[[A], D]:
        def run(a: A) -> D:
            fa = f(a)
            return between(fa, g)(h)(a)

        return run

    return with_middle


def between_param_left_flipped[A, B, C, D](
    g: Callable[[A], B],
    f: Callable[[A], Callable[[C], D]],
) -> Between[A, B, C, D]:
    """Flipped variant of between_param_left. Operator form: g ~@@^ f."""
    return between_param_left(f, g)


def between_param_both[A, B, C, D, E](
    f: Callable[[A], Callable[[D], E]],
    g: Callable[[A], Callable[[B], C]],
) -> Callable[[Callable[[C], D]], Callable[[A], Callable[[B], E]]]:
    """
    Pass an extra argument to both boundaries.

    between_param_both(f, g)(h)(a)(b) == f(a)(h(g(a)(b)))

    Unlike between_param_left, the parameter a and the composed call's
    argument b are independent. f(a) and g(a) are evaluated as soon as a
    arrives, before b is known.

    Example:
        add = lambda a: lambda x: x + a
        mul = lambda a: lambda x: x * a
        between_param_both(add, mul)(identity)(2)(5)  # 12

    Operator form: f ^@^ g.
    """

    def with_middle(h: Callable[[C], D]) -> Callable[[A], Callable[[B], E]]:
        def run(a: A) -> Callable[[B], E]:
            fa = f(a)
            ga = g(a)
            return between(fa, ga)(h)

        return run

    return with_middle


def between_param_both_flipped[A, B, C, D, E](
    g: Callable[[A], Callable[[B], C]],
    f: Callable[[A], Callable[[D], E]],
) -> Callable[[Callable[[C], D]], Callable[[A], Callable[[B], E]]]:
    """Flipped variant of between_param_both. Operator form: g ^@@^ f."""
    return between_param_both(f, g)


__all__ = (
    "between_param_left",
    "between_param_left_flipped",
    "between_param_both",
    "between_param_both_flipped",
)
