"""
Between combinator
==================

Captures the pattern `lambda h: compose(f, compose(h, g))` where f and g
are fixed. Everything else in the package is built on top of it.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import partial

from .._helpers import compose, compose_right
from .._types import Between


def between[A, B, C, D](
    f: Callable[[C], D],
    g: Callable[[A], B],
) -> Between[A, B, C, D]:
    """
    Sandwich a middle function between two fixed boundaries.

    between(f, g)(h)(a) == f(h(g(a)))

    Built by composing the act of composing, not by direct application:
    postcompose with f after precomposing with g.

    Evaluation is strict at both boundaries: g(a) runs before h, h runs
    before f. Nothing runs until the final argument arrives.

    Example:
        from between import between

        wrap = between(str.upper, str.strip)
        wrap(lambda s: s + "!")("  hi ")  # "HI!"

    Operator form: f ~@~ g (left associative).
    """
    return compose(partial(compose, f), partial(compose_right, g))


def between_flipped[A, B, C, D](
    g: Callable[[A], B],
    f: Callable[[C], D],
) -> Between[A, B, C, D]:
    """
    Flipped variant of between: inner boundary first.

    between_flipped(g, f) == between(f, g)

    Operator form: g ~@@~ f (right associative).
    """
    return between(f, g)


__all__ = ("between", "between_flipped")
