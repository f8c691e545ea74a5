"""Internal helpers for between combinators.

Strict composition and the currying bridge between curried combinators
and ordinary Python callables. Not part of the public API but exported
for building custom derived combinators."""

from __future__ import annotations

from collections.abc import Callable

# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x

# Strict composition
def compose[A, B, C](f: Callable[[B], C], g: Callable[[A], B], /) -> Callable[[A], C]:
    """
    Strict function composition: compose(f, g)(x) == f(g(x)).

    g(x) is fully evaluated before f is entered, so an exception raised
    by g surfaces before f ever runs.

    Example:
        inc_then_neg = compose(lambda x: -x, lambda x: x + 1)
        inc_then_neg(3)  # -4
    """

    def composed(x: A) -> C:
        y = g(x)
        return f(y)

    return composed

def compose_right[A, B, C](g: Callable[[A], B], f: Callable[[B], C], /) -> Callable[[A], C]:
    """
    Composition in pipe order: compose_right(g, f) == compose(f, g).

    partial(compose_right, g) is the "precompose with g" section.
    """
    return compose(f, g)

# Currying bridge (Python n-ary callables <-> curried)
def curry2[A, B, C](fn: Callable[[A, B], C]) -> Callable[[A], Callable[[B], C]]:
    """Turn fn(a, b) into fn(a)(b)."""

    def first(a: A) -> Callable[[B], C]:
        def second(b: B) -> C:
            return fn(a, b)

        return second

    return first

def curry3[A, B, C, D](
    fn: Callable[[A, B, C], D],
) -> Callable[[A], Callable[[B], Callable[[C], D]]]:
    """Turn fn(a, b, c) into fn(a)(b)(c)."""

    def first(a: A) -> Callable[[B], Callable[[C], D]]:
        def second(b: B) -> Callable[[C], D]:
            def third(c: C) -> D:
                return fn(a, b, c)

            return third

        return second

    return first

def uncurry2[A, B, C](fn: Callable[[A], Callable[[B], C]]) -> Callable[[A, B], C]:
    """Turn fn(a)(b) into fn(a, b)."""

    def uncurried(a: A, b: B) -> C:
        return fn(a)(b)

    return uncurried

def uncurry3[A, B, C, D](
    fn: Callable[[A], Callable[[B], Callable[[C], D]]],
) -> Callable[[A, B, C], D]:
    """Turn fn(a)(b)(c) into fn(a, b, c)."""

    def uncurried(a: A, b: B, c: C) -> D:
        return fn(a)(b)(c)

    return uncurried

__all__ = (
    # Identity
    "identity",
    # Composition
    "compose",
    "compose_right",
    # Currying
    "curry2",
    "curry3",
    "uncurry2",
    "uncurry3",
)
