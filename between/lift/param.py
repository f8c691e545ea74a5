"""Lifted parametrised combinators

Parametrised between combinators whose boundaries, once given the extra
argument, are mapped through a context. Same left/right convention as
lift.core: which side is lifted never depends on the supply order."""

from __future__ import annotations

import typing
from collections.abc import Callable
from functools import partial

from .._helpers import compose
from .._types import Fmap
from ..core.param import between_param_both, between_param_left
from .fmap import fmap, lift

type _Middle = Callable[[typing.Any], typing.Any]
type _ParamLeft = Callable[[_Middle], Callable[[typing.Any], typing.Any]]
type _ParamBoth = Callable[[_Middle], Callable[[typing.Any], Callable[[typing.Any], typing.Any]]]

def _lifting[A, X, Y](
    fn: Callable[[A], Callable[[X], Y]],
    fmap: Fmap,
) -> Callable[[A], Callable[[typing.Any], typing.Any]]:
    # a -> fmap(fn(a), _); fn(a) is evaluated before lifting
    return compose(partial(lift, fmap=fmap), fn)

# Generic combinators (explicit fmap)
def between_param_left_fmap_leftM[A, B, C, D](
    f: Callable[[A], Callable[[C], D]],
    g: Callable[[A], B],
    *,
    fmap: Fmap,
) -> _ParamLeft:
    """
    Generic lens-shaped combinator.

    between_param_left(fmap . f, g): h takes B to F[C], result takes A to F[D].
    """
    return between_param_left(_lifting(f, fmap), g)

def between_param_left_fmap_left_flippedM[A, B, C, D](
    g: Callable[[A], B],
    f: Callable[[A], Callable[[C], D]],
    *,
    fmap: Fmap,
) -> _ParamLeft:
    """Generic lens-shaped combinator, inner boundary first."""
    return between_param_left_fmap_leftM(f, g, fmap=fmap)

def between_param_both_fmap_bothM[A, B, C, D, E](
    f: Callable[[A], Callable[[D], E]],
    g: Callable[[A], Callable[[B], C]],
    *,
    fmap: Fmap,
) -> _ParamBoth:
    """Generic: a -> between(fmap f(a), fmap g(a))."""
    return between_param_both(_lifting(f, fmap), _lifting(g, fmap))

def between_param_both_fmap_both_flippedM[A, B, C, D, E](
    g: Callable[[A], Callable[[B], C]],
    f: Callable[[A], Callable[[D], E]],
    *,
    fmap: Fmap,
) -> _ParamBoth:
    return between_param_both_fmap_bothM(f, g, fmap=fmap)

def between_param_both_fmap_leftM[A, B, C, D, E](
    f: Callable[[A], Callable[[D], E]],
    g: Callable[[A], Callable[[B], C]],
    *,
    fmap: Fmap,
) -> _ParamBoth:
    """Generic: a -> between(fmap f(a), g(a))."""
    return between_param_both(_lifting(f, fmap), g)

def between_param_both_fmap_left_flippedM[A, B, C, D, E](
    g: Callable[[A], Callable[[B], C]],
    f: Callable[[A], Callable[[D], E]],
    *,
    fmap: Fmap,
) -> _ParamBoth:
    return between_param_both_fmap_leftM(f, g, fmap=fmap)

def between_param_both_fmap_rightM[A, B, C, D, E](
    f: Callable[[A], Callable[[D], E]],
    g: Callable[[A], Callable[[B], C]],
    *,
    fmap: Fmap,
) -> _ParamBoth:
    """Generic: a -> between(f(a), fmap g(a))."""
    return between_param_both(f, _lifting(g, fmap))

def between_param_both_fmap_right_flippedM[A, B, C, D, E](
    g: Callable[[A], Callable[[B], C]],
    f: Callable[[A], Callable[[D], E]],
    *,
    fmap: Fmap,
) -> _ParamBoth:
    return between_param_both_fmap_rightM(f, g, fmap=fmap)

# Sugar (dispatching fmap)
def between_param_left_fmap_left[A, B, C, D](
    f: Callable[[A], Callable[[C], D]],
    g: Callable[[A], B],
) -> _ParamLeft:
    """
    Build a van Laarhoven style lens from a setter f and a getter g.

    between_param_left_fmap_left(f, g)(h)(s) == fmap(f(s), h(g(s)))

    Same thing as lens(getter, setter) with arguments swapped: f(s) puts a
    new focus back into s, g reads the focus, h is a context-valued
    modifier of the focus.

    Example:
        from kungfu import Ok

        first = between_param_left_fmap_left(
            lambda pair: lambda x: (x, pair[1]),
            lambda pair: pair[0],
        )
        first(lambda x: Ok(x + 1))((1, "a"))  # Ok((2, "a"))

    Operator form: f <^@~ g.
    """
    return between_param_left_fmap_leftM(f, g, fmap=fmap)

def between_param_left_fmap_left_flipped[A, B, C, D](
    g: Callable[[A], B],
    f: Callable[[A], Callable[[C], D]],
) -> _ParamLeft:
    """Lens from getter first, then setter. Operator form: g ~@@^> f."""
    return between_param_left_fmap_leftM(f, g, fmap=fmap)

def between_param_both_fmap_both[A, B, C, D, E](
    f: Callable[[A], Callable[[D], E]],
    g: Callable[[A], Callable[[B], C]],
) -> _ParamBoth:
    """
    Parametrise both boundaries, then map both through the context.

    between_param_both_fmap_both(f, g)(h)(a)(fb) == fmap(f(a), h(fmap(g(a), fb)))

    Operator form: f <^@^> g.
    """
    return between_param_both_fmap_bothM(f, g, fmap=fmap)

def between_param_both_fmap_both_flipped[A, B, C, D, E](
    g: Callable[[A], Callable[[B], C]],
    f: Callable[[A], Callable[[D], E]],
) -> _ParamBoth:
    """Flipped between_param_both_fmap_both. Operator form: g <^@@^> f."""
    return between_param_both_fmap_bothM(f, g, fmap=fmap)

def between_param_both_fmap_left[A, B, C, D, E](
    f: Callable[[A], Callable[[D], E]],
    g: Callable[[A], Callable[[B], C]],
) -> _ParamBoth:
    """
    Parametrise both boundaries, map only the outer one.

    Shape of a generic lens built from a getter and a setter that both
    take an index: the middle function returns a context.

    Operator form: f <^@^ g.
    """
    return between_param_both_fmap_leftM(f, g, fmap=fmap)

def between_param_both_fmap_left_flipped[A, B, C, D, E](
    g: Callable[[A], Callable[[B], C]],
    f: Callable[[A], Callable[[D], E]],
) -> _ParamBoth:
    """Flipped between_param_both_fmap_left. Operator form: g ^@@^> f."""
    return between_param_both_fmap_leftM(f, g, fmap=fmap)

def between_param_both_fmap_right[A, B, C, D, E](
    f: Callable[[A], Callable[[D], E]],
    g: Callable[[A], Callable[[B], C]],
) -> _ParamBoth:
    """Parametrise both boundaries, map only the inner one. Operator form: f ^@^> g."""
    return between_param_both_fmap_rightM(f, g, fmap=fmap)

def between_param_both_fmap_right_flipped[A, B, C, D, E](
    g: Callable[[A], Callable[[B], C]],
    f: Callable[[A], Callable[[D], E]],
) -> _ParamBoth:
    """Flipped between_param_both_fmap_right. Operator form: g <^@@^ f."""
    return between_param_both_fmap_rightM(f, g, fmap=fmap)

__all__ = (
    # Sugar
    "between_param_left_fmap_left",
    "between_param_left_fmap_left_flipped",
    "between_param_both_fmap_both",
    "between_param_both_fmap_both_flipped",
    "between_param_both_fmap_left",
    "between_param_both_fmap_left_flipped",
    "between_param_both_fmap_right",
    "between_param_both_fmap_right_flipped",
    # Generic
    "between_param_left_fmap_leftM",
    "between_param_left_fmap_left_flippedM",
    "between_param_both_fmap_bothM",
    "between_param_both_fmap_both_flippedM",
    "between_param_both_fmap_leftM",
    "between_param_both_fmap_left_flippedM",
    "between_param_both_fmap_rightM",
    "between_param_both_fmap_right_flippedM",
)
