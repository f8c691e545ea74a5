"""Lifted between combinators

between with one or both boundaries mapped through a context first.
"left" is the outer boundary f, "right" is the inner boundary g; the
flipped forms take them in the other order but lift the same side."""

from __future__ import annotations

import typing
from collections.abc import Callable

from .._types import Fmap
from ..core.between import between
from .fmap import fmap, lift

type _Middle = Callable[[typing.Any], typing.Any]
type _Lifted = Callable[[_Middle], Callable[[typing.Any], typing.Any]]

# Generic combinators (explicit fmap)
def between_fmap_bothM[A, B, C, D](
    f: Callable[[C], D],
    g: Callable[[A], B],
    *,
    fmap: Fmap,
) -> _Lifted:
    """
    Generic lift-both combinator.

    between(fmap f, fmap g): h takes F[B] to G[C], result takes F[A] to G[D].
    """
    return between(lift(f, fmap=fmap), lift(g, fmap=fmap))

def between_fmap_both_flippedM[A, B, C, D](
    g: Callable[[A], B],
    f: Callable[[C], D],
    *,
    fmap: Fmap,
) -> _Lifted:
    """Generic lift-both combinator, inner boundary first."""
    return between_fmap_bothM(f, g, fmap=fmap)

def between_fmap_leftM[A, B, C, D](
    f: Callable[[C], D],
    g: Callable[[A], B],
    *,
    fmap: Fmap,
) -> _Lifted:
    """
    Generic lift-left combinator.

    between(fmap f, g): h takes B to F[C], result takes A to F[D].
    """
    return between(lift(f, fmap=fmap), g)

def between_fmap_left_flippedM[A, B, C, D](
    g: Callable[[A], B],
    f: Callable[[C], D],
    *,
    fmap: Fmap,
) -> _Lifted:
    """Generic lift-left combinator, inner boundary first."""
    return between_fmap_leftM(f, g, fmap=fmap)

def between_fmap_rightM[A, B, C, D](
    f: Callable[[C], D],
    g: Callable[[A], B],
    *,
    fmap: Fmap,
) -> _Lifted:
    """
    Generic lift-right combinator.

    between(f, fmap g): h takes F[B] to C, result takes F[A] to D.
    """
    return between(f, lift(g, fmap=fmap))

def between_fmap_right_flippedM[A, B, C, D](
    g: Callable[[A], B],
    f: Callable[[C], D],
    *,
    fmap: Fmap,
) -> _Lifted:
    """Generic lift-right combinator, inner boundary first."""
    return between_fmap_rightM(f, g, fmap=fmap)

# Sugar (dispatching fmap)
def between_fmap_both[A, B, C, D](f: Callable[[C], D], g: Callable[[A], B]) -> _Lifted:
    """
    Map both boundaries through the context, then between.

    Example:
        from kungfu import Ok

        wrap = between_fmap_both(str, lambda x: x * 2)
        wrap(lambda r: r.map(lambda x: x + 1))(Ok(3))  # Ok("7")

    Operator form: f <~@~> g.
    """
    return between_fmap_bothM(f, g, fmap=fmap)

def between_fmap_both_flipped[A, B, C, D](g: Callable[[A], B], f: Callable[[C], D]) -> _Lifted:
    """Flipped between_fmap_both. Operator form: g <~@@~> f."""
    return between_fmap_bothM(f, g, fmap=fmap)

def between_fmap_left[A, B, C, D](f: Callable[[C], D], g: Callable[[A], B]) -> _Lifted:
    """
    Map the outer boundary through the context, then between.

    The middle function already returns a context: typical for an
    accessor pair forming an isomorphism (g reads, f writes back).

    Operator form: f <~@~ g.
    """
    return between_fmap_leftM(f, g, fmap=fmap)

def between_fmap_left_flipped[A, B, C, D](g: Callable[[A], B], f: Callable[[C], D]) -> _Lifted:
    """Flipped between_fmap_left. Operator form: g ~@@~> f."""
    return between_fmap_leftM(f, g, fmap=fmap)

def between_fmap_right[A, B, C, D](f: Callable[[C], D], g: Callable[[A], B]) -> _Lifted:
    """Map the inner boundary through the context. Operator form: f ~@~> g."""
    return between_fmap_rightM(f, g, fmap=fmap)

def between_fmap_right_flipped[A, B, C, D](g: Callable[[A], B], f: Callable[[C], D]) -> _Lifted:
    """Flipped between_fmap_right. Operator form: g <~@@~ f."""
    return between_fmap_rightM(f, g, fmap=fmap)

__all__ = (
    # Sugar
    "between_fmap_both",
    "between_fmap_both_flipped",
    "between_fmap_left",
    "between_fmap_left_flipped",
    "between_fmap_right",
    "between_fmap_right_flipped",
    # Generic
    "between_fmap_bothM",
    "between_fmap_both_flippedM",
    "between_fmap_leftM",
    "between_fmap_left_flippedM",
    "between_fmap_rightM",
    "between_fmap_right_flippedM",
)
