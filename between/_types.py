"""
Core type definitions for between combinators.

Типы и алиасы используемые по всей библиотеке.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

# ============================================================================
# Function shapes
# ============================================================================

# Between = what a combinator returns once both boundaries are fixed:
# takes the middle function, gives back the sandwiched one
type Between[A, B, C, D] = Callable[[Callable[[B], C]], Callable[[A], D]]

# ============================================================================
# Mapping context
# ============================================================================

# Fmap = lawful map operation of a context: fmap(f, fa) -> fb
# NOTE: Python has no higher-kinded types, so the context is typing.Any here.
#       Laws (fmap(id) == id, fmap(f . g) == fmap(f) . fmap(g)) are on the caller.
type Fmap = Callable[[Callable[[typing.Any], typing.Any], typing.Any], typing.Any]

__all__ = (
    "Between",
    "Fmap",
)
