"""
Symbol table
============

The combinators were born as infix operators. This module keeps the
operator spellings and their fixity next to the named functions, so
code and docs written against the operator names can still be read
(and looked up) here.

Naming of the spellings:
- "~@~" is the core shape, "@@" marks the flipped form
- "^" on a side: that boundary also takes the extra argument
- "<" / ">" on a side: that side is mapped through the context
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Literal

from ._errors import UnknownSymbolError
from ._helpers import compose
from .core import (
    between,
    between_flipped,
    between_param_both,
    between_param_both_flipped,
    between_param_left,
    between_param_left_flipped,
)
from .lift import (
    between_fmap_both,
    between_fmap_both_flipped,
    between_fmap_left,
    between_fmap_left_flipped,
    between_fmap_right,
    between_fmap_right_flipped,
    between_param_both_fmap_both,
    between_param_both_fmap_both_flipped,
    between_param_both_fmap_left,
    between_param_both_fmap_left_flipped,
    between_param_both_fmap_right,
    between_param_both_fmap_right_flipped,
    between_param_left_fmap_left,
    between_param_left_fmap_left_flipped,
)

logger = logging.getLogger(__name__)

type Associativity = Literal["left", "right", "none"]


@dataclass(frozen=True, slots=True)
class Fixity:
    """How the operator parses: associativity and precedence (0-9)."""

    associativity: Associativity
    precedence: int

    def __post_init__(self) -> None:
        if not 0 <= self.precedence <= 9:
            raise ValueError(f"Fixity.precedence must be in 0..9, got {self.precedence}")


@dataclass(frozen=True, slots=True)
class Symbol:
    """Operator spelling bound to its named combinator."""

    spelling: str
    function: Callable[..., typing.Any]
    fixity: Fixity

    @property
    def name(self) -> str:
        return self.function.__name__


INFIXL_8 = Fixity("left", 8)
INFIXR_8 = Fixity("right", 8)
INFIX_8 = Fixity("none", 8)
# Composition binds tighter than every combinator
INFIXR_9 = Fixity("right", 9)


def _table(*symbols: Symbol) -> Mapping[str, Symbol]:
    return MappingProxyType({s.spelling: s for s in symbols})


SYMBOLS: Mapping[str, Symbol] = _table(
    Symbol(".", compose, INFIXR_9),
    # Core
    Symbol("~@~", between, INFIXL_8),
    Symbol("~@@~", between_flipped, INFIXR_8),
    # Parametrised
    Symbol("^@~", between_param_left, INFIXL_8),
    Symbol("~@@^", between_param_left_flipped, INFIXR_8),
    Symbol("^@^", between_param_both, INFIX_8),
    Symbol("^@@^", between_param_both_flipped, INFIX_8),
    # Lifted
    Symbol("<~@~>", between_fmap_both, INFIX_8),
    Symbol("<~@@~>", between_fmap_both_flipped, INFIX_8),
    Symbol("<~@~", between_fmap_left, INFIXL_8),
    Symbol("~@@~>", between_fmap_left_flipped, INFIXR_8),
    Symbol("~@~>", between_fmap_right, INFIXL_8),
    Symbol("<~@@~", between_fmap_right_flipped, INFIXR_8),
    # Lifted parametrised
    Symbol("<^@~", between_param_left_fmap_left, INFIXL_8),
    Symbol("~@@^>", between_param_left_fmap_left_flipped, INFIXL_8),
    Symbol("<^@^>", between_param_both_fmap_both, INFIX_8),
    Symbol("<^@@^>", between_param_both_fmap_both_flipped, INFIX_8),
    Symbol("<^@^", between_param_both_fmap_left, INFIX_8),
    Symbol("^@@^>", between_param_both_fmap_left_flipped, INFIX_8),
    Symbol("^@^>", between_param_both_fmap_right, INFIX_8),
    Symbol("<^@@^", between_param_both_fmap_right_flipped, INFIX_8),
)


def lookup(spelling: str) -> Symbol:
    """Symbol entry for an operator spelling. Raises UnknownSymbolError."""
    try:
        return SYMBOLS[spelling]
    except KeyError:
        logger.debug("symbols: unknown operator %r", spelling)
        raise UnknownSymbolError(spelling) from None


def by_symbol(spelling: str) -> Callable[..., typing.Any]:
    """
    Named combinator for an operator spelling.

    Example:
        by_symbol("~@~") is between          # True
        by_symbol("<^@~")(setter, getter)    # lens-shaped combinator
    """
    return lookup(spelling).function


def fixity_of(spelling: str) -> Fixity:
    """Fixity of an operator spelling."""
    return lookup(spelling).fixity


__all__ = (
    "Associativity",
    "Fixity",
    "Symbol",
    "SYMBOLS",
    "by_symbol",
    "fixity_of",
    "lookup",
)
