"""
Between: strict function combinators for the f . h . g pattern.

Given two fixed boundary functions f and g, between(f, g) turns a middle
function h into f . h . g. Everything else is derived from it.

Architecture:
- _helpers: strict composition (compose) and currying bridge
- core:     between, flipped, parametrised and arity-extended forms
- lift:     the same combinators with boundaries mapped through a context
            (generic *M functions take fmap=, sugar uses dispatching fmap)
- symbols:  original operator spellings and their fixity

All composition is strict: every intermediate result is computed before
the next function is entered, so exceptions surface exactly where the
failing function is reached.
"""

# Core types
from ._types import Between, Fmap

# Internal helpers (for custom combinators)
from . import _helpers
from ._helpers import compose, compose_right, identity

# Core combinators
from .core import (
    between,
    between2l,
    between3l,
    between_chain,
    between_flipped,
    between_param_both,
    between_param_both_flipped,
    between_param_left,
    between_param_left_flipped,
    on,
)

# Lifted combinators (namespace import - preferred)
from . import lift
from .lift import (
    # Mapping
    fmap,
    map_over,
    # Sugar
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

# Symbol table
from . import symbols
from .symbols import Fixity, by_symbol, fixity_of

# Errors
from ._errors import NotMappableError, UnknownSymbolError

__all__ = (
    # Types
    "Between",
    "Fmap",
    # Internal helpers
    "_helpers",
    "compose",
    "compose_right",
    "identity",
    # Core
    "between",
    "between_flipped",
    "between_param_left",
    "between_param_left_flipped",
    "between_param_both",
    "between_param_both_flipped",
    "between2l",
    "between3l",
    "between_chain",
    "on",
    # Lift module (namespace import - preferred)
    "lift",
    "fmap",
    "map_over",
    # Lifted - sugar
    "between_fmap_both",
    "between_fmap_both_flipped",
    "between_fmap_left",
    "between_fmap_left_flipped",
    "between_fmap_right",
    "between_fmap_right_flipped",
    "between_param_left_fmap_left",
    "between_param_left_fmap_left_flipped",
    "between_param_both_fmap_both",
    "between_param_both_fmap_both_flipped",
    "between_param_both_fmap_left",
    "between_param_both_fmap_left_flipped",
    "between_param_both_fmap_right",
    "between_param_both_fmap_right_flipped",
    # Symbols
    "symbols",
    "Fixity",
    "by_symbol",
    "fixity_of",
    # Errors
    "NotMappableError",
    "UnknownSymbolError",
)
