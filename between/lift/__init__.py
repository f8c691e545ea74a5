"""
Functor-lifted between combinators.

Architecture:
- *M functions take an explicit fmap= (any lawful mapping operation)
- Sugar functions (no suffix) use the dispatching fmap from lift.fmap
- map_over.register(...) teaches fmap a new context

Examples:
    from kungfu import Ok
    from between import lift as L

    L.fmap(lambda x: x + 1, Ok(1))   # Ok(2)
    L.between_fmap_right(len, str)(lambda xs: xs)([1, 22])  # 2
"""

from __future__ import annotations

from .core import (
    between_fmap_both,
    between_fmap_both_flipped,
    between_fmap_both_flippedM,
    between_fmap_bothM,
    between_fmap_left,
    between_fmap_left_flipped,
    between_fmap_left_flippedM,
    between_fmap_leftM,
    between_fmap_right,
    between_fmap_right_flipped,
    between_fmap_right_flippedM,
    between_fmap_rightM,
)
from .fmap import fmap, lift, map_over
from .param import (
    between_param_both_fmap_both,
    between_param_both_fmap_both_flipped,
    between_param_both_fmap_both_flippedM,
    between_param_both_fmap_bothM,
    between_param_both_fmap_left,
    between_param_both_fmap_left_flipped,
    between_param_both_fmap_left_flippedM,
    between_param_both_fmap_leftM,
    between_param_both_fmap_right,
    between_param_both_fmap_right_flipped,
    between_param_both_fmap_right_flippedM,
    between_param_both_fmap_rightM,
    between_param_left_fmap_left,
    between_param_left_fmap_left_flipped,
    between_param_left_fmap_left_flippedM,
    between_param_left_fmap_leftM,
)

__all__ = (
    # Mapping
    "fmap",
    "lift",
    "map_over",
    # Lifted between - sugar
    "between_fmap_both",
    "between_fmap_both_flipped",
    "between_fmap_left",
    "between_fmap_left_flipped",
    "between_fmap_right",
    "between_fmap_right_flipped",
    # Lifted parametrised - sugar
    "between_param_left_fmap_left",
    "between_param_left_fmap_left_flipped",
    "between_param_both_fmap_both",
    "between_param_both_fmap_both_flipped",
    "between_param_both_fmap_left",
    "between_param_both_fmap_left_flipped",
    "between_param_both_fmap_right",
    "between_param_both_fmap_right_flipped",
    # Generic
    "between_fmap_bothM",
    "between_fmap_both_flippedM",
    "between_fmap_leftM",
    "between_fmap_left_flippedM",
    "between_fmap_rightM",
    "between_fmap_right_flippedM",
    "between_param_left_fmap_leftM",
    "between_param_left_fmap_left_flippedM",
    "between_param_both_fmap_bothM",
    "between_param_both_fmap_both_flippedM",
    "between_param_both_fmap_leftM",
    "between_param_both_fmap_left_flippedM",
    "between_param_both_fmap_rightM",
    "between_param_both_fmap_right_flippedM",
)
