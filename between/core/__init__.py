from .arity import between2l, between3l, between_chain, on
from .between import between, between_flipped
from .param import (
    between_param_both,
    between_param_both_flipped,
    between_param_left,
    between_param_left_flipped,
)

__all__ = (
    # Core
    "between",
    "between_flipped",
    # Parametrised
    "between_param_left",
    "between_param_left_flipped",
    "between_param_both",
    "between_param_both_flipped",
    # Arity-extended
    "between2l",
    "between3l",
    "between_chain",
    "on",
)
