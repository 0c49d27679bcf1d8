"""Stateless functions over Cayley-Dickson algebra values.

Includes the elementary transcendental functions and metric helpers.
"""

from .elementary import (
    is_zero,
    zeros_like,
    lift,
    inf,
    abs,
    inv,
    exp,
    log,
    pow,
    pow_float,
    sqrt,
)

from .metric import (
    inner_product,
    distance,
    normalize,
    commutator,
)

__all__ = [
    # elementary
    "is_zero",
    "zeros_like",
    "lift",
    "inf",
    "abs",
    "inv",
    "exp",
    "log",
    "pow",
    "pow_float",
    "sqrt",
    # metric
    "inner_product",
    "distance",
    "normalize",
    "commutator",
]
