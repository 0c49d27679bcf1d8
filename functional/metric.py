# Cayley: Cayley-Dickson Hypercomplex Algebras for PyTorch
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

"""Inner products, distances and normalisation for algebra values.

The Euclidean inner product on the flat coordinates is recovered from the
algebra itself: Re(x conj(y)) = sum_i x_i y_i in every algebra of the tower.
"""

import torch

from functional.elementary import abs as modulus


def inner_product(x, y) -> torch.Tensor:
    """Compute the scalar product Re(x conj(y)).

    Args:
        x: First value [..., Dim].
        y: Second value of the same algebra.

    Returns:
        torch.Tensor: Scalar product of the batch shape.
    """
    return x.mul(y.conj()).real()


def distance(x, y) -> torch.Tensor:
    """Modulus of the difference |x - y|."""
    return modulus(x.add(y.neg()))


def normalize(x):
    """Scales *x* to unit modulus. A zero input gives NaN coordinates."""
    return x.scale(1 / modulus(x))


def commutator(x, y):
    """Computes xy - yx, which vanishes identically only for C and R."""
    return x.mul(y).add(y.mul(x).neg())
