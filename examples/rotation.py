# Cayley: Cayley-Dickson Hypercomplex Algebras for PyTorch
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

"""Rotating 3D points with quaternions.

A point ``p`` is raised to the pure quaternion ``0 + x i + y j + z k`` and
rotated by the sandwich product ``q p conj(q)``. For a quaternion of
modulus ``sqrt(s)`` the result is also scaled by ``s``.
"""

import math

import torch

from core.hypercomplex import H
from functional.elementary import abs as modulus
from functional.elementary import lift


def raise_point(points: torch.Tensor):
    """Raises points [..., 3] to pure quaternions."""
    zeros = torch.zeros_like(points[..., :1])
    return H.from_elems(torch.cat([zeros, points], dim=-1))


def rotation(axis: torch.Tensor, angle: float):
    """Quaternion rotating by *angle* radians around *axis*.

    Args:
        axis (torch.Tensor): Rotation axis [3], need not be unit length.
        angle (float): Rotation angle in radians.

    Returns:
        H: ``cos(angle/2) + sin(angle/2) axis/|axis|``.
    """
    q = raise_point(axis)
    q = q.scale(math.sin(angle / 2) / modulus(q))
    return q.add(lift(H, math.cos(angle / 2), dtype=q.dtype, device=q.device))


def rotate(points: torch.Tensor, by, scale: float = 1.0) -> torch.Tensor:
    """Rotates *points* by the quaternion *by* and scales them by *scale*.

    Args:
        points (torch.Tensor): Points [..., 3].
        by (H): Rotation quaternion, rescaled to modulus sqrt(scale) when
            its modulus differs from *scale*.
        scale (float): Scale factor applied to the rotated points.

    Returns:
        torch.Tensor: Rotated points [..., 3].
    """
    length = modulus(by)
    factor = torch.where(length != scale, math.sqrt(scale) / length, torch.ones_like(length))
    by = by.scale(factor)

    rotated = by.mul(raise_point(points)).mul(by.conj())
    return rotated.elems()[..., 1:]


def unit_cube(dtype=torch.float64, device=None) -> torch.Tensor:
    """Corners of the unit cube [8, 3], in binary counting order (x, y, z)."""
    corners = [[(i >> 2) & 1, (i >> 1) & 1, i & 1] for i in range(8)]
    return torch.tensor(corners, dtype=dtype, device=device)
