# Cayley: Cayley-Dickson Hypercomplex Algebras for PyTorch
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

"""Lightweight structural validation for algebra values.

All checks use ``assert`` so they are free under ``python -O``.
Set ``CAYLEY_VALIDATE=0`` (or ``VALIDATE = False``) to disable even
without the -O flag.
"""

import os

import torch

VALIDATE = os.environ.get("CAYLEY_VALIDATE", "1") not in ("0", "false", "False")


def check_halves(half: type, a, b) -> None:
    """Assert *a* and *b* are values of *half* over the same field."""
    if not VALIDATE:
        return
    assert type(a) is half and type(b) is half, (
        f"halves must both be {half.__name__}, "
        f"got {type(a).__name__} and {type(b).__name__}"
    )
    assert a.dtype == b.dtype, (
        f"halves must share a field, got {a.dtype} and {b.dtype}"
    )


def check_elems(elems: torch.Tensor, cls: type, name: str = "elems") -> None:
    """Assert *elems* is a flat view of a *cls* value.

    Checks ``elems.ndim >= 1`` and ``elems.shape[-1] == cls.dim``.
    """
    if not VALIDATE:
        return
    assert elems.ndim >= 1, (
        f"{name}: expected ndim >= 1, got shape {tuple(elems.shape)}"
    )
    assert elems.shape[-1] == cls.dim, (
        f"{name}: last dim should be {cls.dim} ({cls.__name__} dim), "
        f"got {elems.shape[-1]} (shape {tuple(elems.shape)})"
    )
