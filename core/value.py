# Cayley: Cayley-Dickson Hypercomplex Algebras for PyTorch
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

"""The capability every algebra value satisfies.

The functional layer is written only against this protocol, so it works
unchanged for the real leaf and for every depth of the doubling
construction. A class doubled by :meth:`core.algebra.Construction.over`
must satisfy it, and the resulting pair class satisfies it in turn.
"""

from typing import Protocol, TypeVar, runtime_checkable

import torch

A = TypeVar("A", bound="Value")


@runtime_checkable
class Value(Protocol):
    """A Cayley-Dickson algebra value of dimension ``2**depth``.

    Values must also compare by value with ``==`` (same class, field and
    coordinates). ``__eq__`` is left out of the members below, since it
    would give the protocol a ``__hash__ = None`` data member and
    ``issubclass`` accepts method members only.
    """

    def real(self) -> torch.Tensor:
        """Real part, a field tensor of the batch shape."""
        ...

    def imag(self: A) -> A:
        """Imaginary vector part (the value with its real coordinate zeroed)."""
        ...

    def scale(self: A, f) -> A:
        """The value element-wise scaled by the real *f*."""
        ...

    def neg(self: A) -> A:
        """Additive inverse."""
        ...

    def conj(self: A) -> A:
        """Cayley-Dickson conjugate."""
        ...

    def add(self: A, y: A) -> A:
        """Element-wise sum."""
        ...

    def mul(self: A, y: A) -> A:
        """Cayley-Dickson product ``self * y``."""
        ...

    def elems(self) -> torch.Tensor:
        """Flat coordinates ``[..., 2**depth]``, real coordinate first."""
        ...

    @classmethod
    def from_elems(cls, elems: torch.Tensor):
        """Inverse of :meth:`elems`."""
        ...

    @classmethod
    def full(cls, f, dtype=None, device=None):
        """Value with every coordinate equal to *f*."""
        ...

    @classmethod
    def lift(cls, f, dtype=None, device=None):
        """Value with real coordinate *f* and every other coordinate zero."""
        ...
