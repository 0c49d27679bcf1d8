# Cayley: Cayley-Dickson Hypercomplex Algebras for PyTorch
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

"""The real leaf algebra and the Cayley-Dickson doubling construction.

A value of depth ``n + 1`` is a pair ``(a, b)`` of depth-``n`` values.
Coordinates are field tensors with arbitrary leading batch dimensions, and
every operation acts element-wise over the batch.
"""

import torch

from core.field import as_field_tensor
from core.validation import check_elems, check_halves
from core.value import Value
from log import get_logger

logger = get_logger(__name__)


class _Operators:
    """Operator overloading shared by every algebra value.

    Allows natural mathematical syntax like ``x * y``, ``x + 1``, ``~x``.
    """

    __slots__ = ()

    def _coerce(self, f) -> torch.Tensor:
        return as_field_tensor(f, dtype=self.dtype, device=self.device)

    def _is_real_scalar(self, other) -> bool:
        return isinstance(other, (int, float, torch.Tensor)) and not isinstance(other, bool)

    def __add__(self, other):
        """Element-wise addition. Real numbers are lifted into the algebra."""
        if type(other) is type(self):
            return self.add(other)
        if self._is_real_scalar(other):
            return self.add(type(self).lift(self._coerce(other)))
        return NotImplemented

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        if type(other) is type(self):
            return self.add(other.neg())
        if self._is_real_scalar(other):
            return self.add(type(self).lift(self._coerce(other)).neg())
        return NotImplemented

    def __rsub__(self, other):
        if self._is_real_scalar(other):
            return type(self).lift(self._coerce(other)).add(self.neg())
        return NotImplemented

    def __mul__(self, other):
        """Cayley-Dickson product, or scaling by a real number."""
        if type(other) is type(self):
            return self.mul(other)
        if self._is_real_scalar(other):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other):
        # Reals are central, so f * x == x * f
        if self._is_real_scalar(other):
            return self.scale(other)
        return NotImplemented

    def __truediv__(self, other):
        if self._is_real_scalar(other):
            return self.scale(1.0 / self._coerce(other))
        return NotImplemented

    def __neg__(self):
        return self.neg()

    def __invert__(self):
        """Conjugation (~x)."""
        return self.conj()

    def __abs__(self):
        """Modulus sqrt(Re(x conj(x)))."""
        from functional.elementary import abs as modulus
        return modulus(self)

    def __pow__(self, other):
        """``x ** r`` for an algebra value or a real exponent."""
        from functional.elementary import pow, pow_float
        if type(other) is type(self):
            return pow(self, other)
        if self._is_real_scalar(other):
            return pow_float(self, other)
        return NotImplemented

    def __eq__(self, other):
        """Structural equality of the flat coordinates."""
        if type(other) is not type(self):
            return NotImplemented
        if self.dtype != other.dtype:
            return False
        return torch.equal(self.elems(), other.elems())

    __hash__ = None

    def __repr__(self):
        coords = self.elems().tolist()
        return f"{type(self).__name__}({coords}, dtype={self.dtype})"


class Real(_Operators):
    """The one-dimensional real algebra, the leaf of every construction.

    Attributes:
        value (torch.Tensor): The real coordinate, any batch shape.
    """

    __slots__ = ("value",)

    depth = 0
    dim = 1

    def __init__(self, value, dtype=None, device=None):
        """Wraps a real coordinate.

        Args:
            value: Python number or tensor.
            dtype: Field to store the coordinate in.
            device: Device to store the coordinate on.
        """
        self.value = as_field_tensor(value, dtype=dtype, device=device)

    @property
    def dtype(self) -> torch.dtype:
        return self.value.dtype

    @property
    def device(self) -> torch.device:
        return self.value.device

    @property
    def shape(self) -> torch.Size:
        return self.value.shape

    def real(self) -> torch.Tensor:
        return self.value

    def imag(self) -> "Real":
        return Real(torch.zeros_like(self.value))

    def scale(self, f) -> "Real":
        return Real(self.value * self._coerce(f))

    def neg(self) -> "Real":
        return Real(-self.value)

    def conj(self) -> "Real":
        return self

    def add(self, y: "Real") -> "Real":
        return Real(self.value + y.value)

    def mul(self, y: "Real") -> "Real":
        return Real(self.value * y.value)

    def elems(self) -> torch.Tensor:
        return self.value.unsqueeze(-1)

    @classmethod
    def from_elems(cls, elems: torch.Tensor) -> "Real":
        check_elems(elems, cls)
        return cls(elems[..., 0])

    @classmethod
    def full(cls, f, dtype=None, device=None) -> "Real":
        return cls(f, dtype=dtype, device=device)

    @classmethod
    def lift(cls, f, dtype=None, device=None) -> "Real":
        return cls(f, dtype=dtype, device=device)


class Construction(_Operators):
    """A Cayley-Dickson pair ``(a, b)`` of values of the doubled algebra.

    Concrete algebras are subclasses produced by :meth:`over`, one per
    doubled class; ``Construction`` itself is never instantiated.

    Attributes:
        a: The real-like half, holding the real coordinate.
        b: The imaginary-like half.
    """

    __slots__ = ("a", "b")

    half = None
    depth = None
    dim = None

    _CACHED_CONSTRUCTIONS = {}

    def __init__(self, a, b):
        """Pairs two values of ``half``.

        Args:
            a: First half.
            b: Second half, same class and field as *a*.
        """
        if self.half is None:
            raise TypeError("use Construction.over(algebra) to build a concrete algebra")
        check_halves(self.half, a, b)
        self.a = a
        self.b = b

    @classmethod
    def over(cls, half: type) -> type:
        """Returns the algebra of pairs of *half* values.

        Args:
            half: A class satisfying :class:`core.value.Value`.

        Returns:
            type: Cached subclass with ``dim == 2 * half.dim``.

        Raises:
            TypeError: If *half* does not satisfy :class:`core.value.Value`.
        """
        if half in Construction._CACHED_CONSTRUCTIONS:
            return Construction._CACHED_CONSTRUCTIONS[half]

        if not (isinstance(half, type) and issubclass(half, Value)):
            raise TypeError(f"{half!r} does not satisfy the Value capability")

        name = f"Construction[{half.__name__}]"
        algebra = type(name, (Construction,), {
            "__slots__": (),
            "half": half,
            "depth": half.depth + 1,
            "dim": 2 * half.dim,
        })
        Construction._CACHED_CONSTRUCTIONS[half] = algebra
        logger.debug("Built %s with dim %d", name, algebra.dim)
        return algebra

    @property
    def dtype(self) -> torch.dtype:
        return self.a.dtype

    @property
    def device(self) -> torch.device:
        return self.a.device

    @property
    def shape(self) -> torch.Size:
        return torch.broadcast_shapes(self.a.shape, self.b.shape)

    def real(self) -> torch.Tensor:
        return self.a.real()

    def imag(self):
        return type(self)(self.a.imag(), self.b)

    def neg(self):
        return type(self)(self.a.neg(), self.b.neg())

    def conj(self):
        return type(self)(self.a.conj(), self.b.neg())

    def add(self, y):
        return type(self)(self.a.add(y.a), self.b.add(y.b))

    def mul(self, y):
        """Cayley-Dickson product.

        (a, b)(c, d) = (ac - d*b, da + bc*), where * is conjugation.
        Operand order matters: the product is not commutative from the
        quaternions up and not associative from the octonions up.
        """
        a, b = self.a, self.b
        c, d = y.a, y.b
        return type(self)(
            a.mul(c).add(d.conj().mul(b).neg()),
            d.mul(a).add(b.mul(c.conj())),
        )

    def scale(self, f):
        return type(self)(self.a.scale(f), self.b.scale(f))

    def elems(self) -> torch.Tensor:
        first, second = torch.broadcast_tensors(self.a.elems(), self.b.elems())
        return torch.cat([first, second], dim=-1)

    @classmethod
    def from_elems(cls, elems: torch.Tensor):
        check_elems(elems, cls)
        h = cls.half.dim
        return cls(cls.half.from_elems(elems[..., :h]), cls.half.from_elems(elems[..., h:]))

    @classmethod
    def full(cls, f, dtype=None, device=None):
        f = as_field_tensor(f, dtype=dtype, device=device)
        return cls(cls.half.full(f), cls.half.full(f))

    @classmethod
    def lift(cls, f, dtype=None, device=None):
        f = as_field_tensor(f, dtype=dtype, device=device)
        return cls(cls.half.lift(f), cls.half.full(torch.zeros_like(f)))


def pair(a, b):
    """Lifts two values of dimension ``d`` into one of dimension ``2d``."""
    return Construction.over(type(a))(a, b)
