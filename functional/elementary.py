# Cayley: Cayley-Dickson Hypercomplex Algebras for PyTorch
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

"""Elementary functions for every algebra of the Cayley-Dickson tower.

Each function is written once against :class:`core.value.Value` and is
valid for any dimension. A value splits into a real part ``w`` and an
imaginary vector part ``u v`` (unit direction ``u``, length ``v``), and
since ``u^2 = -1`` Euler's formula generalises directly:

    exp(w + u v) = e^w (cos v + u sin v)
    log(x)       = ln|x| + u atan2(v, w)

Branches are taken per batch element with ``torch.where``. Out-of-domain
inputs never raise; they produce inf/NaN coordinates as IEEE arithmetic
dictates.
"""

import math

import torch

from core.field import as_field_tensor, resolve_field


def is_zero(x) -> torch.Tensor:
    """True where every coordinate of *x* is zero.

    Returns:
        torch.Tensor: Boolean mask of the batch shape.
    """
    return (x.elems() == 0).all(dim=-1)


def zeros_like(x):
    """The additive identity with the class, field and shape of *x*."""
    return type(x).from_elems(torch.zeros_like(x.elems()))


def lift(algebra: type, f, dtype=None, device=None):
    """Injects the real *f* into *algebra*: real coordinate *f*, others zero."""
    return algebra.lift(f, dtype=dtype, device=device)


def inf(algebra: type, dtype=None, device=None, shape=()):
    """The value of *algebra* with every coordinate +inf."""
    f = torch.full(shape, math.inf, dtype=resolve_field(dtype), device=device)
    return algebra.full(f)


def abs(x) -> torch.Tensor:
    """Modulus ``sqrt(Re(x conj(x)))``, a field tensor of the batch shape."""
    return torch.sqrt(x.mul(x.conj()).real())


def inv(x):
    """Multiplicative inverse ``conj(x) / |x|^2``.

    Zero-norm inputs (zero, or a zero divisor from the sedenions up) give
    inf/NaN coordinates.
    """
    xc = x.conj()
    return xc.scale(1 / x.mul(xc).real())


def exp(x):
    """Base-e exponential of *x*."""
    w = x.real()
    uv = x.imag()
    pure = is_zero(uv)

    v = abs(uv)
    e = torch.exp(w)
    safe_v = torch.where(pure, torch.ones_like(v), v)

    re = torch.where(pure, e, e * torch.cos(v))
    coeff = torch.where(pure, torch.zeros_like(v), e * torch.sin(v) / safe_v)
    return lift(type(x), re).add(uv.scale(coeff))


def log(x):
    """Principal natural logarithm of *x*.

    For real *x* (zero imaginary part) this is the real logarithm, so
    negative reals give NaN and zero gives -inf.
    """
    w = x.real()
    uv = x.imag()
    pure = is_zero(uv)

    v = abs(uv)
    safe_v = torch.where(pure, torch.ones_like(v), v)

    re = torch.where(pure, torch.log(w), torch.log(abs(x)))
    coeff = torch.where(pure, torch.zeros_like(v), torch.atan2(v, w) / safe_v)
    return lift(type(x), re).add(uv.scale(coeff))


def _at_zero(x, general, cases):
    """Overrides *general* where *x* is zero.

    Args:
        x: The base of a power.
        general: Result of the ``exp(log(x) r)`` path.
        cases: ``(mask, elems)`` pairs, applied in order so later pairs win.
    """
    out = general.elems()
    zero = is_zero(x)
    for mask, value in cases:
        out = torch.where((zero & mask).unsqueeze(-1), value, out)
    return type(x).from_elems(out)


def pow(x, r):
    """``x**r`` for an algebra-valued exponent *r*.

    For generalized compatibility with :func:`math.pow`, at ``x = 0``:

        pow(0, r) for Re(r) == 0 returns lift(1)
        pow(0, r) for Re(r) < 0 returns lift(inf) if Im(r) is zero,
            otherwise inf()
        pow(0, r) for Re(r) > 0 returns 0
    """
    general = exp(log(x).mul(r))
    if not is_zero(x).any():
        return general

    cls = type(x)
    w = r.real()
    pure = is_zero(r.imag())
    out = general.elems()

    one = lift(cls, torch.ones_like(w)).elems()
    real_inf = lift(cls, torch.full_like(w, math.inf)).elems()
    return _at_zero(x, general, [
        (w > 0, torch.zeros_like(out)),
        ((w < 0) & ~pure, torch.full_like(out, math.inf)),
        ((w < 0) & pure, real_inf),
        (w == 0, one),
    ])


def pow_float(x, r):
    """``x**r`` for a real exponent *r* (number or batch tensor).

    For generalized compatibility with :func:`math.pow`, at ``x = 0``:

        pow_float(0, ±0) returns lift(1)
        pow_float(0, r) for r < 0 returns inf()
        pow_float(0, r) for r > 0 returns 0
    """
    r = as_field_tensor(r, dtype=x.dtype, device=x.device)
    general = exp(log(x).scale(r))
    if not is_zero(x).any():
        return general

    out = general.elems()
    one = lift(type(x), torch.ones_like(r)).elems()
    return _at_zero(x, general, [
        (r > 0, torch.zeros_like(out)),
        (r < 0, torch.full_like(out, math.inf)),
        (r == 0, one),
    ])


def sqrt(x):
    """Principal square root of *x*; zero where *x* is zero."""
    if is_zero(x).all():
        return zeros_like(x)
    return pow_float(x, 0.5)
