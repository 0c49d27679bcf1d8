# Cayley: Cayley-Dickson Hypercomplex Algebras for PyTorch
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

"""Named algebras of the Cayley-Dickson tower.

Constructors take the coordinates in row-major nesting order, so that
``elems()`` returns them in call order: ``quaternion(w, x, y, z)`` is
``w + x i + y j + z k``.
"""

from core.algebra import Construction, Real

# Complex numbers
C = Construction.over(Real)
# Quaternions
H = Construction.over(C)
# Octonions
O = Construction.over(H)
# Sedenions
S = Construction.over(O)


def cayley_dickson(n: int) -> type:
    """Returns the algebra of dimension ``2**n`` (``Real`` for n = 0)."""
    if n < 0:
        raise ValueError(f"depth must be non-negative, got {n}")
    algebra = Real
    for _ in range(n):
        algebra = Construction.over(algebra)
    return algebra


def complex_number(a, b, dtype=None, device=None):
    """Builds ``a + b i``."""
    return C(Real(a, dtype=dtype, device=device), Real(b, dtype=dtype, device=device))


def quaternion(a, b, c, d, dtype=None, device=None):
    """Builds ``a + b i + c j + d k``."""
    return H(
        complex_number(a, b, dtype=dtype, device=device),
        complex_number(c, d, dtype=dtype, device=device),
    )


def octonion(a, b, c, d, e, f, g, h, dtype=None, device=None):
    """Builds an octonion from its eight coordinates."""
    return O(
        quaternion(a, b, c, d, dtype=dtype, device=device),
        quaternion(e, f, g, h, dtype=dtype, device=device),
    )


def sedenion(a, b, c, d, e, f, g, h, i, j, k, l, m, n, o, p, dtype=None, device=None):
    """Builds a sedenion from its sixteen coordinates."""
    return S(
        octonion(a, b, c, d, e, f, g, h, dtype=dtype, device=device),
        octonion(i, j, k, l, m, n, o, p, dtype=dtype, device=device),
    )
