"""Tests for the elementary functions across every algebra of the tower.

Verifies the generic layer works uniformly for:
- Real, C, H, O, S in float32 and float64
- Degenerate cases: zero base, zero exponent, zero-norm inverse
- Batched values mixing zero and non-zero elements
"""

import math
import pytest
import torch

from core.algebra import Real
from core.hypercomplex import C, H, O, S, complex_number, quaternion
from functional.elementary import (
    abs as modulus,
    exp,
    inf,
    inv,
    is_zero,
    lift,
    log,
    pow,
    pow_float,
    sqrt,
    zeros_like,
)


ALGEBRAS = [Real, C, H, O, S]
FIELDS = [torch.float32, torch.float64]


# ── Helpers ────────────────────────────────────────────────────────────

def _atol(dtype):
    return 1e-5 if dtype == torch.float32 else 1e-10


def _assert_close(x, y, atol):
    assert type(x) is type(y)
    assert torch.allclose(x.elems(), y.elems(), atol=atol), f"{x} != {y}"


def _sample(algebra, dtype, batch=()):
    """Deterministic value with imaginary modulus well inside the principal branch."""
    n = algebra.dim
    t = torch.linspace(0.1, 0.5, n, dtype=dtype)
    signs = 1.0 - 2.0 * (torch.arange(n) % 2).to(dtype)
    t = t * signs
    return algebra.from_elems(t.expand(*batch, n).clone())


@pytest.fixture(params=ALGEBRAS, ids=lambda a: f"dim{a.dim}")
def algebra(request):
    return request.param


@pytest.fixture(params=FIELDS, ids=str)
def dtype(request):
    return request.param


# ── Boundary values ───────────────────────────────────────────────────

class TestBoundaries:
    """Exact results at zero, as for math.pow."""

    def test_sqrt_of_zero(self, algebra, dtype):
        zero = lift(algebra, 0.0, dtype=dtype)
        assert sqrt(zero) == zero

    def test_pow_float_at_zero(self, algebra, dtype):
        zero = lift(algebra, 0.0, dtype=dtype)
        assert pow_float(zero, 0) == lift(algebra, 1.0, dtype=dtype)
        assert pow_float(zero, -1) == inf(algebra, dtype=dtype)
        assert pow_float(zero, 1) == zero
        assert pow_float(zero, 2.5) == zero

    def test_pow_at_zero(self, algebra, dtype):
        zero = lift(algebra, 0.0, dtype=dtype)
        assert pow(zero, lift(algebra, 0.0, dtype=dtype)) == lift(algebra, 1.0, dtype=dtype)
        assert pow(zero, lift(algebra, -1.0, dtype=dtype)) == lift(algebra, math.inf, dtype=dtype)
        assert pow(zero, lift(algebra, 2.0, dtype=dtype)) == zero

    def test_pow_at_zero_complex_exponent(self, dtype):
        for algebra in (C, H, O, S):
            zero = lift(algebra, 0.0, dtype=dtype)
            r = torch.zeros(algebra.dim, dtype=dtype)
            r[0], r[1] = -1.0, 1.0
            assert pow(zero, algebra.from_elems(r)) == inf(algebra, dtype=dtype)
            r[0] = 1.0
            assert pow(zero, algebra.from_elems(r)) == zero

    def test_pow_at_zero_pure_imaginary_exponent(self, dtype):
        # Only Re(r) is consulted: 0**i is lift(1)
        for algebra in (C, H, O, S):
            zero = lift(algebra, 0.0, dtype=dtype)
            r = torch.zeros(algebra.dim, dtype=dtype)
            r[1] = 1.0
            assert pow(zero, algebra.from_elems(r)) == lift(algebra, 1.0, dtype=dtype)

    def test_pow_at_zero_nan_exponent(self, algebra, dtype):
        zero = lift(algebra, 0.0, dtype=dtype)
        y = pow(zero, lift(algebra, math.nan, dtype=dtype))
        assert torch.isnan(y.elems()).any()
        y = pow_float(zero, math.nan)
        assert torch.isnan(y.elems()).any()

    def test_inf(self, algebra, dtype):
        x = inf(algebra, dtype=dtype, shape=(2,))
        assert x.elems().shape == (2, algebra.dim)
        assert torch.isposinf(x.elems()).all()

    def test_inverse_of_zero_does_not_raise(self, algebra, dtype):
        y = inv(lift(algebra, 0.0, dtype=dtype))
        assert not torch.isfinite(y.elems()).any()

    def test_log_of_zero(self, algebra, dtype):
        y = log(lift(algebra, 0.0, dtype=dtype))
        assert y.real().item() == -math.inf


# ── Identities ────────────────────────────────────────────────────────

class TestIdentities:

    def test_exp_log_round_trip(self, algebra, dtype):
        x = _sample(algebra, dtype)
        _assert_close(log(exp(x)), x, _atol(dtype))

    def test_log_exp_round_trip(self, algebra, dtype):
        x = _sample(algebra, dtype).add(lift(algebra, 2.0, dtype=dtype))
        _assert_close(exp(log(x)), x, _atol(dtype))

    def test_exp_of_real(self, algebra, dtype):
        y = exp(lift(algebra, 1.0, dtype=dtype))
        _assert_close(y, lift(algebra, math.e, dtype=dtype), _atol(dtype))

    def test_inverse(self, algebra, dtype):
        x = _sample(algebra, dtype, batch=(3,))
        one = lift(algebra, torch.ones(3, dtype=dtype))
        _assert_close(x.mul(inv(x)), one, _atol(dtype))
        _assert_close(inv(x).mul(x), one, _atol(dtype))

    def test_sqrt_squares_back(self, algebra, dtype):
        x = _sample(algebra, dtype).add(lift(algebra, 1.0, dtype=dtype))
        r = sqrt(x)
        _assert_close(r.mul(r), x, 10 * _atol(dtype))

    def test_pow_matches_pow_float(self, algebra, dtype):
        x = _sample(algebra, dtype).add(lift(algebra, 1.0, dtype=dtype))
        _assert_close(pow(x, lift(algebra, 3.0, dtype=dtype)), pow_float(x, 3.0), 10 * _atol(dtype))

    def test_pow_float_integer_power(self, algebra, dtype):
        x = _sample(algebra, dtype).add(lift(algebra, 1.0, dtype=dtype))
        _assert_close(pow_float(x, 2.0), x.mul(x), 10 * _atol(dtype))

    def test_field_preserved(self, algebra, dtype):
        x = _sample(algebra, dtype)
        for y in (exp(x), log(x), sqrt(x), inv(x), pow_float(x, 0.5), pow(x, x)):
            assert y.dtype == dtype
        assert modulus(x).dtype == dtype


# ── Concrete values ───────────────────────────────────────────────────

class TestValues:

    def test_modulus(self):
        assert modulus(quaternion(1, 2, 2, 4)).item() == pytest.approx(5.0)
        assert modulus(Real(-3.0)).item() == pytest.approx(3.0)

    def test_euler_identity(self):
        y = exp(complex_number(0, math.pi))
        _assert_close(y, complex_number(-1, 0), 1e-12)

    def test_quaternion_exp(self):
        # exp(pi/2 j) = j
        y = exp(quaternion(0, 0, math.pi / 2, 0))
        _assert_close(y, quaternion(0, 0, 1, 0), 1e-12)

    def test_log_of_negative_real_is_nan(self):
        y = log(complex_number(-1, 0))
        assert math.isnan(y.real().item())

    def test_log_of_imaginary_unit(self):
        y = log(complex_number(0, 1))
        _assert_close(y, complex_number(0, math.pi / 2), 1e-12)

    def test_sqrt_near_negative_real_axis(self):
        y = sqrt(complex_number(-4, 1e-12))
        expected = torch.tensor([0.0, 2.0], dtype=torch.float64)
        assert torch.allclose(y.elems(), expected, atol=1e-9)

    def test_nan_propagates(self):
        y = exp(quaternion(math.nan, 1, 0, 0))
        assert torch.isnan(y.elems()).any()


# ── Batches ───────────────────────────────────────────────────────────

class TestBatches:

    def test_is_zero_mask(self):
        x = H.from_elems(torch.tensor([[0.0, 0, 0, 0], [0, 0, 1, 0], [-0.0, 0, 0, 0]]))
        assert is_zero(x).tolist() == [True, False, True]

    def test_zeros_like(self):
        x = O.from_elems(torch.randn(4, 8, dtype=torch.float32))
        z = zeros_like(x)
        assert z.shape == (4,)
        assert z.dtype == torch.float32
        assert is_zero(z).all()

    def test_sqrt_mixed_batch(self):
        x = H.from_elems(torch.tensor([[0.0, 0, 0, 0], [4.0, 0, 0, 0]], dtype=torch.float64))
        y = sqrt(x)
        expected = torch.tensor([[0.0, 0, 0, 0], [2.0, 0, 0, 0]], dtype=torch.float64)
        assert torch.allclose(y.elems(), expected)

    def test_pow_float_mixed_batch(self):
        x = C.from_elems(torch.tensor([[0.0, 0], [2.0, 0], [0.0, 0]], dtype=torch.float64))
        r = torch.tensor([-1.0, 2.0, 0.0], dtype=torch.float64)
        y = pow_float(x, r).elems()
        assert torch.isposinf(y[0]).all()
        assert torch.allclose(y[1], torch.tensor([4.0, 0.0], dtype=torch.float64))
        assert y[2].tolist() == [1.0, 0.0]

    def test_exp_mixed_batch(self):
        x = C.from_elems(torch.tensor([[1.0, 0], [0.0, math.pi]], dtype=torch.float64))
        y = exp(x).elems()
        assert torch.allclose(y[0], torch.tensor([math.e, 0.0], dtype=torch.float64))
        assert torch.allclose(y[1], torch.tensor([-1.0, 0.0], dtype=torch.float64), atol=1e-12)
