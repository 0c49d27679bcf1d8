"""Tests for inner products, distances and normalisation."""

import math
import pytest
import torch

from core.hypercomplex import C, H, O, S, complex_number, quaternion
from functional.elementary import abs as modulus
from functional.elementary import is_zero
from functional.metric import commutator, distance, inner_product, normalize


@pytest.fixture(params=[C, H, O, S], ids=lambda a: f"dim{a.dim}")
def algebra(request):
    return request.param


def _random(algebra, batch=8):
    return algebra.from_elems(torch.randn(batch, algebra.dim, dtype=torch.float64))


def test_inner_product_is_coordinate_dot(algebra):
    torch.manual_seed(1)
    x, y = _random(algebra), _random(algebra)
    expected = (x.elems() * y.elems()).sum(dim=-1)
    assert torch.allclose(inner_product(x, y), expected)


def test_inner_product_with_self_is_squared_modulus(algebra):
    torch.manual_seed(2)
    x = _random(algebra)
    assert torch.allclose(inner_product(x, x), modulus(x) ** 2)


def test_distance(algebra):
    torch.manual_seed(3)
    x, y = _random(algebra), _random(algebra)
    expected = (x.elems() - y.elems()).norm(dim=-1)
    assert torch.allclose(distance(x, y), expected)
    assert torch.equal(distance(x, x), torch.zeros(8, dtype=torch.float64))


def test_normalize(algebra):
    torch.manual_seed(4)
    x = _random(algebra)
    assert torch.allclose(modulus(normalize(x)), torch.ones(8, dtype=torch.float64))


def test_normalize_zero_gives_nan():
    y = normalize(quaternion(0, 0, 0, 0))
    assert torch.isnan(y.elems()).all()


def test_complex_numbers_commute():
    x = C.from_elems(torch.randn(8, 2, dtype=torch.float64))
    y = C.from_elems(torch.randn(8, 2, dtype=torch.float64))
    assert torch.allclose(commutator(x, y).elems(), torch.zeros(8, 2, dtype=torch.float64))


def test_quaternion_commutator():
    # [i, j] = 2k
    i = quaternion(0, 1, 0, 0)
    j = quaternion(0, 0, 1, 0)
    assert commutator(i, j) == quaternion(0, 0, 0, 2)
    assert not is_zero(commutator(i, j)).item()


def test_distance_between_roots_of_unity():
    x = complex_number(1, 0)
    y = complex_number(math.cos(2 * math.pi / 3), math.sin(2 * math.pi / 3))
    assert distance(x, y).item() == pytest.approx(math.sqrt(3))
