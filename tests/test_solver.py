import itertools

import pytest

from ssss.errors import SingularSystem
from ssss.field import FieldContext
from ssss.polynomial import horner
from ssss.solver import build_system, interpolate

GF8 = FieldContext.for_degree(8)
GF64 = FieldContext.for_degree(64)


def test_horner_is_monic():
    # t = 1: x + c0
    assert horner(GF8, 1, 0x10, [0x03]) == 0x13
    # t = 2: x^2 + c1*x + c0
    x, c0, c1 = 0x05, 0x21, 0x09
    expected = GF8.add(GF8.add(GF8.multiply(x, x), GF8.multiply(c1, x)), c0)
    assert horner(GF8, 2, x, [c0, c1]) == expected


def test_build_system_strips_leading_term():
    matrix, values = build_system(GF8, [(0x02, 0x40)])
    assert matrix == [[1]]
    assert values == [0x42]


def test_interpolate_recovers_all_coefficients():
    coefficients = [0x05, 0x07, 0x09]
    points = [(x, horner(GF8, 3, x, coefficients)) for x in (1, 2, 3)]
    assert interpolate(GF8, points) == coefficients


def test_interpolate_order_independent():
    coefficients = [0x0123456789ABCDEF, 0xFEDCBA9876543210, 0x0F0F0F0F0F0F0F0F, 42]
    points = [(x, horner(GF64, 4, x, coefficients)) for x in (1, 3, 4, 6, 9)]
    for subset in itertools.combinations(points, 4):
        assert interpolate(GF64, list(subset)) == coefficients
        assert interpolate(GF64, list(reversed(subset))) == coefficients


def test_pivot_swap_when_diagonal_is_zero():
    # x = 0 puts a zero on the first diagonal entry and forces a column swap
    coefficients = [0x11, 0x22, 0x33]
    points = [(x, horner(GF8, 3, x, coefficients)) for x in (0, 7, 9)]
    assert interpolate(GF8, points) == coefficients


def test_duplicate_points_are_singular():
    coefficients = [0x11, 0x22, 0x33]
    points = [(x, horner(GF8, 3, x, coefficients)) for x in (2, 2, 5)]
    with pytest.raises(SingularSystem):
        interpolate(GF8, points)
