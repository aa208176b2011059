"""Tests for reversal, truncated inversion and fast division."""

import pytest

from fieldpoly import rng
from fieldpoly.errors import (DivisionByZeroError, InvalidPolynomialError,
                              InvalidReversalDegreeError, NotInvertibleError)
from fieldpoly.field import DEFAULT_FIELD_ORDER
from fieldpoly.polynomial import Polynomial


def random_valid(field_order, degree):
    """Random polynomial with a non-zero top coefficient."""
    coeffs = [rng.randbelow(field_order) for _ in range(degree)]
    coeffs.append(rng.randbelow(field_order - 1) + 1)
    return Polynomial(field_order, coeffs)


def assert_division(p, b):
    q, r = p.fast_divide(b)
    assert b * q + r == p
    assert r.is_zero() or r.degree < b.trim_trailing_zeros().degree
    return q, r


def test_truncate():
    p = Polynomial(7, [1, 2, 3])
    assert p.truncate(2).coefficients == (1, 2)
    assert p.truncate(10).coefficients == (1, 2, 3)
    assert Polynomial(7, [1, 0, 3]).truncate(2).coefficients == (1,)

def test_truncate_nonpositive():
    with pytest.raises(ValueError):
        Polynomial(7, [1, 2]).truncate(0)

def test_reverse_at_degree():
    assert Polynomial(7, [1, 2, 3]).reverse(2).coefficients == (3, 2, 1)

def test_reverse_past_degree():
    assert Polynomial(7, [1, 2, 3]).reverse(4).coefficients == (0, 0, 3, 2, 1)

def test_reverse_trims_result():
    assert Polynomial(7, [0, 1]).reverse(1).coefficients == (1,)

def test_reverse_uses_trimmed_degree():
    assert Polynomial(7, [1, 2, 0]).reverse(1).coefficients == (2, 1)

def test_reverse_below_degree():
    with pytest.raises(InvalidReversalDegreeError):
        Polynomial(7, [1, 2, 3]).reverse(1)

def test_invert_modulo_geometric_series():
    # 1 / (1 + x) = 1 - x + x^2 - x^3 + ...
    p = Polynomial(7, [1, 1])
    assert p.invert_modulo(4).coefficients == (1, 6, 1, 6)
    assert p.invert_modulo(5).coefficients == (1, 6, 1, 6, 1)

def test_invert_modulo_length_one():
    assert Polynomial(7, [1, 3, 5]).invert_modulo(1).coefficients == (1,)

def test_invert_modulo_property():
    one = Polynomial.one(DEFAULT_FIELD_ORDER)
    for degree in range(6):
        p = Polynomial.random(DEFAULT_FIELD_ORDER, degree, constant=1)
        for l in range(1, 10):
            g = p.invert_modulo(l)
            assert len(g) <= l
            assert (p * g).truncate(l) == one

def test_invert_modulo_requires_unit_constant():
    with pytest.raises(InvalidPolynomialError):
        Polynomial(7, [2, 1]).invert_modulo(3)

def test_invert_modulo_nonpositive_length():
    with pytest.raises(ValueError):
        Polynomial(7, [1, 1]).invert_modulo(0)

def test_fast_divide_small_field():
    q, r = Polynomial(7, [1, 2]).fast_divide(Polynomial(7, [1, 1]))
    assert q.coefficients == (2,)
    assert r.coefficients == (6,)

def test_fast_divide_square_by_linear():
    # x^2 = (x + 1)(x - 1) + 1
    q, r = assert_division(Polynomial(7, [0, 0, 1]), Polynomial(7, [1, 1]))
    assert q.coefficients == (6, 1)
    assert r.coefficients == (1,)

def test_fast_divide_exact():
    b = Polynomial(101, [3, 1])
    c = Polynomial(101, [5, 0, 2])
    q, r = (b * c).fast_divide(b)
    assert q == c
    assert r.coefficients == (0,)

def test_fast_divide_lower_degree_dividend():
    p = Polynomial(7, [3, 4])
    q, r = p.fast_divide(Polynomial(7, [1, 0, 1]))
    assert q.coefficients == (0,)
    assert r.coefficients == p.coefficients

def test_fast_divide_constant_divisor():
    q, r = Polynomial(7, [1, 2, 3]).fast_divide(Polynomial(7, [3]))
    assert q.coefficients == (5, 3, 1)
    assert r.coefficients == (0,)

def test_fast_divide_non_monic():
    assert_division(Polynomial(101, [5, 0, 3, 9, 1, 4]), Polynomial(101, [7, 0, 3]))

def test_fast_divide_by_zero():
    with pytest.raises(DivisionByZeroError):
        Polynomial(7, [1, 2]).fast_divide(Polynomial(7, [0]))
    with pytest.raises(ZeroDivisionError):
        Polynomial(7, [1, 2]).fast_divide(Polynomial(7, [0]))

def test_fast_divide_rejects_inconsistent_operand():
    with pytest.raises(InvalidPolynomialError):
        Polynomial(7, [1, 2]).fast_divide(Polynomial(7, [1, 0]))
    with pytest.raises(InvalidPolynomialError):
        Polynomial(7, [1, 2, 0]).fast_divide(Polynomial(7, [1, 1]))

def test_fast_divide_prime_power_field():
    assert_division(Polynomial(9, [1, 2, 3, 4]), Polynomial(9, [4, 1]))

def test_fast_divide_non_invertible_lead():
    with pytest.raises(NotInvertibleError):
        Polynomial(9, [1, 2, 3]).fast_divide(Polynomial(9, [1, 3]))

@pytest.mark.parametrize("field_order", [2, 7, 10007, DEFAULT_FIELD_ORDER])
def test_fast_divide_random(field_order):
    for dp in range(9):
        for db in range(6):
            assert_division(random_valid(field_order, dp), random_valid(field_order, db))

def test_fast_divide_leaves_operands_untouched():
    p, b = Polynomial(7, [1, 2, 3]), Polynomial(7, [2, 1])
    p.fast_divide(b)
    assert p.coefficients == (1, 2, 3)
    assert b.coefficients == (2, 1)

def test_division_operators():
    p, b = Polynomial(7, [0, 0, 1]), Polynomial(7, [1, 1])
    q, r = divmod(p, b)
    assert p // b == q
    assert p % b == r
