"""Lagrange interpolation over Z/nZ."""

import logging

from fieldpoly.field import inverse
from fieldpoly.polynomial import Polynomial

logger = logging.getLogger(__name__)


def lagrange_coefficients_at_zero(x_values: list[int], field_order: int) -> list[int]:
    """Precompute Lagrange basis coefficients at x=0 for given x-coordinates.

    Returns lambda_i = prod_{j!=i} (-x_j) / (x_i - x_j) for each i.
    """
    if not x_values:
        raise ValueError("at least one x-coordinate is required")
    n = len(x_values)
    lambdas = []
    for i in range(n):
        numerator = 1
        denominator = 1
        for j in range(n):
            if i == j:
                continue
            numerator = numerator * -x_values[j] % field_order
            denominator = denominator * (x_values[i] - x_values[j]) % field_order
        lambdas.append(numerator * inverse(denominator, field_order) % field_order)
    return lambdas


def interpolate_at_zero(points: list[tuple[int, int]], field_order: int) -> int:
    """Lagrange interpolation evaluated at x=0.

    points: list of (x_i, y_i) pairs.
    Returns p(0) = sum_i y_i * lambda_i.
    """
    lambdas = lagrange_coefficients_at_zero([x for x, _ in points], field_order)
    result = 0
    for (_, y), lam in zip(points, lambdas):
        result = (result + y * lam) % field_order
    return result


def interpolate(points: list[tuple[int, int]], field_order: int) -> Polynomial:
    """Unique polynomial of degree < len(points) through the given points.

    Each basis numerator prod_{j!=i} (x - x_j) is the vanishing polynomial
    of all points divided by (x - x_i).
    """
    if not points:
        raise ValueError("at least one point is required")
    vanishing = Polynomial.one(field_order)
    for x, _ in points:
        vanishing = vanishing.multiply(Polynomial(field_order, [-x, 1]))

    result = Polynomial.zero(field_order)
    for x, y in points:
        basis, _ = vanishing.fast_divide(Polynomial(field_order, [-x, 1]))
        weight = y * inverse(basis.evaluate(x), field_order)
        result = result.add(basis.scale(weight))
    logger.debug("interpolate: %d points, degree %d", len(points), result.degree)
    return result
