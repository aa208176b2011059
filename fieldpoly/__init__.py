"""Polynomial arithmetic over Z/nZ: fast division, interpolation, secret sharing."""

from fieldpoly.errors import (
    PolynomialError, EmptyCoefficientsError, InvalidFieldOrderError,
    InvalidPolynomialError, InvalidReversalDegreeError, DivisionByZeroError,
    NotInvertibleError, RandomGenerationError,
)
from fieldpoly.field import DEFAULT_FIELD_ORDER, ensure_field_order, inverse
from fieldpoly.polynomial import Polynomial
from fieldpoly.interpolation import (
    interpolate, interpolate_at_zero, lagrange_coefficients_at_zero,
)
from fieldpoly.shamir import split_secret, recover_secret
from fieldpoly import rng
