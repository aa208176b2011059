"""Polynomial arithmetic over the integers modulo a field order.

coeffs[0] is the constant term. Operators return new polynomials; the only
in-place mutators are set_constant() and canonicalize().
"""

import logging
import math
import operator

from fieldpoly import rng
from fieldpoly.errors import (DivisionByZeroError, EmptyCoefficientsError,
                              InvalidPolynomialError, InvalidReversalDegreeError)
from fieldpoly.field import ensure_field_order, inverse

logger = logging.getLogger(__name__)


class Polynomial:
    """Polynomial over Z/nZ, n = field_order."""

    __slots__ = ('_field_order', '_coeffs')

    def __init__(self, field_order: int, coefficients):
        self._field_order = ensure_field_order(field_order)
        self._coeffs = [operator.index(c) % field_order for c in coefficients]
        if not self._coeffs:
            raise EmptyCoefficientsError("empty coefficient")

    @classmethod
    def _new(cls, field_order: int, coeffs: list[int]) -> 'Polynomial':
        # Skips validation and reduction; callers pass a trusted field order.
        poly = cls.__new__(cls)
        poly._field_order = field_order
        poly._coeffs = coeffs
        return poly

    @classmethod
    def _normalized(cls, field_order: int, raw: list[int]) -> 'Polynomial':
        return cls._new(field_order, raw).canonicalize().trim_trailing_zeros()

    @staticmethod
    def zero(field_order: int) -> 'Polynomial':
        return Polynomial(field_order, [0])

    @staticmethod
    def one(field_order: int) -> 'Polynomial':
        return Polynomial(field_order, [1])

    @staticmethod
    def random(field_order: int, degree: int, constant: int | None = None) -> 'Polynomial':
        """Polynomial with degree + 1 uniformly random coefficients.

        If constant is given it replaces the sampled constant term, so that
        p(0) = constant (the shape used for secret sharing).
        """
        ensure_field_order(field_order)
        if degree < 0:
            raise ValueError(f"degree must be non-negative, got {degree}")
        coeffs = [rng.random_field_element(field_order) for _ in range(degree + 1)]
        poly = Polynomial(field_order, coeffs)
        if constant is not None:
            poly.set_constant(constant)
        return poly

    # --- Representation ---

    @property
    def field_order(self) -> int:
        return self._field_order

    @property
    def coefficients(self) -> tuple[int, ...]:
        return tuple(self._coeffs)

    @property
    def degree(self) -> int:
        return len(self._coeffs) - 1

    def coefficient(self, i: int) -> int:
        """Coefficient of x^i; zero past the stored length."""
        if i < 0:
            raise IndexError(f"negative coefficient index {i}")
        if i >= len(self._coeffs):
            return 0
        return self._coeffs[i]

    def __len__(self):
        return len(self._coeffs)

    def __bool__(self):
        return not self.is_zero()

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        if self._field_order != other._field_order:
            return False
        return self.trim_trailing_zeros()._coeffs == other.trim_trailing_zeros()._coeffs

    def __repr__(self):
        return f"Polynomial({self._coeffs}, field_order={self._field_order})"

    # --- Normalization ---

    def set_constant(self, value: int) -> None:
        """Overwrite the constant term in place."""
        self._coeffs[0] = operator.index(value) % self._field_order

    def canonicalize(self) -> 'Polynomial':
        """Reduce every coefficient into [0, field_order), in place."""
        n = self._field_order
        for i, c in enumerate(self._coeffs):
            self._coeffs[i] = c % n
        return self

    def trim_trailing_zeros(self) -> 'Polynomial':
        end = len(self._coeffs) - 1
        while end > 0 and self._coeffs[end] == 0:
            end -= 1
        return self._new(self._field_order, self._coeffs[:end + 1])

    def is_degree_consistent(self) -> bool:
        """True for constants and for polynomials with a non-zero top coefficient."""
        return len(self._coeffs) == 1 or self._coeffs[-1] != 0

    def is_zero(self) -> bool:
        return all(c == 0 for c in self._coeffs)

    def _check_operands(self, other: 'Polynomial', op: str) -> None:
        for name, poly in (('left', self), ('right', other)):
            if not poly.is_degree_consistent():
                raise InvalidPolynomialError(
                    f"{op}: {name} operand has a zero leading coefficient: {poly!r}")
        if self._field_order != other._field_order:
            raise InvalidPolynomialError(
                f"{op}: field orders differ ({self._field_order} != {other._field_order})")

    # --- Evaluation & differentiation ---

    def evaluate(self, x: int) -> int:
        """Evaluate at x using Horner's method."""
        n = self._field_order
        x = operator.index(x) % n
        if x == 0:
            return self._coeffs[0]
        result = 0
        for coeff in reversed(self._coeffs):
            result = (result * x + coeff) % n
        return result

    __call__ = evaluate

    def differentiate(self, k: int = 1) -> 'Polynomial':
        """k-th formal derivative.

        The coefficient of x^i moves to x^(i-k), multiplied by the falling
        factorial i * (i-1) * ... * (i-k+1).
        """
        if k < 0:
            raise ValueError(f"derivative order must be non-negative, got {k}")
        if k >= len(self._coeffs):
            return self.zero(self._field_order)
        coeffs = [c * math.perm(i, k)
                  for i, c in enumerate(self._coeffs[k:], start=k)]
        return self._new(self._field_order, coeffs).canonicalize()

    # --- Elementary arithmetic ---

    def add(self, other: 'Polynomial') -> 'Polynomial':
        self._check_operands(other, 'add')
        return self._add(other)

    def subtract(self, other: 'Polynomial') -> 'Polynomial':
        self._check_operands(other, 'subtract')
        return self._add(other.negate())

    def multiply(self, other: 'Polynomial') -> 'Polynomial':
        self._check_operands(other, 'multiply')
        return self._mul(other)

    def negate(self) -> 'Polynomial':
        return self._normalized(self._field_order, [-c for c in self._coeffs])

    def scale(self, c: int) -> 'Polynomial':
        """Multiply every coefficient by the scalar c."""
        c = operator.index(c)
        return self._normalized(self._field_order, [c * x for x in self._coeffs])

    def _add(self, other: 'Polynomial') -> 'Polynomial':
        a = self.trim_trailing_zeros()._coeffs
        b = other.trim_trailing_zeros()._coeffs
        if len(a) < len(b):
            a, b = b, a
        total = list(a)
        for i, c in enumerate(b):
            total[i] += c
        return self._normalized(self._field_order, total)

    def _mul(self, other: 'Polynomial') -> 'Polynomial':
        a = self.trim_trailing_zeros()._coeffs
        b = other.trim_trailing_zeros()._coeffs
        product = [0] * (len(a) + len(b) - 1)
        for i, x in enumerate(a):
            if x == 0:
                continue
            for j, y in enumerate(b):
                product[i + j] += x * y
        return self._normalized(self._field_order, product)

    def __neg__(self):
        return self.negate()

    def __add__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        if isinstance(other, int):
            return self.scale(other)
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other):
        if isinstance(other, int):
            return self.scale(other)
        return NotImplemented

    # --- Fast division ---

    def truncate(self, l: int) -> 'Polynomial':
        """Keep the terms of degree below l, i.e. p mod x^l."""
        if l < 1:
            raise ValueError(f"truncation length must be positive, got {l}")
        return self._normalized(self._field_order, self._coeffs[:l])

    def reverse(self, k: int) -> 'Polynomial':
        """Reversal x^k * p(1/x); k must be at least the degree."""
        trimmed = self.trim_trailing_zeros()
        if k < trimmed.degree:
            raise InvalidReversalDegreeError(
                f"cannot reverse a degree {trimmed.degree} polynomial at k={k}")
        coeffs = [0] * (k + 1)
        for i, c in enumerate(trimmed._coeffs):
            coeffs[k - i] = c
        return self._normalized(self._field_order, coeffs)

    def invert_modulo(self, l: int) -> 'Polynomial':
        """Inverse g of this power series with p * g = 1 mod x^l.

        Newton iteration g <- 2g - p*g^2, doubling the precision each
        round starting from g = 2 - p mod x^2. The constant term must be 1.
        """
        if l < 1:
            raise ValueError(f"inversion length must be positive, got {l}")
        if self._coeffs[0] != 1:
            raise InvalidPolynomialError(
                f"invert_modulo: constant term must be 1, got {self._coeffs[0]}")
        rounds = (l - 1).bit_length()  # ceil(log2(l))
        two = self._new(self._field_order, [2])
        g = two._add(self.negate()).truncate(2)
        for i in range(1, rounds + 1):
            precision = 1 << i
            g_squared = g._mul(g).truncate(precision)
            correction = self.truncate(precision)._mul(g_squared)
            g = g.scale(2)._add(correction.negate()).truncate(precision)
            logger.debug("invert_modulo: round %d/%d, precision %d", i, rounds, precision)
        return g.truncate(l)

    def fast_divide(self, divisor: 'Polynomial') -> tuple['Polynomial', 'Polynomial']:
        """Quotient and remainder with self = divisor * q + r, deg(r) < deg(divisor).

        Reverses both operands, inverts the reversed divisor mod x^(m+1)
        and reads the quotient off the truncated product. Non-monic divisors
        are scaled to monic first, which needs an invertible leading
        coefficient.
        """
        self._check_operands(divisor, 'fast_divide')
        if divisor.is_zero():
            raise DivisionByZeroError("fast_divide: divisor is the zero polynomial")
        n = self._field_order
        dividend = self.trim_trailing_zeros()
        divisor = divisor.trim_trailing_zeros()
        if dividend.degree < divisor.degree:
            return self.zero(n), dividend

        m = dividend.degree - divisor.degree
        lead = divisor._coeffs[-1]
        lead_inv = 1 if lead == 1 else inverse(lead, n)
        monic = divisor if lead_inv == 1 else divisor.scale(lead_inv)
        logger.debug("fast_divide: deg %d by deg %d, quotient degree %d",
                     dividend.degree, divisor.degree, m)

        inv_rev = monic.reverse(divisor.degree).invert_modulo(m + 1)
        q_rev = dividend.reverse(dividend.degree)._mul(inv_rev).truncate(m + 1)
        quotient = q_rev.reverse(m)
        if lead_inv != 1:
            quotient = quotient.scale(lead_inv)
        remainder = dividend._add(divisor._mul(quotient).negate())
        return quotient, remainder

    def __divmod__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.fast_divide(other)

    def __floordiv__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.fast_divide(other)[0]

    def __mod__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.fast_divide(other)[1]
