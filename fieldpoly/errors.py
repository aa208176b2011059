"""Exceptions raised by polynomial construction and arithmetic."""


class PolynomialError(Exception):
    """Base class for all fieldpoly errors."""


class EmptyCoefficientsError(PolynomialError, ValueError):
    """A polynomial was constructed from an empty coefficient sequence."""


class InvalidFieldOrderError(PolynomialError, ValueError):
    """The field order is not an integer >= 2."""


class InvalidPolynomialError(PolynomialError, ValueError):
    """An operand is not usable by the requested operation."""


class InvalidReversalDegreeError(PolynomialError, ValueError):
    """Reversal requested at a degree below the polynomial's own degree."""


class DivisionByZeroError(PolynomialError, ZeroDivisionError):
    pass


class NotInvertibleError(PolynomialError, ArithmeticError):
    """A non-zero residue has no inverse modulo a composite field order."""


class RandomGenerationError(PolynomialError, RuntimeError):
    pass
