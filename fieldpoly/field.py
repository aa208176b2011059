"""Field order validation and modular helpers for F_n, n >= 2."""

from fieldpoly.errors import (DivisionByZeroError, InvalidFieldOrderError,
                              NotInvertibleError)

DEFAULT_FIELD_ORDER = (1 << 127) - 1  # 2^127 - 1


def ensure_field_order(field_order) -> int:
    """Return field_order if it can define a field, raise otherwise."""
    if isinstance(field_order, bool) or not isinstance(field_order, int):
        raise InvalidFieldOrderError(
            f"field order must be an integer, got {type(field_order).__name__}")
    if field_order < 2:
        raise InvalidFieldOrderError(f"not a valid field order: {field_order}")
    return field_order


def inverse(value: int, field_order: int) -> int:
    """Multiplicative inverse of value mod field_order."""
    value %= field_order
    if value == 0:
        raise DivisionByZeroError("Cannot invert zero")
    try:
        return pow(value, -1, field_order)
    except ValueError:
        raise NotInvertibleError(
            f"{value} has no inverse modulo {field_order}") from None
