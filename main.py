"""Polynomial arithmetic over Z/nZ — Demo Entry Point.

Walks through fast division, interpolation and a 3-of-5 secret sharing
over small and large fields.
"""

import sys
import time

from fieldpoly import rng
from fieldpoly.field import DEFAULT_FIELD_ORDER
from fieldpoly.interpolation import interpolate
from fieldpoly.polynomial import Polynomial
from fieldpoly.shamir import split_secret, recover_secret


def run_division(field_order: int, dividend: list[int], divisor: list[int]):
    """Divide and check dividend = divisor * q + r."""
    p = Polynomial(field_order, dividend)
    b = Polynomial(field_order, divisor)
    q, r = p.fast_divide(b)
    print(f"  p = {list(p.coefficients)}, b = {list(b.coefficients)} (mod {field_order})")
    print(f"  q = {list(q.coefficients)}, r = {list(r.coefficients)}")
    print(f"  b*q + r == p: {b * q + r == p}")
    print()
    return q, r


def run_interpolation(field_order: int, degree: int):
    """Sample a random polynomial and rebuild it from degree + 1 points."""
    p = Polynomial.random(field_order, degree)
    points = [(x, p.evaluate(x)) for x in range(1, degree + 2)]
    start = time.time()
    rebuilt = interpolate(points, field_order)
    elapsed = time.time() - start
    print(f"  degree {degree} over field of {field_order.bit_length()} bits")
    print(f"  rebuilt == sampled: {rebuilt == p}")
    print(f"  Time: {elapsed:.3f}s")
    print()
    return rebuilt


def run_sharing(secret: int, threshold: int, num_shares: int):
    """Split a secret and recover it from the first threshold shares."""
    shares = split_secret(secret, threshold, num_shares, DEFAULT_FIELD_ORDER)
    subset = dict(list(shares.items())[:threshold])
    recovered = recover_secret(subset, DEFAULT_FIELD_ORDER)
    print(f"  Secret: {secret}")
    print(f"  Shares issued: {num_shares}, used: {sorted(subset)}")
    print(f"  Recovered: {recovered}")
    print()
    return recovered


def main():
    seed = int(sys.argv[1]) if len(sys.argv) > 1 else 42
    rng.set_seed(seed)

    print("=" * 50)
    print("SCENARIO 1: (2x+1) / (x+1) mod 7")
    print("=" * 50)
    run_division(7, [1, 2], [1, 1])

    print("=" * 50)
    print("SCENARIO 2: non-monic divisor mod 101")
    print("=" * 50)
    run_division(101, [5, 0, 3, 9, 1, 4], [7, 0, 3])

    print("=" * 50)
    print("SCENARIO 3: interpolation over 2^127 - 1")
    print("=" * 50)
    run_interpolation(DEFAULT_FIELD_ORDER, 8)

    print("=" * 50)
    print("SCENARIO 4: 3-of-5 secret sharing")
    print("=" * 50)
    run_sharing(123456789, threshold=3, num_shares=5)


if __name__ == "__main__":
    main()
