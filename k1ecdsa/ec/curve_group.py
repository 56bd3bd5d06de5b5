#!/usr/bin/env python3

# Copyright (C) The k1ecdsa developers
#
# This file is part of k1ecdsa. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of k1ecdsa including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.


"""Point arithmetic of short Weierstrass curves over Fp.

Points are added and doubled in Jacobian coordinates
(X, Y, Z), standing for the affine point (X/Z^2, Y/Z^3):
no modular inversion is needed until the final conversion
back to affine coordinates.
Any Jacobian triple with Z = 0 is the point at infinity.

The secp256k1 prime order subgroup is defined in k1ecdsa.ec.curve.
"""

from math import ceil

from k1ecdsa.alias import INF, INFJ, Integer, JacPoint, Point
from k1ecdsa.exceptions import K1TypeError, K1ValueError
from k1ecdsa.number_theory import mod_inv, mod_sqrt
from k1ecdsa.utils import hex_string, int_from_integer, printable_int


def jac_from_aff(Q: Point) -> JacPoint:
    "Return the Jacobian coordinates of an affine point (INF included)."
    if Q[1] == 0:
        return Q[0], Q[1], 0
    return Q[0], Q[1], 1


class CurveGroup:
    """Group of the points of y^2 = x^3 + a*x + b over Fp.

    Only primes p = 3 (mod 4) are supported,
    so that point decompression is a single exponentiation.
    """

    def __init__(self, p: Integer, a: Integer, b: Integer) -> None:
        p = int_from_integer(p)
        a = int_from_integer(a)
        b = int_from_integer(b)

        # Fermat test: a weak, but cheap, primality check
        if p < 3 or p % 2 == 0 or pow(2, p - 1, p) != 1:
            raise K1ValueError(f"p is not prime: {printable_int(p)}")
        if p % 4 != 3:
            raise K1ValueError(f"p is not equal to 3 mod 4: {printable_int(p)}")
        if not 0 <= a < p:
            raise K1ValueError(f"a not in 0..p-1: {printable_int(a)}")
        if not 0 <= b < p:
            raise K1ValueError(f"b not in 0..p-1: {printable_int(b)}")
        if (4 * a**3 + 27 * b**2) % p == 0:
            raise K1ValueError("zero discriminant")

        self.p = p
        self.p_size = ceil(p.bit_length() / 8)
        self._a = a
        self._b = b

    def __repr__(self) -> str:
        return f"CurveGroup('{hex_string(self.p)}', {self._a}, {self._b})"

    def negate(self, Q: Point) -> Point:
        "Return -Q; INF is mapped to INF."
        if len(Q) != 2:
            raise K1TypeError("not a point")
        return Q[0], -Q[1] % self.p

    def aff_from_jac(self, Q: JacPoint) -> Point:
        "Return the affine coordinates of a Jacobian point (INF included)."
        X, Y, Z = Q
        if Z == 0:
            return INF
        Z_inv = mod_inv(Z, self.p)
        Z2_inv = Z_inv * Z_inv % self.p
        return X * Z2_inv % self.p, Y * Z2_inv * Z_inv % self.p

    def x_aff_from_jac(self, Q: JacPoint) -> int:
        "Return the affine x-coordinate of a Jacobian point."
        X, _, Z = Q
        if Z == 0:
            raise K1ValueError("INF has no x-coordinate")
        return X * mod_inv(Z * Z, self.p) % self.p

    def add_jac(self, Q: JacPoint, R: JacPoint) -> JacPoint:
        # both points are assumed to be on curve
        p = self.p

        QZ2 = Q[2] * Q[2] % p
        RZ2 = R[2] * R[2] % p
        U1 = Q[0] * RZ2 % p
        U2 = R[0] * QZ2 % p
        S1 = Q[1] * RZ2 * R[2] % p
        S2 = R[1] * QZ2 * Q[2] % p

        H = (U2 - U1) % p
        W = (S2 - S1) % p
        if H == 0 and W == 0:
            return self.double_jac(Q)

        H2 = H * H % p
        H3 = H2 * H % p
        U1H2 = U1 * H2 % p
        X = (W * W - H3 - 2 * U1H2) % p
        Y = (W * (U1H2 - X) - S1 * H3) % p
        Z = Q[2] * R[2] * H % p

        # Z = 0 if any addend is INF (or Q = -R):
        # pick the sum without branching on which one
        sums = ((X, Y, Z), R, Q, INFJ)
        return sums[(Q[2] == 0) + 2 * (R[2] == 0)]

    def double_jac(self, Q: JacPoint) -> JacPoint:
        # the point is assumed to be on curve; INF doubles into Z = 0
        p = self.p
        X, Y, Z = Q

        YY = Y * Y % p
        S = 4 * X * YY % p
        ZZ = Z * Z % p
        M = (3 * X * X + self._a * ZZ * ZZ) % p
        X3 = (M * M - 2 * S) % p
        Y3 = (M * (S - X3) - 8 * YY * YY) % p
        return X3, Y3, 2 * Y * Z % p

    def _y2(self, x: int) -> int:
        # right-hand side of the curve equation: it might not be a square
        return (x * x * x + self._a * x + self._b) % self.p

    def y(self, x: int) -> int:
        "Return one of the two y-coordinates of the points with abscissa x."
        if not 0 <= x < self.p:
            raise K1ValueError(f"x-coordinate not in 0..p-1: {printable_int(x)}")
        try:
            return mod_sqrt(self._y2(x), self.p)
        except K1ValueError as e:
            raise K1ValueError(f"invalid x-coordinate: {printable_int(x)}") from e

    def y_odd(self, x: int, odd1even0: int = 1) -> int:
        """Return the y-coordinate with the required parity.

        Point decompression from the x-coordinate and the y parity bit.
        """
        if odd1even0 not in (0, 1):
            raise K1ValueError("odd1even0 must be bool or 1/0")
        root = self.y(x)
        return root if root % 2 == odd1even0 else self.p - root

    def require_on_curve(self, Q: Point) -> None:
        "Raise an Error if the point is not on the curve."
        if not self.is_on_curve(Q):
            raise K1ValueError("point not on curve")

    def is_on_curve(self, Q: Point) -> bool:
        "Return True if the affine point (INF included) is on the curve."
        if len(Q) != 2:
            raise K1ValueError("point must be a tuple[int, int]")
        x, y = Q
        if y == 0:
            return True
        if not 0 <= x < self.p:
            raise K1ValueError(f"x-coordinate not in 0..p-1: {printable_int(x)}")
        if not 0 < y < self.p:
            raise K1ValueError(f"y-coordinate not in 1..p-1: {printable_int(y)}")
        return self._y2(x) == y * y % self.p


def mult_mont_ladder(m: int, Q: JacPoint, ec: CurveGroup) -> JacPoint:
    """Return m*Q using the 'Montgomery ladder'.

    Every bit of m, scanned from the most significant one,
    costs one addition and one doubling,
    whatever the bit value (https://eprint.iacr.org/2014/140.pdf).

    Q is assumed to be on curve, m to be already reduced mod n.
    """

    if m < 0:
        raise K1ValueError(f"negative m: {hex(m)}")

    # invariant: R[1] = R[0] + Q
    R = [INFJ, Q]
    for bit in map(int, bin(m)[2:]):
        R[1 - bit] = ec.add_jac(R[0], R[1])
        R[bit] = ec.double_jac(R[bit])
    return R[0]


def _double_mult(u: int, HJ: JacPoint, v: int, QJ: JacPoint, ec: CurveGroup) -> JacPoint:
    """Return u*H + v*Q using the Shamir-Strauss algorithm.

    A single 'double & add' loop over the bits of u and v,
    adding H, Q, or the precomputed H + Q as required.

    H and Q are assumed to be on curve, u and v to be already reduced mod n.
    Only public coefficients must be used here.
    """

    if u < 0:
        raise K1ValueError(f"negative first coefficient: {hex(u)}")
    if v < 0:
        raise K1ValueError(f"negative second coefficient: {hex(v)}")

    addends = (INFJ, HJ, QJ, ec.add_jac(HJ, QJ))
    R = INFJ
    for i in reversed(range(max(u.bit_length(), v.bit_length()))):
        R = ec.double_jac(R)
        R = ec.add_jac(R, addends[(u >> i & 1) + 2 * (v >> i & 1)])
    return R
