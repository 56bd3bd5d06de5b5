#!/usr/bin/env python3

# Copyright (C) The k1ecdsa developers
#
# This file is part of k1ecdsa. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of k1ecdsa including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve class and the secp256k1 curve.

SEC 2 v.2 secp256k1 parameters:
http://www.secg.org/sec2-v2.pdf
"""

from math import ceil
from typing import Optional

from k1ecdsa.alias import INF, Integer, JacPoint, Point
from k1ecdsa.ec.curve_group import CurveGroup, _double_mult, jac_from_aff, mult_mont_ladder
from k1ecdsa.exceptions import K1ValueError
from k1ecdsa.utils import hex_string, int_from_integer, printable_int


class Curve(CurveGroup):
    """Prime order cyclic subgroup of an elliptic curve over Fp.

    The subgroup is generated by G, its order n is prime,
    and the cofactor is 1: every curve point is a subgroup point.
    """

    def __init__(
        self,
        p: Integer,
        a: Integer,
        b: Integer,
        G: Point,
        n: Integer,
        name: str,
    ) -> None:
        super().__init__(p, a, b)

        if len(G) != 2:
            raise K1ValueError("generator must a be a sequence[int, int]")
        self.G = (int_from_integer(G[0]), int_from_integer(G[1]))
        if self.G[1] == 0:
            raise K1ValueError("INF point cannot be a generator")
        self.require_on_curve(self.G)
        self.GJ = jac_from_aff(self.G)

        n = int_from_integer(n)
        # Hasse theorem with cofactor 1: |n - (p + 1)| <= 2*sqrt(p)
        # checked on integer squares to avoid floating point
        t = self.p + 1 - n
        if t * t > 4 * self.p:
            raise K1ValueError(f"n not in p+1-2*sqrt(p)..p+1+2*sqrt(p): {printable_int(n)}")
        # n == p is the anomalous case, insecure
        if n == self.p:
            raise K1ValueError(f"n = p weak curve: {hex_string(n)}")
        if mult_mont_ladder(n, self.GJ, self)[2] != 0:
            raise K1ValueError("n is not the group order")
        self.n = n
        self.nlen = n.bit_length()
        self.n_size = ceil(self.nlen / 8)
        self.name = name

    def __repr__(self) -> str:
        return f"Curve('{self.name}')"

    def __str__(self) -> str:
        parameters = (
            ("p", self.p),
            ("a", self._a),
            ("b", self._b),
            ("x_G", self.G[0]),
            ("y_G", self.G[1]),
            ("n", self.n),
        )
        lines = [self.name] + [f" {k} = {hex_string(v)}" for k, v in parameters]
        return "\n".join(lines)


secp256k1 = Curve(
    "FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFE FFFFFC2F",
    0,
    7,
    (
        "79BE667E F9DCBBAC 55A06295 CE870B07 029BFCDB 2DCE28D9 59F2815B 16F81798",
        "483ADA77 26A3C465 5DA4FBFC 0E1108A8 FD17B448 A6855419 9C47D08F FB10D4B8",
    ),
    "FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFE BAAEDCE6 AF48A03B BFD25E8C D0364141",
    "secp256k1",
)


def mult(m: Integer, Q: Optional[Point] = None, ec: Curve = secp256k1) -> Point:
    """Point multiplication, implemented using 'Montgomery ladder'.

    Computations use Jacobian coordinates and binary decomposition of m.
    If Q is None, the curve generator is used.
    """
    Q = ec.G if Q is None else Q
    ec.require_on_curve(Q)
    m = int_from_integer(m) % ec.n
    R = mult_mont_ladder(m, jac_from_aff(Q), ec)
    return ec.aff_from_jac(R)


def _mult(m: int, QJ: JacPoint, ec: Curve = secp256k1) -> JacPoint:
    # Private function: Jacobian input/output, no checks
    return mult_mont_ladder(m, QJ, ec)


def double_mult(
    u: Integer, H: Point, v: Integer, Q: Point, ec: Curve = secp256k1
) -> Point:
    """Double scalar multiplication (u*H + v*Q).

    Only public coefficients must be used here.
    """
    ec.require_on_curve(H)
    ec.require_on_curve(Q)
    u = int_from_integer(u) % ec.n
    v = int_from_integer(v) % ec.n
    R = _double_mult(u, jac_from_aff(H), v, jac_from_aff(Q), ec)
    return ec.aff_from_jac(R)


def is_inf(Q: Point) -> bool:
    "Return True if the affine point is the infinity point."
    return Q[1] == INF[1]
