#!/usr/bin/env python3

# Copyright (C) The k1ecdsa developers
#
# This file is part of k1ecdsa. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of k1ecdsa including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.


"""Modular arithmetic: inverse and square root.

Only primes p = 3 (mod 4) are supported by mod_sqrt,
the secp256k1 field prime being such a prime.
"""

from typing import Tuple

from k1ecdsa.exceptions import K1ValueError
from k1ecdsa.utils import printable_int


def xgcd(a: int, b: int) -> Tuple[int, int, int]:
    "Return (g, x, y) such that a*x + b*y = g = gcd(a, b)."

    # extended Euclidean algorithm
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r != 0:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y
    return old_r, old_x, old_y


def mod_inv(a: int, m: int) -> int:
    """Return the inverse of a (mod m).

    An Error is raised if a and m are not coprime
    (e.g. a = 0 mod m).
    """

    a %= m
    g, x, _ = xgcd(a, m)
    if g != 1:
        raise K1ValueError(f"no inverse for {printable_int(a)} mod {printable_int(m)}")
    return x % m


def mod_sqrt(a: int, p: int) -> int:
    """Return a square root of a (mod p), p being a prime 3 (mod 4).

    The other root is p minus the returned one.
    An Error is raised if a is not a quadratic residue.
    """

    if p % 4 != 3:
        raise K1ValueError(f"field prime is not equal to 3 mod 4: {printable_int(p)}")

    a %= p
    root = pow(a, (p + 1) // 4, p)
    if root * root % p != a:
        raise K1ValueError(f"no root for {printable_int(a)} mod {printable_int(p)}")
    return root
