#!/usr/bin/env python3

# Copyright (C) The k1ecdsa developers
#
# This file is part of k1ecdsa. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of k1ecdsa including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Scalars, i.e. integers modulo the secp256k1 group order n.

NonZeroScalar is the validated scalar type used for
private keys and for the r and s signature components:
a NonZeroScalar instance is in 1..n-1 by construction,
so it can always be inverted.
"""

from __future__ import annotations

from k1ecdsa.alias import Octets
from k1ecdsa.ec.curve import secp256k1
from k1ecdsa.exceptions import K1ValueError
from k1ecdsa.number_theory import mod_inv
from k1ecdsa.utils import bytes_from_octets

SCALAR_SIZE = secp256k1.n_size


def scalar_from_bytes_reduced(data: Octets) -> int:
    """Return the big-endian integer reduced mod n.

    Used to lift a field element (e.g. an x-coordinate)
    into the scalar field.
    """
    data = bytes_from_octets(data)
    return int.from_bytes(data, byteorder="big", signed=False) % secp256k1.n


def is_high(scalar: int) -> bool:
    "Return True if the scalar is greater than n/2."
    return scalar > secp256k1.n // 2


class NonZeroScalar(int):
    "Scalar in 1..n-1."

    def __new__(cls, value: int) -> NonZeroScalar:
        if not 0 < value < secp256k1.n:
            raise K1ValueError("scalar not in 1..n-1")
        return super().__new__(cls, value)

    @classmethod
    def from_bytes(cls, data: Octets) -> NonZeroScalar:  # type: ignore[override]
        "Return a NonZeroScalar from its 32 bytes big-endian representation."
        data = bytes_from_octets(data, SCALAR_SIZE)
        return cls(int.from_bytes(data, byteorder="big", signed=False))

    def to_bytes(  # type: ignore[override]
        self, length: int = SCALAR_SIZE, byteorder: str = "big", signed: bool = False
    ) -> bytes:
        "Return the 32 bytes big-endian representation."
        return int(self).to_bytes(length, byteorder, signed=signed)  # type: ignore

    def invert(self) -> NonZeroScalar:
        "Return the inverse mod n."
        return NonZeroScalar(mod_inv(self, secp256k1.n))

    def negate(self) -> NonZeroScalar:
        "Return the opposite mod n."
        return NonZeroScalar(secp256k1.n - self)

    def is_high(self) -> bool:
        "Return True if the scalar is greater than n/2."
        return is_high(self)

    def __repr__(self) -> str:
        return f"NonZeroScalar({int(self):#066x})"
