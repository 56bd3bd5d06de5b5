#!/usr/bin/env python3

# Copyright (C) The k1ecdsa developers
#
# This file is part of k1ecdsa. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of k1ecdsa including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Functions for conversions between different public key formats."

from typing import Union

from k1ecdsa.alias import Octets, Point
from k1ecdsa.ec.curve import secp256k1
from k1ecdsa.ec.sec_point import bytes_from_point, point_from_octets
from k1ecdsa.exceptions import K1ValueError

# public key inputs:
# elliptic curve point as Point tuple
# SEC compressed/uncompressed octets (bytes or hex-string)
PubKey = Union[Point, Octets]


def point_from_pub_key(pub_key: PubKey) -> Point:
    "Return an affine point tuple from a public key."

    if isinstance(pub_key, tuple):
        if secp256k1.is_on_curve(pub_key) and pub_key[1] != 0:
            return pub_key
        raise K1ValueError(f"not a valid public key: {pub_key}")
    return point_from_octets(pub_key, secp256k1)


def bytes_from_pub_key(pub_key: PubKey, compressed: bool = True) -> bytes:
    "Return the SEC octets of a public key."
    return bytes_from_point(point_from_pub_key(pub_key), secp256k1, compressed)
