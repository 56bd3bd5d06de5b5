#!/usr/bin/env python3

# Copyright (C) The k1ecdsa developers
#
# This file is part of k1ecdsa. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of k1ecdsa including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.


"""SEC 1 v.2 section 2.3.3/2.3.4 point encodings.

Compressed: 0x02/0x03 (even/odd y) prefix and the 32 bytes x-coordinate.
Uncompressed: 0x04 prefix and the 32+32 bytes x and y coordinates.
The point at infinity has no encoding here.
"""

from k1ecdsa.alias import Octets, Point
from k1ecdsa.ec.curve import Curve, secp256k1
from k1ecdsa.exceptions import K1ValueError
from k1ecdsa.utils import bytes_from_octets, printable_int


def bytes_from_point(Q: Point, ec: Curve = secp256k1, compressed: bool = True) -> bytes:
    "Return the compressed (default) or uncompressed encoding of a point."

    ec.require_on_curve(Q)
    x, y = Q
    if y == 0:
        raise K1ValueError("no bytes representation for infinity point")

    x_bytes = x.to_bytes(ec.p_size, byteorder="big", signed=False)
    if compressed:
        return bytes([0x02 + (y & 1)]) + x_bytes
    return b"\x04" + x_bytes + y.to_bytes(ec.p_size, byteorder="big", signed=False)


def point_from_octets(pub_key: Octets, ec: Curve = secp256k1) -> Point:
    "Return the affine point of a compressed/uncompressed encoding."

    compressed_size = 1 + ec.p_size
    uncompressed_size = 1 + 2 * ec.p_size
    pub_key = bytes_from_octets(pub_key, (compressed_size, uncompressed_size))
    prefix, size = pub_key[0], len(pub_key)

    if prefix not in (0x02, 0x03, 0x04):
        raise K1ValueError(f"not a point: {pub_key!r}")

    x = int.from_bytes(pub_key[1:compressed_size], byteorder="big", signed=False)

    if prefix == 0x04:
        if size != uncompressed_size:
            err_msg = "invalid size for uncompressed point: "
            raise K1ValueError(err_msg + f"{size} instead of {uncompressed_size}")
        y = int.from_bytes(pub_key[compressed_size:], byteorder="big", signed=False)
        if y == 0:
            raise K1ValueError("no bytes representation for infinity point")
        if not ec.is_on_curve((x, y)):
            raise K1ValueError(f"point not on curve: {(x, y)}")
        return x, y

    if size != compressed_size:
        err_msg = "invalid size for compressed point: "
        raise K1ValueError(err_msg + f"{size} instead of {compressed_size}")
    try:
        return x, ec.y_odd(x, prefix - 0x02)
    except K1ValueError as e:
        raise K1ValueError(f"invalid x-coordinate: {printable_int(x)}") from e
