#!/usr/bin/env python3

# Copyright (C) The k1ecdsa developers
#
# This file is part of k1ecdsa. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of k1ecdsa including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases.

mypy aliases, documenting also coding input conventions.
"""

from typing import Any, Callable, Tuple, Union

# Octets are a sequence of eight-bit bytes or a hex-string (not text string)
#
# hex-strings are strings that can be converted to bytes using bytes.fromhex,
# e.g.:
# "02 79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
# "0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
#
# use k1ecdsa.utils.bytes_from_octets to convert Octets to bytes
#
# Octets are used for message digests (32 bytes),
# SEC public keys (33 or 65 bytes),
# dsa.Sig (64 bytes r || s),
# recoverable.RecoverableSig (65 bytes r || s || v)
Octets = Union[bytes, str]

# bytes or text string (not hex-string)
#
# this is for string that can be
# converted to bytes using encode(), e.g. a message to be signed
String = Union[bytes, str]

# hex-string or bytes representation of an int
Integer = Union[bytes, str, int]

# Hash digest constructor, e.g. hashlib.sha256
HashF = Callable[[], Any]

# Elliptic curve point in affine coordinates.
Point = Tuple[int, int]

# Note that the infinity point in affine coordinates is INF = (int, 0)
# (no affine point has y=0 coordinate in a group of prime order).
# It can be checked with 'INF[1] == 0'
# The x-coordinate is arbitrary: 5 is preferred
# because it is not a valid x-coordinate in secp256k1
INF = 5, 0

# Elliptic curve point in Jacobian coordinates.
JacPoint = Tuple[int, int, int]

# Infinity point in Jacobian coordinates is INFJ = (int, int, 0).
# It can be checked with 'INFJ[2] == 0'
INFJ = 7, 0, 0
