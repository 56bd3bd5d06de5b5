#!/usr/bin/env python3

# Copyright (C) The k1ecdsa developers
#
# This file is part of k1ecdsa. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of k1ecdsa including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Functions for conversions between different private key formats.

Error messages never include the private key value.
"""

from typing import Union

from k1ecdsa.ec.scalar import NonZeroScalar
from k1ecdsa.exceptions import InvalidPrivateKey, K1ValueError
from k1ecdsa.utils import bytes_from_octets

# private key inputs:
# integer as int
# 32 bytes big-endian as bytes or hex-string
PrvKey = Union[int, bytes, str]


def int_from_prv_key(prv_key: PrvKey) -> NonZeroScalar:
    """Return a verified-as-valid private key scalar.

    It supports:

    - integer (native int)
    - 32 bytes big-endian octets (bytes or hex-string)
    """

    if isinstance(prv_key, int):
        q = prv_key
    else:
        try:
            prv_key = bytes_from_octets(prv_key, 32)
        except (K1ValueError, ValueError, TypeError) as e:
            raise InvalidPrivateKey("not a private key") from e
        q = int.from_bytes(prv_key, "big", signed=False)

    try:
        return NonZeroScalar(q)
    except K1ValueError:
        # no exception chaining: it would leak the key value
        raise InvalidPrivateKey("private key not in 1..n-1") from None
