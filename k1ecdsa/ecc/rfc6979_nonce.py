#!/usr/bin/env python3

# Copyright (C) The k1ecdsa developers
#
# This file is part of k1ecdsa. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of k1ecdsa including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""RFC6979 nonce derivation for secp256k1 ECDSA.

https://tools.ietf.org/html/rfc6979

Every ECDSA signature consumes a secret per-signature scalar k
(the nonce). A biased k leaks information about the private key,
and signing two different digests with the same k discloses it
outright.

The nonce is here obtained from an HMAC_DRBG keyed with the
private key and the message digest: signing is then repeatable,
while to anyone without the private key the nonces look like
the output of a random function.

Optional additional data (e.g. fresh random bytes) can be mixed into
the generation process as in RFC6979 section 3.6: the nonce stays
a deterministic function of all its inputs.
"""

import hashlib
import hmac
from hashlib import sha256
from typing import Optional

from k1ecdsa.alias import HashF, Octets
from k1ecdsa.ec.curve import secp256k1
from k1ecdsa.ec.scalar import NonZeroScalar
from k1ecdsa.hashes import DIGEST_SIZE
from k1ecdsa.to_prv_key import PrvKey, int_from_prv_key
from k1ecdsa.utils import bytes_from_octets, int_from_bits

# size of the optional additional data
AUX_SIZE = 32


def challenge_(msg_hash: Octets) -> int:
    "Return the 32 bytes message digest reduced to a scalar."
    msg_hash = bytes_from_octets(msg_hash, DIGEST_SIZE)

    # leftmost ec.nlen bits %= ec.n
    return int_from_bits(msg_hash, secp256k1.nlen) % secp256k1.n


def _rfc6979_nonce_(c: int, q: int, aux: bytes = b"", hf: HashF = sha256) -> int:
    # https://tools.ietf.org/html/rfc6979 section 3.2

    ec = secp256k1
    # convert the private key q to an octet sequence of size n_size
    q_bytes = q.to_bytes(ec.n_size, byteorder="big", signed=False)
    # truncate and/or expand c: encoding size is driven by n_size
    c_bytes = c.to_bytes(ec.n_size, byteorder="big", signed=False)
    # additional data k' goes after the private key and the message
    bprvbm = q_bytes + c_bytes + aux

    hf_size = hf().digest_size
    v = b"\x01" * hf_size  # 3.2.b
    k = b"\x00" * hf_size  # 3.2.c

    k = hmac.new(k, v + b"\x00" + bprvbm, hf).digest()  # 3.2.d
    v = hmac.new(k, v, hf).digest()  # 3.2.e
    k = hmac.new(k, v + b"\x01" + bprvbm, hf).digest()  # 3.2.f
    v = hmac.new(k, v, hf).digest()  # 3.2.g

    while True:  # 3.2.h
        t = b""  # 3.2.h.1
        while len(t) < ec.n_size:  # 3.2.h.2
            v = hmac.new(k, v, hf).digest()
            t += v
        # for secp256k1 and sha256 the bias of a plain
        # 'int(t) % n' would not be observable (about 1.27*2^-128),
        # but candidates not in 1..n-1 are discarded anyway
        nonce = int_from_bits(t, ec.nlen)  # 3.2.h.3
        if 0 < nonce < ec.n:
            return nonce
        k = hmac.new(k, v + b"\x00", hf).digest()
        v = hmac.new(k, v, hf).digest()


def rfc6979_nonce_(
    msg_hash: Octets,
    prv_key: PrvKey,
    aux: Optional[Octets] = None,
    hf: HashF = hashlib.sha256,
) -> NonZeroScalar:
    """Return an RFC6979 deterministic ephemeral key (nonce).

    If provided, aux (32 bytes) is the additional data
    of RFC6979 section 3.6.

    see https://tools.ietf.org/html/rfc6979 section 3.2
    """
    c = challenge_(msg_hash)
    q = int_from_prv_key(prv_key)
    aux = b"" if aux is None else bytes_from_octets(aux, AUX_SIZE)

    return NonZeroScalar(_rfc6979_nonce_(c, q, aux, hf))
