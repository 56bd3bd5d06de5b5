#!/usr/bin/env python3

# Copyright (C) The k1ecdsa developers
#
# This file is part of k1ecdsa. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of k1ecdsa including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Hash based helper functions.

The ECDSA protocol layer only consumes 32-byte message digests;
these helpers prehash raw messages for the convenience wrappers.

Hash functions are given as hashlib-style constructors,
e.g. hashlib.sha256 or keccak_256.
"""

import hashlib
from typing import Any

from Crypto.Hash import keccak

from k1ecdsa.alias import HashF, String
from k1ecdsa.exceptions import K1ValueError

# size of the message digest consumed by the protocol layer
DIGEST_SIZE = 32


def keccak_256(data: bytes = b"") -> Any:
    """Return a Keccak-256 hash object.

    This is the original Keccak padding used by Ethereum,
    not the standardized hashlib.sha3_256.
    """
    return keccak.new(data=data, digest_bits=256)


def require_hf_size(hf: HashF) -> None:
    "Require the hash function to produce a 32 bytes digest."
    hf_size = hf().digest_size
    if hf_size != DIGEST_SIZE:
        err_msg = f"invalid hash function digest size: {hf_size}"
        err_msg += f" instead of {DIGEST_SIZE}"
        raise K1ValueError(err_msg)


def reduce_to_hlen(msg: String, hf: HashF = hashlib.sha256) -> bytes:
    "Return the hf digest of the message."
    if isinstance(msg, str):
        msg = msg.encode()
    h = hf()
    h.update(msg)
    return bytes(h.digest())
