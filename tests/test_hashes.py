#!/usr/bin/env python3

# Copyright (C) The k1ecdsa developers
#
# This file is part of k1ecdsa. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of k1ecdsa including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `k1ecdsa.hashes` module."

import hashlib

import pytest
from eth_hash.auto import keccak

from k1ecdsa.exceptions import K1ValueError
from k1ecdsa.hashes import DIGEST_SIZE, keccak_256, reduce_to_hlen, require_hf_size


def test_reduce_to_hlen() -> None:
    msg = "Satoshi Nakamoto"
    digest = hashlib.sha256(msg.encode()).digest()
    assert reduce_to_hlen(msg) == digest
    assert reduce_to_hlen(msg.encode()) == digest
    assert len(reduce_to_hlen(msg, hashlib.sha3_256)) == DIGEST_SIZE
    assert reduce_to_hlen(msg, hashlib.sha3_256) != digest


def test_keccak_256() -> None:
    empty = "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"
    assert keccak_256().hexdigest() == empty
    assert reduce_to_hlen(b"", keccak_256).hex() == empty
    # not the standardized SHA3-256
    sha3_empty = "a7ffc6f8bf1ed76651c14756a061d662f580ff4de43b49fa82d80a4b80f8434a"
    assert hashlib.sha3_256().hexdigest() == sha3_empty

    for msg in (b"example message", b"Satoshi Nakamoto", b"\x00" * 200):
        assert keccak_256(msg).digest() == keccak(msg)
        assert reduce_to_hlen(msg, keccak_256) == keccak(msg)
    assert reduce_to_hlen("example message", keccak_256) == keccak(b"example message")


def test_require_hf_size() -> None:
    require_hf_size(hashlib.sha256)
    require_hf_size(hashlib.sha3_256)
    require_hf_size(keccak_256)

    for hf in (hashlib.sha1, hashlib.sha512):
        with pytest.raises(K1ValueError, match="invalid hash function digest size: "):
            require_hf_size(hf)
