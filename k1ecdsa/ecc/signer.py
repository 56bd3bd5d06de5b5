#!/usr/bin/env python3

# Copyright (C) The k1ecdsa developers
#
# This file is part of k1ecdsa. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of k1ecdsa including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.


"""ECDSA signer with recoverable signatures.

The ephemeral key (nonce) is deterministic, following RFC6979;
optional additional data (32 bytes) can be mixed into
its generation (RFC6979 section 3.6).

Signatures are always produced in the canonical 'low s' form,
with the recovery id corrected accordingly.
"""

from __future__ import annotations

from hashlib import sha256
from typing import Optional

from k1ecdsa.alias import HashF, Octets, Point, String
from k1ecdsa.ec.curve import _mult, secp256k1
from k1ecdsa.ec.scalar import SCALAR_SIZE, NonZeroScalar, scalar_from_bytes_reduced
from k1ecdsa.ec.sec_point import bytes_from_point
from k1ecdsa.ecc.dsa import Sig
from k1ecdsa.ecc.recoverable import RecoverableSig, RecoveryId
from k1ecdsa.ecc.rfc6979_nonce import challenge_, rfc6979_nonce_
from k1ecdsa.ecc.verifier import Verifier
from k1ecdsa.exceptions import K1ValueError, SigningFailed
from k1ecdsa.hashes import keccak_256, reduce_to_hlen, require_hf_size
from k1ecdsa.to_prv_key import PrvKey, int_from_prv_key


def _sign_recoverable_(c: int, q: int, k: int) -> RecoverableSig:
    # Private function: it allows to sign with an arbitrary nonce k,
    # e.g. to test the failure conditions.
    # It assumes that c is in [0, n-1] and q is in [1, n-1]

    ec = secp256k1
    try:
        k = NonZeroScalar(k)
        k1 = k.invert()
    except K1ValueError as e:
        raise SigningFailed("invalid nonce") from e

    # Steps numbering follows SEC 1 v.2 section 4.1.3
    RJ = _mult(k, ec.GJ, ec)  # 1
    if RJ[2] == 0:
        raise SigningFailed("invalid (INF) ephemeral point")
    R = ec.aff_from_jac(RJ)

    r = scalar_from_bytes_reduced(R[0].to_bytes(SCALAR_SIZE, "big"))  # 2, 3
    if r == 0:  # r≠0 required as it multiplies the public key
        raise SigningFailed("invalid zero r")

    s = k1 * (c + r * q) % ec.n  # 6
    if s == 0:  # s≠0 required as verify will need the inverse of s
        raise SigningFailed("invalid zero s")

    sig, is_s_high = Sig(r, s).normalize_s()
    recovery_id = RecoveryId.from_parities(R[1] % 2 == 1, is_s_high)
    return RecoverableSig(sig, recovery_id)


class Signer:
    """ECDSA signer, holding a valid private key.

    Message wrappers prehash with hf (SHA-256 by default) for plain
    signatures and with rec_hf (Keccak-256 by default, as in Ethereum)
    for recoverable signatures: both digest sizes must be 32 bytes.
    The RFC6979 nonce generation always uses HMAC-SHA256.
    """

    def __init__(
        self, prv_key: PrvKey, hf: HashF = sha256, rec_hf: HashF = keccak_256
    ) -> None:
        require_hf_size(hf)
        require_hf_size(rec_hf)
        self._prv_key = int_from_prv_key(prv_key)
        QJ = _mult(self._prv_key, secp256k1.GJ, secp256k1)
        self._pub_key = secp256k1.aff_from_jac(QJ)
        self._hf = hf
        self._rec_hf = rec_hf

    def __repr__(self) -> str:
        return f"Signer({bytes_from_point(self._pub_key).hex()})"

    @property
    def hf(self) -> HashF:
        return self._hf

    @property
    def rec_hf(self) -> HashF:
        return self._rec_hf

    @property
    def pub_key(self) -> Point:
        "Return the public key, as affine point."
        return self._pub_key

    def verifier(self) -> Verifier:
        "Return the Verifier for the signer public key and hash functions."
        return Verifier(self._pub_key, self._hf, self._rec_hf)

    def sign_recoverable_(
        self, msg_hash: Octets, aux: Optional[Octets] = None
    ) -> RecoverableSig:
        """Sign a 32 bytes message digest, returning a RecoverableSig.

        The nonce is the RFC6979 deterministic one,
        optionally including the aux additional data.
        """
        c = challenge_(msg_hash)
        k = rfc6979_nonce_(msg_hash, self._prv_key, aux)
        return _sign_recoverable_(c, self._prv_key, k)

    def sign_(self, msg_hash: Octets, aux: Optional[Octets] = None) -> Sig:
        "Sign a 32 bytes message digest, returning a low-s Sig."
        return self.sign_recoverable_(msg_hash, aux).sig

    def sign_recoverable(
        self, msg: String, aux: Optional[Octets] = None
    ) -> RecoverableSig:
        "Sign a rec_hf prehashed message, returning a RecoverableSig."
        return self.sign_recoverable_(reduce_to_hlen(msg, self._rec_hf), aux)

    def sign(self, msg: String, aux: Optional[Octets] = None) -> Sig:
        "Sign a hf prehashed message, returning a low-s Sig."
        return self.sign_(reduce_to_hlen(msg, self._hf), aux)
