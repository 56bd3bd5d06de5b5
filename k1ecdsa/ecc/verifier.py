#!/usr/bin/env python3

# Copyright (C) The k1ecdsa developers
#
# This file is part of k1ecdsa. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of k1ecdsa including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.


"""ECDSA verifier.

Only signatures in the canonical 'low s' form are accepted:
a high s signature is rejected as malleable,
not silently normalized.
"""

from __future__ import annotations

import logging
from hashlib import sha256
from typing import Union

from k1ecdsa.alias import HashF, JacPoint, Octets, Point, String
from k1ecdsa.ec.curve import secp256k1
from k1ecdsa.ec.curve_group import _double_mult, jac_from_aff
from k1ecdsa.ec.scalar import NonZeroScalar
from k1ecdsa.ec.sec_point import bytes_from_point
from k1ecdsa.ecc.dsa import SIG_SIZE, Sig
from k1ecdsa.ecc.recoverable import RECOVERABLE_SIG_SIZE, RecoverableSig
from k1ecdsa.ecc.rfc6979_nonce import challenge_
from k1ecdsa.exceptions import (
    InvalidEncoding,
    InvalidSignature,
    K1ValueError,
    SignatureMalleable,
)
from k1ecdsa.hashes import keccak_256, reduce_to_hlen, require_hf_size
from k1ecdsa.to_pub_key import PubKey, point_from_pub_key
from k1ecdsa.utils import bytes_from_octets

logger = logging.getLogger(__name__)

AnySig = Union[Sig, RecoverableSig, Octets]


def _sig_from_any(sig: AnySig) -> Union[Sig, RecoverableSig]:
    "Return the (not validated) Sig or RecoverableSig."

    if isinstance(sig, (Sig, RecoverableSig)):
        return sig

    try:
        data = bytes_from_octets(sig, (SIG_SIZE, RECOVERABLE_SIG_SIZE))
    except (K1ValueError, ValueError) as e:
        raise InvalidEncoding(f"invalid signature: {e}") from e
    if len(data) == SIG_SIZE:
        return Sig.parse(data, check_validity=False)
    # the recovery id is not used for verification
    return RecoverableSig.parse(data, check_validity=False)


def _assert_as_valid_(c: int, QJ: JacPoint, r: int, s: int) -> None:
    # Private function for test/dev purposes

    ec = secp256k1
    # r and s are re-checked here, as they could come
    # from a Sig built with check_validity=False
    try:
        r = NonZeroScalar(r)
    except K1ValueError as e:
        raise InvalidSignature("invalid r") from e
    try:
        s = NonZeroScalar(s)
    except K1ValueError as e:
        raise InvalidSignature("invalid s") from e

    if s.is_high():
        raise SignatureMalleable("non-canonical high s")

    # Steps numbering follows SEC 1 v.2 section 4.1.4
    w = s.invert()
    u = c * w % ec.n  # 4
    v = r * w % ec.n  # 4
    # Let RJ = u*G + v*Q.
    RJ = _double_mult(v, QJ, u, ec.GJ, ec)  # 5

    # Fail if infinite(RJ).
    if RJ[2] == 0:
        raise InvalidSignature("invalid (INF) ephemeral point")

    x_R = ec.x_aff_from_jac(RJ)  # 6
    # Fail if r ≠ x_R %n.
    if r != x_R % ec.n:  # 7, 8
        raise InvalidSignature("signature verification failed")


class Verifier:
    """ECDSA verifier, holding a valid public key.

    The public key can be given as affine point
    or as SEC 1 compressed/uncompressed octets.

    Message wrappers prehash with rec_hf (Keccak-256 by default)
    when given a recoverable signature, with hf (SHA-256 by default)
    otherwise, matching the Signer wrappers.
    """

    def __init__(
        self, pub_key: PubKey, hf: HashF = sha256, rec_hf: HashF = keccak_256
    ) -> None:
        require_hf_size(hf)
        require_hf_size(rec_hf)
        self._pub_key = point_from_pub_key(pub_key)
        self._hf = hf
        self._rec_hf = rec_hf

    def __repr__(self) -> str:
        return f"Verifier({bytes_from_point(self._pub_key).hex()})"

    @property
    def hf(self) -> HashF:
        return self._hf

    @property
    def rec_hf(self) -> HashF:
        return self._rec_hf

    @property
    def pub_key(self) -> Point:
        return self._pub_key

    def assert_as_valid_(self, msg_hash: Octets, sig: AnySig) -> None:
        """Raise an Error if the signature of the digest is not valid.

        sig can be a Sig, a RecoverableSig (whose recovery id is ignored),
        or the 64/65 bytes serialization of either of them.
        """
        # all the checks are performed by _assert_as_valid_:
        # do not validate the Sig at construction time
        sig = _sig_from_any(sig)
        if isinstance(sig, RecoverableSig):
            sig = sig.sig
        c = challenge_(msg_hash)
        _assert_as_valid_(c, jac_from_aff(self._pub_key), sig.r, sig.s)

    def verify_(self, msg_hash: Octets, sig: AnySig) -> bool:
        "Return True if the signature of the digest is valid."
        # all kind of Exceptions are catched because
        # verify must always return a bool
        try:
            self.assert_as_valid_(msg_hash, sig)
        except Exception as e:  # pylint: disable=broad-except
            logger.debug("signature verification failed: %s", type(e).__name__)
            return False

        return True

    def assert_as_valid(self, msg: String, sig: AnySig) -> None:
        "Raise an Error if the signature of the message is not valid."
        sig = _sig_from_any(sig)
        hf = self._rec_hf if isinstance(sig, RecoverableSig) else self._hf
        self.assert_as_valid_(reduce_to_hlen(msg, hf), sig)

    def verify(self, msg: String, sig: AnySig) -> bool:
        "Return True if the signature of the message is valid."
        # all kind of Exceptions are catched because
        # verify must always return a bool
        try:
            self.assert_as_valid(msg, sig)
        except Exception as e:  # pylint: disable=broad-except
            logger.debug("signature verification failed: %s", type(e).__name__)
            return False

        return True
