#!/usr/bin/env python3

# Copyright (C) The k1ecdsa developers
#
# This file is part of k1ecdsa. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of k1ecdsa including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.


"""Recoverable ECDSA signatures.

A recoverable signature is the ECDSA (r, s) pair followed by
a recovery id, i.e. the parity of the y-coordinate of the
ephemeral point R = k*G (after s normalization):

[32-bytes r][32-bytes s][1-byte recovery id]

Only recovery ids 0 and 1 are supported: ids 2 and 3, for the
case of x(R) not being lower than the curve order n,
are rejected (such x(R) values occur with negligible probability).

Given the message digest, the recovery id allows to reconstruct
the signer public key from the signature alone.

As in Ethereum, raw messages are Keccak-256 prehashed by default;
functions with a trailing underscore take the 32 bytes digest.
"""

from __future__ import annotations

import logging
from dataclasses import InitVar, dataclass
from typing import Type, TypeVar

from dataclasses_json import DataClassJsonMixin

from k1ecdsa.alias import HashF, Octets, Point, String
from k1ecdsa.ec.curve import secp256k1
from k1ecdsa.ec.curve_group import _double_mult, jac_from_aff
from k1ecdsa.ec.scalar import NonZeroScalar
from k1ecdsa.ec.sec_point import bytes_from_point
from k1ecdsa.ecc.dsa import SIG_SIZE, Sig
from k1ecdsa.ecc.rfc6979_nonce import challenge_
from k1ecdsa.exceptions import (
    InvalidEncoding,
    InvalidRecoveryId,
    K1ValueError,
    RecoveryFailed,
)
from k1ecdsa.hashes import keccak_256, reduce_to_hlen, require_hf_size
from k1ecdsa.to_pub_key import PubKey, bytes_from_pub_key
from k1ecdsa.utils import bytes_from_octets, printable_int

logger = logging.getLogger(__name__)

# [32-bytes r][32-bytes s][1-byte recovery id]
RECOVERABLE_SIG_SIZE = SIG_SIZE + 1

_RecoverableSig = TypeVar("_RecoverableSig", bound="RecoverableSig")


class RecoveryId(int):
    "Parity of the y-coordinate of the ephemeral point: 0 (even) or 1 (odd)."

    def __new__(cls, value: int) -> RecoveryId:
        if value not in (0, 1):
            raise InvalidRecoveryId(f"invalid recovery id: {value}")
        return super().__new__(cls, value)

    @classmethod
    def from_parities(cls, is_y_odd: bool, is_s_high: bool) -> RecoveryId:
        """Return the recovery id of a normalized signature.

        If s has been normalized (s -> n - s) then -R, instead of R,
        is the ephemeral point matching the signature:
        the y parity bit must be flipped.
        """
        return cls(int(is_y_odd) ^ int(is_s_high))

    @property
    def is_y_odd(self) -> bool:
        return self == 1


@dataclass(frozen=True)
class RecoverableSig(DataClassJsonMixin):
    """ECDSA signature with recovery id.

    Format:
    [32-bytes r][32-bytes s][1-byte recovery id]
    """

    sig: Sig
    # 1 byte, 0 or 1
    recovery_id: int
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        self.sig.assert_valid()
        RecoveryId(self.recovery_id)

    @property
    def r(self) -> NonZeroScalar:
        return NonZeroScalar(self.sig.r)

    @property
    def s(self) -> NonZeroScalar:
        return NonZeroScalar(self.sig.s)

    def serialize(self, check_validity: bool = True) -> bytes:
        "Serialize to the 65 bytes r || s || recovery id representation."
        if check_validity:
            self.assert_valid()

        out = self.sig.serialize(check_validity)
        out += self.recovery_id.to_bytes(1, byteorder="big", signed=False)
        return out

    @classmethod
    def parse(
        cls: Type[_RecoverableSig], data: Octets, check_validity: bool = True
    ) -> _RecoverableSig:
        """Return a RecoverableSig by parsing binary data.

        Exactly 65 bytes (or the equivalent hex-string) are required.
        """
        try:
            data = bytes_from_octets(data, RECOVERABLE_SIG_SIZE)
        except (K1ValueError, ValueError) as e:
            raise InvalidEncoding(f"invalid recoverable signature: {e}") from e

        sig = Sig.parse(data[:SIG_SIZE], check_validity)
        return cls(sig, data[SIG_SIZE], check_validity)

    def recover_pub_key_(self, msg_hash: Octets) -> Point:
        """Return the public key that produced the signature.

        See SEC 1 v.2 section 4.1.6.
        Only the ephemeral point with x-coordinate equal to r
        is considered, its y-parity being given by the recovery id.
        """
        self.assert_valid()
        ec = secp256k1
        c = challenge_(msg_hash)
        r = self.r
        recovery_id = RecoveryId(self.recovery_id)

        try:
            y = ec.y_odd(r, int(recovery_id))
        except K1ValueError as e:
            err_msg = f"invalid r as x-coordinate: {printable_int(r)}"
            raise RecoveryFailed(err_msg) from e
        RJ = jac_from_aff((r, y))

        try:
            r1 = r.invert()
        except K1ValueError as e:
            raise RecoveryFailed("r has no inverse") from e

        u1 = r1.negate() * c % ec.n
        u2 = r1 * self.s % ec.n
        QJ = _double_mult(u1, ec.GJ, u2, RJ, ec)
        if QJ[2] == 0:
            raise RecoveryFailed("invalid (INF) key")

        return ec.aff_from_jac(QJ)

    def recover_pub_key(self, msg: String, hf: HashF = keccak_256) -> Point:
        """Return the public key that produced the signature of a message.

        The message is Keccak-256 prehashed, as in Ethereum,
        unless a different hf is provided.
        """
        require_hf_size(hf)
        return self.recover_pub_key_(reduce_to_hlen(msg, hf))

    @classmethod
    def from_trial_recovery_(
        cls: Type[_RecoverableSig], pub_key: PubKey, msg_hash: Octets, sig: Sig
    ) -> _RecoverableSig:
        """Return the RecoverableSig matching a signature and its public key.

        The signature s is normalized first;
        then recovery id 0 is tried before recovery id 1.
        """
        expected = bytes_from_pub_key(pub_key)
        sig, _ = sig.normalize_s()

        for recovery_id in (0, 1):
            rec_sig = cls(sig, recovery_id)
            try:
                Q = rec_sig.recover_pub_key_(msg_hash)
            except RecoveryFailed as e:
                logger.debug("recovery id %s: %s", recovery_id, e)
                continue
            if bytes_from_point(Q) == expected:
                logger.debug("recovery id %s matches the public key", recovery_id)
                return rec_sig
            logger.debug("recovery id %s: public key mismatch", recovery_id)

        raise RecoveryFailed("no recovery id matches the public key")

    @classmethod
    def from_trial_recovery(
        cls: Type[_RecoverableSig],
        pub_key: PubKey,
        msg: String,
        sig: Sig,
        hf: HashF = keccak_256,
    ) -> _RecoverableSig:
        "Return the RecoverableSig matching a message signature and its key."
        # Keccak-256 prehash by default, as recover_pub_key
        require_hf_size(hf)
        return cls.from_trial_recovery_(pub_key, reduce_to_hlen(msg, hf), sig)
