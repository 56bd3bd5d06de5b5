#!/usr/bin/env python3

# Copyright (C) The k1ecdsa developers
#
# This file is part of k1ecdsa. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of k1ecdsa including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic Curve Digital Signature Algorithm (ECDSA).

Implementation according to SEC 1 v.2:

http://www.secg.org/sec1-v2.pdf

specialized with bitcoin/ethereum canonical 'lower-s' form
to avoid accepting malleable signatures.

This module provides the fixed-size 64 bytes signature
and a functional interface to the Signer, Verifier,
and RecoverableSig classes.
"""

from __future__ import annotations

import logging
import secrets
from dataclasses import InitVar, dataclass, field
from hashlib import sha256
from typing import Optional, Tuple, Type, TypeVar, Union

from dataclasses_json import DataClassJsonMixin, config

from k1ecdsa.alias import HashF, Octets, Point, String
from k1ecdsa.ec.curve import mult, secp256k1
from k1ecdsa.ec.scalar import SCALAR_SIZE, NonZeroScalar, is_high
from k1ecdsa.exceptions import InvalidEncoding, K1ValueError
from k1ecdsa.hashes import keccak_256
from k1ecdsa.to_prv_key import PrvKey, int_from_prv_key
from k1ecdsa.to_pub_key import PubKey
from k1ecdsa.utils import bytes_from_octets, printable_int

logger = logging.getLogger(__name__)

# [32-bytes r][32-bytes s]
SIG_SIZE = 2 * SCALAR_SIZE

_Sig = TypeVar("_Sig", bound="Sig")


def _hex_from_scalar(scalar: int) -> str:
    return scalar.to_bytes(SCALAR_SIZE, byteorder="big", signed=False).hex()


def _scalar_from_hex(hex_str: str) -> int:
    return int.from_bytes(bytes.fromhex(hex_str), byteorder="big", signed=False)


@dataclass(frozen=True)
class Sig(DataClassJsonMixin):
    """ECDSA signature with fixed-size 64 bytes serialization.

    Format:
    [32-bytes r][32-bytes s]

    both r and s being big-endian integers.

    There is no ASN.1 DER overhead:
    every signature is exactly 64 bytes.
    To remove signature malleability, the canonical form has
    'low s' (s <= n/2): for every valid (r, s) signature,
    (r, n - s) is valid too.
    """

    # 32 bytes scalar, 0 < r < ec.n (ec.n is the curve order)
    r: int = field(
        default=-1,
        metadata=config(encoder=_hex_from_scalar, decoder=_scalar_from_hex),
    )
    # 32 bytes scalar, 0 < s < ec.n (ec.n is the curve order)
    s: int = field(
        default=-1,
        metadata=config(encoder=_hex_from_scalar, decoder=_scalar_from_hex),
    )
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        # r is a scalar, fail if r is not in [1, n-1]
        if not 0 < self.r < secp256k1.n:
            raise InvalidEncoding(f"scalar r not in 1..n-1: {printable_int(self.r)}")

        # s is a scalar, fail if s is not in [1, n-1]
        if not 0 < self.s < secp256k1.n:
            raise InvalidEncoding(f"scalar s not in 1..n-1: {printable_int(self.s)}")

    @property
    def is_low_s(self) -> bool:
        "Return True if s is in the canonical 'low s' form."
        return not is_high(self.s)

    def normalize_s(self: _Sig) -> Tuple[_Sig, bool]:
        """Return the 'low s' signature and True if s had to be normalized.

        If s > n/2 then s is replaced by n - s,
        otherwise the signature is returned as it is.
        """
        self.assert_valid()
        s_high = is_high(self.s)
        if s_high:
            return type(self)(self.r, secp256k1.n - self.s), True
        return self, False

    def serialize(self, check_validity: bool = True) -> bytes:
        "Serialize an ECDSA signature to the 64 bytes r || s representation."
        if check_validity:
            self.assert_valid()

        out = self.r.to_bytes(SCALAR_SIZE, byteorder="big", signed=False)
        out += self.s.to_bytes(SCALAR_SIZE, byteorder="big", signed=False)
        return out

    @classmethod
    def parse(cls: Type[_Sig], data: Octets, check_validity: bool = True) -> _Sig:
        """Return a Sig by parsing binary data.

        Exactly 64 bytes (or the equivalent hex-string) are required.
        """
        try:
            data = bytes_from_octets(data, SIG_SIZE)
        except (K1ValueError, ValueError) as e:
            raise InvalidEncoding(f"invalid signature: {e}") from e

        r = int.from_bytes(data[:SCALAR_SIZE], byteorder="big", signed=False)
        s = int.from_bytes(data[SCALAR_SIZE:], byteorder="big", signed=False)
        return cls(r, s, check_validity)


def gen_keys(prv_key: Optional[PrvKey] = None) -> Tuple[int, Point]:
    """Return a private/public (int, Point) key-pair.

    If the private key is not provided, a random one is generated.
    """
    if prv_key is None:
        # q in the range [1, ec.n-1]
        q = NonZeroScalar(1 + secrets.randbelow(secp256k1.n - 1))
    else:
        q = int_from_prv_key(prv_key)

    return q, mult(q)


def sign_(msg_hash: Octets, prv_key: PrvKey, aux: Optional[Octets] = None) -> Sig:
    """Sign a 32 bytes message digest, RFC6979 deterministic nonce.

    The signature is in the canonical 'low s' form.
    """
    # pylint: disable=import-outside-toplevel
    from k1ecdsa.ecc.signer import Signer

    return Signer(prv_key).sign_(msg_hash, aux)


def sign(msg: String, prv_key: PrvKey, hf: HashF = sha256) -> Sig:
    """ECDSA signature with canonical low-s preference.

    The message msg is first processed by hf, yielding the value

        msg_hash = hf(msg),

    a sequence of 32 bytes.

    RFC6979 is used for deterministic nonce.
    """
    # pylint: disable=import-outside-toplevel
    from k1ecdsa.ecc.signer import Signer

    return Signer(prv_key, hf).sign(msg)


def assert_as_valid_(msg_hash: Octets, key: PubKey, sig: Union[Sig, Octets]) -> None:
    # It raises Errors, while verify_ should always return True or False
    # pylint: disable=import-outside-toplevel
    from k1ecdsa.ecc.verifier import Verifier

    Verifier(key).assert_as_valid_(msg_hash, sig)


def assert_as_valid(
    msg: String, key: PubKey, sig: Union[Sig, Octets], hf: HashF = sha256
) -> None:
    # It raises Errors, while verify should always return True or False
    # pylint: disable=import-outside-toplevel
    from k1ecdsa.ecc.verifier import Verifier

    Verifier(key, hf, hf).assert_as_valid(msg, sig)


def verify_(msg_hash: Octets, key: PubKey, sig: Union[Sig, Octets]) -> bool:
    """ECDSA signature verification (SEC 1 v.2 section 4.1.4)."""
    # all kind of Exceptions are catched because
    # verify must always return a bool
    try:
        assert_as_valid_(msg_hash, key, sig)
    except Exception as e:  # pylint: disable=broad-except
        logger.debug("signature verification failed: %s", type(e).__name__)
        return False

    return True


def verify(
    msg: String, key: PubKey, sig: Union[Sig, Octets], hf: HashF = sha256
) -> bool:
    """ECDSA signature verification (SEC 1 v.2 section 4.1.4)."""
    # all kind of Exceptions are catched because
    # verify must always return a bool
    try:
        assert_as_valid(msg, key, sig, hf)
    except Exception as e:  # pylint: disable=broad-except
        logger.debug("signature verification failed: %s", type(e).__name__)
        return False

    return True


def recover_pub_key_(msg_hash: Octets, rec_sig: Octets) -> Point:
    """Return the public key of a 65 bytes recoverable signature.

    rec_sig can also be a RecoverableSig instance.
    """
    # pylint: disable=import-outside-toplevel
    from k1ecdsa.ecc.recoverable import RecoverableSig

    if not isinstance(rec_sig, RecoverableSig):
        rec_sig = RecoverableSig.parse(rec_sig)
    return rec_sig.recover_pub_key_(msg_hash)


def recover_pub_key(msg: String, rec_sig: Octets, hf: HashF = keccak_256) -> Point:
    """Return the public key of a message 65 bytes recoverable signature.

    The message is Keccak-256 prehashed, unless a different hf is provided.
    """
    # pylint: disable=import-outside-toplevel
    from k1ecdsa.ecc.recoverable import RecoverableSig

    if not isinstance(rec_sig, RecoverableSig):
        rec_sig = RecoverableSig.parse(rec_sig)
    return rec_sig.recover_pub_key(msg, hf)
