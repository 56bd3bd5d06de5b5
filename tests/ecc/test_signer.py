#!/usr/bin/env python3

# Copyright (C) The k1ecdsa developers
#
# This file is part of k1ecdsa. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of k1ecdsa including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `k1ecdsa.ecc.signer` module."

import secrets
from hashlib import sha1, sha256

import pytest
from coincurve import PrivateKey, PublicKey
from coincurve._libsecp256k1 import (  # type: ignore # pylint: disable=no-name-in-module
    ffi,
    lib,
)
from coincurve.context import GLOBAL_CONTEXT
from eth_hash.auto import keccak

from k1ecdsa.ec.curve import mult, secp256k1
from k1ecdsa.ec.sec_point import bytes_from_point
from k1ecdsa.ecc.dsa import Sig
from k1ecdsa.ecc.recoverable import RecoverableSig
from k1ecdsa.ecc.signer import Signer, _sign_recoverable_
from k1ecdsa.ecc.verifier import Verifier
from k1ecdsa.exceptions import InvalidPrivateKey, K1ValueError, SigningFailed
from k1ecdsa.hashes import keccak_256, reduce_to_hlen
from k1ecdsa.number_theory import mod_inv

ec = secp256k1

CDATA_SIG_LENGTH = 64

# https://bitcointalk.org/index.php?topic=285142.40
R = 0x934B1EA10A4B3C1757E2B0C017D0B6143CE3C9A7E6A4A49860D7A6AB210EE3D8
S = 0x2442CE9D2B916064108014783E923EC36B49743E2FFA1C4496F01A512AAFD9E5


def _libsecp256k1_sign_recoverable(msg_hash: bytes, secret: bytes, aux=None) -> bytes:
    c_sig = ffi.new("secp256k1_ecdsa_recoverable_signature *")
    ndata = ffi.NULL if aux is None else ffi.from_buffer(aux)
    if not lib.secp256k1_ecdsa_sign_recoverable(
        GLOBAL_CONTEXT.ctx, c_sig, msg_hash, secret, ffi.NULL, ndata
    ):
        raise RuntimeError("libsecp256k1 signature failed")

    output = ffi.new(f"unsigned char[{CDATA_SIG_LENGTH}]")
    recid = ffi.new("int *")
    if not lib.secp256k1_ecdsa_recoverable_signature_serialize_compact(
        GLOBAL_CONTEXT.ctx, output, recid, c_sig
    ):
        raise RuntimeError("libsecp256k1 signature serialization failed")

    return bytes(ffi.buffer(output, CDATA_SIG_LENGTH)) + bytes([recid[0]])


def test_signer() -> None:
    signer = Signer(1)
    assert signer.pub_key == ec.G
    assert signer.hf is sha256
    assert signer.rec_hf is keccak_256
    assert repr(signer) == f"Signer({bytes_from_point(ec.G).hex()})"

    msg = "Satoshi Nakamoto"
    sig = signer.sign(msg)
    assert sig == Sig(R, S)
    assert sig == signer.sign_(reduce_to_hlen(msg))
    assert sig == signer.sign(msg.encode())

    # the original s was high: normalized, with flipped recovery id
    msg_hash = reduce_to_hlen(msg)
    rec_sig = signer.sign_recoverable_(msg_hash)
    assert rec_sig.sig == sig
    assert rec_sig.recovery_id == 1
    assert rec_sig.recover_pub_key_(msg_hash) == ec.G

    # recoverable signatures of messages are Keccak-256 prehashed
    eth_sig = signer.sign_recoverable(msg)
    assert eth_sig == signer.sign_recoverable_(reduce_to_hlen(msg, keccak_256))
    assert eth_sig.sig != sig
    assert eth_sig.recover_pub_key(msg) == ec.G

    verifier = signer.verifier()
    assert isinstance(verifier, Verifier)
    assert verifier.pub_key == signer.pub_key
    assert verifier.rec_hf is keccak_256
    assert verifier.verify(msg, sig)
    assert verifier.verify(msg, eth_sig)
    assert verifier.verify(msg, eth_sig.serialize())
    assert not verifier.verify(msg, eth_sig.sig)
    assert not verifier.verify(msg, rec_sig)


def test_signer_prv_key() -> None:
    q = 0xDEADBEEF
    for prv_key in (q, q.to_bytes(32, "big"), q.to_bytes(32, "big").hex()):
        assert Signer(prv_key).pub_key == mult(q)

    for invalid_prv_key in (0, ec.n, ec.n + 1):
        with pytest.raises(InvalidPrivateKey, match="private key not in 1..n-1"):
            Signer(invalid_prv_key)

    with pytest.raises(InvalidPrivateKey, match="not a private key"):
        Signer(b"\x01" * 31)

    # the private key does not leak through repr
    assert "deadbeef" not in repr(Signer(q)).lower()


def test_signer_hf() -> None:
    with pytest.raises(K1ValueError, match="invalid hash function digest size: "):
        Signer(1, sha1)
    with pytest.raises(K1ValueError, match="invalid hash function digest size: "):
        Signer(1, rec_hf=sha1)

    msg = "Satoshi Nakamoto"
    signer = Signer(1)
    with pytest.raises(K1ValueError, match="invalid size: "):
        signer.sign_(sha1(msg.encode()).digest())


def test_determinism() -> None:
    signer = Signer(secrets.randbelow(ec.n - 1) + 1)
    msg_hash = reduce_to_hlen("Craig Wright")
    assert signer.sign_recoverable_(msg_hash) == signer.sign_recoverable_(msg_hash)
    assert signer.sign_(msg_hash) != signer.sign_(reduce_to_hlen("Satoshi Nakamoto"))


def test_aux() -> None:
    signer = Signer(0xDEADBEEF)
    msg_hash = reduce_to_hlen("Satoshi Nakamoto")

    rec_sig = signer.sign_recoverable_(msg_hash)
    for aux in (b"\x00" * 32, secrets.token_bytes(32)):
        rec_sig_aux = signer.sign_recoverable_(msg_hash, aux)
        assert rec_sig_aux.sig != rec_sig.sig
        # deterministic given all the inputs
        assert rec_sig_aux == signer.sign_recoverable_(msg_hash, aux)
        assert rec_sig_aux.sig == signer.sign_(msg_hash, aux)
        assert rec_sig_aux.sig.is_low_s
        assert signer.verifier().verify_(msg_hash, rec_sig_aux)
        assert rec_sig_aux.recover_pub_key_(msg_hash) == signer.pub_key

    with pytest.raises(K1ValueError, match="invalid size: "):
        signer.sign_(msg_hash, b"\x00" * 31)


def test_libsecp256k1() -> None:
    for _ in range(8):
        secret = secrets.token_bytes(32)
        if not 0 < int.from_bytes(secret, "big") < ec.n:
            continue
        msg_hash = secrets.token_bytes(32)

        signer = Signer(secret)
        rec_sig = signer.sign_recoverable_(msg_hash)

        # same deterministic signature, same recovery id
        c_rec_sig = PrivateKey(secret).sign_recoverable(msg_hash, hasher=None)
        assert rec_sig.serialize() == c_rec_sig
        assert rec_sig.serialize() == _libsecp256k1_sign_recoverable(msg_hash, secret)

        # libsecp256k1 recovers the same public key
        c_pub_key = PublicKey.from_signature_and_message(
            rec_sig.serialize(), msg_hash, hasher=None
        )
        assert c_pub_key.format() == bytes_from_point(signer.pub_key)
        assert c_pub_key.format(compressed=False) == bytes_from_point(
            signer.pub_key, compressed=False
        )

        # RFC6979 additional data as libsecp256k1 ndata
        aux = secrets.token_bytes(32)
        rec_sig = signer.sign_recoverable_(msg_hash, aux)
        assert rec_sig.serialize() == _libsecp256k1_sign_recoverable(
            msg_hash, secret, aux
        )


def test_libsecp256k1_keccak() -> None:
    msg = b"example message"
    for _ in range(4):
        secret = secrets.token_bytes(32)
        if not 0 < int.from_bytes(secret, "big") < ec.n:
            continue
        signer = Signer(secret)

        # Ethereum-style: Keccak-256 prehash, r || s || v with v in {0, 1}
        eth_sig = PrivateKey(secret).sign_recoverable(msg, hasher=keccak)
        assert signer.sign_recoverable(msg).serialize() == eth_sig

        rec_sig = RecoverableSig.parse(eth_sig)
        assert rec_sig.recover_pub_key(msg) == signer.pub_key
        assert rec_sig.recover_pub_key_(keccak(msg)) == signer.pub_key
        assert signer.verifier().verify(msg, eth_sig)
        c_pub_key = PublicKey.from_signature_and_message(eth_sig, msg, hasher=keccak)
        assert c_pub_key.format() == bytes_from_point(signer.pub_key)

        result = RecoverableSig.from_trial_recovery(signer.pub_key, msg, rec_sig.sig)
        assert result == rec_sig


def test_sign_recoverable_failures() -> None:
    q = 0xDEADBEEF
    msg_hash = reduce_to_hlen("Satoshi Nakamoto")
    c = int.from_bytes(msg_hash, "big") % ec.n

    for k in (0, ec.n):
        with pytest.raises(SigningFailed, match="invalid nonce"):
            _sign_recoverable_(c, q, k)

    # k = 1: R = G and r = x_G, so c = -r*q makes s zero
    r = ec.G[0] % ec.n
    with pytest.raises(SigningFailed, match="invalid zero s"):
        _sign_recoverable_(-r * q % ec.n, q, 1)


def test_recovery_id_consistency() -> None:
    # recovery id is y parity of R, flipped if s has been normalized
    q = 0xDEADBEEF
    Q = mult(q)
    msg_hash = reduce_to_hlen("Satoshi Nakamoto")
    c = int.from_bytes(msg_hash, "big") % ec.n
    for k in (1, 2, 3, 0xBADCAFE, ec.n - 1):
        rec_sig = _sign_recoverable_(c, q, k)
        assert isinstance(rec_sig, RecoverableSig)
        assert rec_sig.sig.is_low_s
        K = mult(k)
        s = mod_inv(k, ec.n) * (c + K[0] % ec.n * q) % ec.n
        is_s_high = s > ec.n // 2
        assert rec_sig.recovery_id == (K[1] % 2) ^ is_s_high
        assert rec_sig.recover_pub_key_(msg_hash) == Q
