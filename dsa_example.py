#!/usr/bin/env python3

# Copyright (C) The k1ecdsa developers
#
# This file is part of k1ecdsa. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of k1ecdsa including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

from k1ecdsa.ec import bytes_from_point, secp256k1 as ec
from k1ecdsa.ecc import RecoverableSig, Sig, Signer

print("\n*** EC:")
print(ec)

print("\n0. Message to be signed")
msg1 = "Paolo is afraid of ephemeral random numbers"
print(msg1)

print("1. Key generation")
q = 0x18E14A7B6A307F426A94F8114701E7C8E774E7F9A47E2C2035DB29A206321725
signer = Signer(q)
print(f"PubKey: {bytes_from_point(signer.pub_key).hex().upper()}")

print("2. Sign message")
rec_sig1 = signer.sign_recoverable(msg1)
print(f"    r1:    {hex(rec_sig1.r).upper()}")
print(f"    s1:    {hex(rec_sig1.s).upper()}")
print(f"    v1:    {rec_sig1.recovery_id}")

print("3. Verify signature")
verifier = signer.verifier()
print(verifier.verify(msg1, rec_sig1))

print("4. Recover key")
key = rec_sig1.recover_pub_key(msg1)
print(f"   key: {bytes_from_point(key).hex().upper()}")


print("\n** Malleated signature")
sm = Sig(rec_sig1.r, ec.n - rec_sig1.s)
print(f"    r1:    {hex(sm.r).upper()}")
print(f"    sm:    {hex(sm.s).upper()}")

print("** Verify malleated signature")
print(verifier.verify(msg1, sm))

print("** Trial recovery of the malleated signature")
rec_sig = RecoverableSig.from_trial_recovery(signer.pub_key, msg1, sm)
print(f"    v:     {rec_sig.recovery_id}")
print(rec_sig == rec_sig1)


print("\n0. Another message to sign")
msg2 = "and Paolo is right to be afraid"
print(msg2)

print("2. Sign message")
rec_sig2 = RecoverableSig.parse(signer.sign_recoverable(msg2).serialize())
print(f"    r2:    {hex(rec_sig2.r).upper()}")
print(f"    s2:    {hex(rec_sig2.s).upper()}")
print(f"    v2:    {rec_sig2.recovery_id}")

print("3. Verify signature")
print(verifier.verify(msg2, rec_sig2))

print("4. Recover key")
key = rec_sig2.recover_pub_key(msg2)
print(f"   key: {bytes_from_point(key).hex().upper()}")
