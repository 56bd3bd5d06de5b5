#!/usr/bin/env python3

# Copyright (C) The k1ecdsa developers
#
# This file is part of k1ecdsa. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of k1ecdsa including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.


"""Module k1ecdsa.ecc: ECDSA with recoverable signatures."""

from k1ecdsa.ecc.dsa import Sig
from k1ecdsa.ecc.recoverable import RecoverableSig, RecoveryId
from k1ecdsa.ecc.signer import Signer
from k1ecdsa.ecc.verifier import Verifier

__all__ = [
    "Sig",
    "RecoverableSig",
    "RecoveryId",
    "Signer",
    "Verifier",
]
