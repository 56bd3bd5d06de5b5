#!/usr/bin/env python3

# Copyright (C) The k1ecdsa developers
#
# This file is part of k1ecdsa. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of k1ecdsa including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

The generic ones are only meant to discriminate between Exceptions
being raised by k1ecdsa from those raised by other codebase;
they derive from the regular ValueError, TypeError, and RuntimeError.

The specialized ones identify the kind of failure of the ECDSA
protocol layer. They never carry secret-dependent information.
"""


class K1ValueError(ValueError):
    pass


class K1TypeError(TypeError):
    pass


class K1RuntimeError(RuntimeError):
    pass


class InvalidEncoding(K1ValueError):
    """Wrong byte length or out-of-range component while parsing."""


class InvalidPrivateKey(K1ValueError):
    """Private key not in 1..n-1 or not a private key at all."""


class InvalidRecoveryId(K1ValueError):
    """Recovery id not in {0, 1}."""


class SignatureMalleable(K1ValueError):
    """Signature s is not in the canonical 'low-s' form."""


class SigningFailed(K1RuntimeError):
    """Zero or infinity condition met while signing."""


class InvalidSignature(K1RuntimeError):
    """Zero r/s or verification equation mismatch."""


class RecoveryFailed(K1RuntimeError):
    """No public key can be recovered (or none matches the expected one)."""
