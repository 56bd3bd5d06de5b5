#!/usr/bin/env python3

# Copyright (C) The k1ecdsa developers
#
# This file is part of k1ecdsa. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of k1ecdsa including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Module k1ecdsa.ec: secp256k1 scalar and point arithmetic."""

from k1ecdsa.ec.curve import Curve, double_mult, mult, secp256k1
from k1ecdsa.ec.curve_group import CurveGroup, jac_from_aff, mult_mont_ladder
from k1ecdsa.ec.scalar import NonZeroScalar, is_high, scalar_from_bytes_reduced
from k1ecdsa.ec.sec_point import bytes_from_point, point_from_octets

__all__ = [
    "Curve",
    "double_mult",
    "mult",
    "secp256k1",
    "CurveGroup",
    "jac_from_aff",
    "mult_mont_ladder",
    "NonZeroScalar",
    "is_high",
    "scalar_from_bytes_reduced",
    "bytes_from_point",
    "point_from_octets",
]
