#!/usr/bin/env python3

# Copyright (C) The k1ecdsa developers
#
# This file is part of k1ecdsa. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of k1ecdsa including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `k1ecdsa.ec.scalar` module."

import pytest

from k1ecdsa.ec.curve import secp256k1
from k1ecdsa.ec.scalar import (
    SCALAR_SIZE,
    NonZeroScalar,
    is_high,
    scalar_from_bytes_reduced,
)
from k1ecdsa.exceptions import K1ValueError

n = secp256k1.n


def test_non_zero_scalar() -> None:
    for value in (1, 2, n // 2, n // 2 + 1, n - 1):
        scalar = NonZeroScalar(value)
        assert scalar == value
        assert NonZeroScalar.from_bytes(scalar.to_bytes()) == scalar
        assert NonZeroScalar.from_bytes(scalar.to_bytes().hex()) == scalar
        assert len(scalar.to_bytes()) == SCALAR_SIZE
        assert scalar * scalar.invert() % n == 1
        assert scalar + scalar.negate() == n
        assert scalar.negate().negate() == scalar

    assert repr(NonZeroScalar(1)) == "NonZeroScalar(0x" + "0" * 63 + "1)"

    for value in (0, -1, n, n + 1):
        with pytest.raises(K1ValueError, match="scalar not in 1..n-1"):
            NonZeroScalar(value)

    with pytest.raises(K1ValueError, match="scalar not in 1..n-1"):
        NonZeroScalar.from_bytes(b"\x00" * SCALAR_SIZE)

    with pytest.raises(K1ValueError, match="invalid size: "):
        NonZeroScalar.from_bytes(b"\x01" * (SCALAR_SIZE - 1))


def test_is_high() -> None:
    assert not is_high(1)
    assert not is_high(n // 2)
    assert is_high(n // 2 + 1)
    assert is_high(n - 1)

    assert NonZeroScalar(n - 1).is_high()
    assert not NonZeroScalar(n - 1).negate().is_high()
    # exactly one of s and n - s is high
    for s in (1, 2, n // 2, 0xDEADBEEF):
        assert is_high(s) != is_high(n - s)


def test_scalar_from_bytes_reduced() -> None:
    assert scalar_from_bytes_reduced(n.to_bytes(32, "big")) == 0
    assert scalar_from_bytes_reduced((n + 1).to_bytes(32, "big")) == 1
    assert scalar_from_bytes_reduced(b"\xff" * 32) == 2**256 - 1 - n
    assert scalar_from_bytes_reduced("01") == 1
