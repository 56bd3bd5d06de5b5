#!/usr/bin/env python3

# Copyright (C) The k1ecdsa developers
#
# This file is part of k1ecdsa. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of k1ecdsa including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `k1ecdsa.utils` module."

import secrets

import pytest

from k1ecdsa.exceptions import K1ValueError
from k1ecdsa.utils import (
    bytes_from_octets,
    hex_string,
    int_from_bits,
    int_from_integer,
    printable_int,
)


def test_int_from_integer() -> None:
    values = [1, secrets.randbits(248), 2**256 - 2**32 - 977]
    for value in values:
        assert int_from_integer(value) == value
        assert int_from_integer(f"  {value:#x}") == value
        assert int_from_integer(f"{-value:#X} ") == -value
        assert int_from_integer(hex_string(value)) == value
        assert int_from_integer(value.to_bytes(32, "big")) == value


def test_hex_string() -> None:
    int_ = 34492435054806958080
    assert hex_string(int_) == "01 DEADBEEF 00000000"
    assert hex_string(hex(int_).lower()) == "01 DEADBEEF 00000000"

    a_str = "01de adbeef00000000"
    assert hex_string(a_str) == "01 DEADBEEF 00000000"
    assert hex_string(bytes.fromhex(a_str)) == "01 DEADBEEF 00000000"

    with pytest.raises(K1ValueError, match="negative integer: "):
        hex_string(-1)


def test_printable_int() -> None:
    assert printable_int(0) == "0"
    assert printable_int(0xFFFFFFFF) == str(0xFFFFFFFF)
    assert printable_int(0x0100000000) == "'01 00000000'"


def test_bytes_from_octets() -> None:
    data = bytes.fromhex("deadbeef")
    assert bytes_from_octets(data) == data
    assert bytes_from_octets("deadbeef") == data
    assert bytes_from_octets(" DEAD BEEF ") == data
    assert bytes_from_octets(data, 4) == data
    assert bytes_from_octets(data, (3, 4)) == data

    with pytest.raises(K1ValueError, match="invalid size: 4 bytes instead of 5"):
        bytes_from_octets(data, 5)

    with pytest.raises(K1ValueError, match="invalid size: 4 bytes instead of "):
        bytes_from_octets(data, (32, 33))


def test_int_from_bits() -> None:
    data = b"\xff" * 32
    assert int_from_bits(data, 256) == 2**256 - 1
    assert int_from_bits(data, 255) == 2**255 - 1
    assert int_from_bits(data, 512) == 2**256 - 1
    assert int_from_bits(b"\x80" + b"\x00" * 31, 8) == 0x80
