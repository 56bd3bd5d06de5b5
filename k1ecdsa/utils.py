#!/usr/bin/env python3

# Copyright (C) The k1ecdsa developers
#
# This file is part of k1ecdsa. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of k1ecdsa including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.


"""Conversions between octets and integers.

The octet-string/integer conversions of SEC 1 v.2 section 2.3
(https://www.secg.org/sec1-v2.pdf) and the RFC6979 bits2int.
"""

from typing import Iterable, Optional, Union

from k1ecdsa.alias import Integer, Octets
from k1ecdsa.exceptions import K1ValueError

# above this value integers are printed as hex-strings in error messages
HEX_THRESHOLD = 0xFFFFFFFF

NoneOneOrMoreInt = Optional[Union[int, Iterable[int]]]


def bytes_from_octets(octets: Octets, out_size: NoneOneOrMoreInt = None) -> bytes:
    """Return bytes from bytes or hex-string octets.

    Whitespaces in the hex-string are ignored.
    If out_size is provided (a single size or a collection of them),
    the octets length is checked against it.
    """

    if isinstance(octets, str):
        octets = bytes.fromhex(octets)

    if out_size is None:
        return octets
    sizes = (out_size,) if isinstance(out_size, int) else tuple(out_size)
    if len(octets) not in sizes:
        raise K1ValueError(f"invalid size: {len(octets)} bytes instead of {out_size}")
    return octets


def int_from_bits(octets: Octets, nlen: int) -> int:
    """Return the integer of the leftmost nlen bits of the octets.

    See SEC 1 v.2 section 4.1.3 (5) and
    https://tools.ietf.org/html/rfc6979#section-2.3.2:
    the result is lower than 2^nlen, not reduced mod n.
    """

    octets = bytes_from_octets(octets)
    i = int.from_bytes(octets, byteorder="big", signed=False)
    excess_bits = len(octets) * 8 - nlen
    return i >> excess_bits if excess_bits > 0 else i


def int_from_integer(i: Integer) -> int:
    """Return an int from int, bytes, or string.

    Strings can be "0x"-prefixed (possibly negative) hex numbers,
    e.g. "-0xdeadbeef", or big-endian hex-strings, e.g. "de ad be ef";
    bytes are big-endian.
    """

    if isinstance(i, int):
        return i

    if isinstance(i, str):
        i = i.strip().lower()
        if i.lstrip("-").startswith("0x"):
            return int(i, 16)
        i = bytes.fromhex(i)

    return int.from_bytes(i, byteorder="big", signed=False)


def hex_string(i: Integer) -> str:
    """Return the upper-case hex-string of a non-negative integer.

    Digits are grouped by four bytes, the most significant group
    being possibly shorter, e.g. "01 DEADBEEF 00000000".
    """

    int_ = int_from_integer(i)
    if int_ < 0:
        raise K1ValueError(f"negative integer: {int_}")

    digits = f"{int_:X}"
    if len(digits) % 2:
        digits = "0" + digits
    head = len(digits) % 8
    groups = [digits[:head]] if head else []
    groups += [digits[j : j + 8] for j in range(head, len(digits), 8)]
    return " ".join(groups)


def printable_int(i: int) -> str:
    "Return i as decimal if small, as quoted hex_string otherwise."
    return f"'{hex_string(i)}'" if i > HEX_THRESHOLD else f"{i}"
