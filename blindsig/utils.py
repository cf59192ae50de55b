#!/usr/bin/env python3

# Copyright (C) 2024 The blindsig developers
#
# This file is part of blindsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of blindsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Assorted conversion utilities.

Integers travel as big-endian unsigned byte strings,
as in RFC 8017 (PKCS #1 v2.2) sections 4.1 (I2OSP) and 4.2 (OS2IP).

https://www.rfc-editor.org/rfc/rfc8017
"""

from collections.abc import Iterable as IterableCollection
from typing import Iterable, Optional, Union

from blindsig.alias import Integer, Octets
from blindsig.exceptions import BlindSigValueError

NoneOneOrMoreInt = Optional[Union[int, Iterable[int]]]


def bytes_from_octets(octets: Octets, out_size: NoneOneOrMoreInt = None) -> bytes:
    """Return bytes from a hex-string, stripping leading/trailing spaces.

    If the input is not a string, then it goes untouched.
    Optionally, it also ensures required output size.
    """

    if isinstance(octets, str):  # hex string
        octets = bytes.fromhex(octets)

    if (
        out_size is None
        or isinstance(out_size, int)
        and len(octets) == out_size
        or isinstance(out_size, IterableCollection)
        and len(octets) in out_size
    ):
        return octets

    err_msg = f"invalid size: {len(octets)} bytes instead of {out_size}"
    raise BlindSigValueError(err_msg)


def int_from_integer(i: Integer) -> int:
    """Return an int from many possible integer representations.

    Allowed integer representations are:

    * 3735928559
    * -3735928559
    * "0xdeadbeef"
    * "-0xdeadbeef"
    * "deadbeef"
    * b'\xde\xad\xbe\xef'

    The binary representation is not allowed because there is no way to
    discriminate it from a valid hex-string
    (e.g. "0b11011110101011011011111011101111").
    """

    if isinstance(i, int):
        return i

    if isinstance(i, str):
        i = i.strip().lower()
        if i.startswith("0x") or i.startswith("-0x"):
            return int(i, 16)
        i = bytes.fromhex(i)

    # must be bytes
    return int.from_bytes(i, "big", signed=False)


def hex_string(i: Integer) -> str:
    """Return a hex-string from many positive integer representations.

    Negative integers are not allowed.

    The resulting hex-string has an even number of hex-digits and
    includes a space every four bytes (i.e. every eight hex-digits).
    """

    int_ = int_from_integer(i)
    if int_ < 0:
        raise BlindSigValueError(f"negative integer: {int_}")
    a_str = hex(int_)[2:]
    if len(a_str) % 2 != 0:
        a_str = "0" + a_str

    indx = list(reversed(range(len(a_str), 0, -8)))
    lresult = [(a_str[max(0, i - 8) : i]) for i in indx]
    result = " ".join(lresult)
    return result.upper()


def int_from_octets(octets: Octets) -> int:
    "Return the non-negative int encoded as big-endian Octets (OS2IP)."
    return int.from_bytes(bytes_from_octets(octets), byteorder="big", signed=False)


def bytes_from_int(i: int, size: int) -> bytes:
    """Return the size-bytes big-endian encoding of i (I2OSP).

    Leading zero bytes are retained, so that any value modulo n
    is serialized with the byte length of n.
    """

    if i < 0:
        raise BlindSigValueError(f"negative integer: {i}")
    if i.bit_length() > 8 * size:
        err_msg = "integer too large: "
        err_msg += f"{hex_string(i)}" if i > 0xFFFFFFFF else f"{i}"
        err_msg += f" does not fit {size} bytes"
        raise BlindSigValueError(err_msg)
    return i.to_bytes(size, byteorder="big", signed=False)
