#!/usr/bin/env python3

# Copyright (C) 2024 The blindsig developers
#
# This file is part of blindsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of blindsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `blindsig.utils` module."

import pytest

from blindsig.exceptions import BlindSigValueError
from blindsig.utils import (
    bytes_from_int,
    bytes_from_octets,
    hex_string,
    int_from_integer,
    int_from_octets,
)


def test_bytes_from_octets() -> None:
    assert bytes_from_octets("deadbeef") == b"\xde\xad\xbe\xef"
    assert bytes_from_octets(" dead beef ") == b"\xde\xad\xbe\xef"
    assert bytes_from_octets(b"\xde\xad") == b"\xde\xad"
    assert bytes_from_octets("deadbeef", 4) == b"\xde\xad\xbe\xef"
    assert bytes_from_octets("deadbeef", (3, 4)) == b"\xde\xad\xbe\xef"

    with pytest.raises(BlindSigValueError, match="invalid size: "):
        bytes_from_octets("deadbeef", 5)
    with pytest.raises(BlindSigValueError, match="invalid size: "):
        bytes_from_octets("deadbeef", [1, 2])


def test_int_from_integer() -> None:
    for i in (
        0xDEADBEEF,
        "0xdeadbeef",
        "0xDEADBEEF",
        " 0xdeadbeef ",
        "deadbeef",
        "de ad be ef",
        b"\xde\xad\xbe\xef",
    ):
        assert int_from_integer(i) == 0xDEADBEEF
    assert int_from_integer("-0xdeadbeef") == -0xDEADBEEF
    assert int_from_integer(-1) == -1


def test_hex_string() -> None:
    assert hex_string(0) == "00"
    assert hex_string(1) == "01"
    assert hex_string(0xDEADBEEF) == "DEADBEEF"
    assert hex_string(0x1DEADBEEF) == "01 DEADBEEF"
    assert hex_string("0xdeadbeef") == "DEADBEEF"

    with pytest.raises(BlindSigValueError, match="negative integer: "):
        hex_string(-1)


def test_int_from_octets() -> None:
    assert int_from_octets(b"") == 0
    assert int_from_octets(b"\x00\x00\x01") == 1
    assert int_from_octets("0100") == 256
    assert int_from_octets(b"ballot!!") == int.from_bytes(b"ballot!!", "big")


def test_bytes_from_int() -> None:
    assert bytes_from_int(0, 4) == b"\x00" * 4
    assert bytes_from_int(1, 3) == b"\x00\x00\x01"
    assert bytes_from_int(0xFFFF, 2) == b"\xff\xff"
    assert bytes_from_int(0, 0) == b""

    for i in (0, 1, 255, 256, 2 ** 2047 + 1):
        assert int_from_octets(bytes_from_int(i, 256)) == i

    with pytest.raises(BlindSigValueError, match="integer too large: "):
        bytes_from_int(0x10000, 2)
    with pytest.raises(BlindSigValueError, match="integer too large: "):
        bytes_from_int(2 ** 64, 8)
    with pytest.raises(BlindSigValueError, match="negative integer: "):
        bytes_from_int(-1, 8)
