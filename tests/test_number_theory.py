#!/usr/bin/env python3

# Copyright (C) 2024 The blindsig developers
#
# This file is part of blindsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of blindsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `blindsig.number_theory` module."

import pytest

from blindsig.exceptions import BlindSigValueError
from blindsig.number_theory import mod_inv, mod_inverse, xgcd
from tests.test_rsa_key import load_prv_key

primes = [
    2,
    3,
    5,
    7,
    11,
    13,
    17,
    19,
    23,
    29,
    31,
    37,
    41,
    43,
    47,
    53,
    59,
    61,
    67,
    71,
    73,
    79,
    83,
    89,
    97,
    101,
    103,
    107,
    109,
    113,
    2 ** 160 - 2 ** 31 - 1,
    2 ** 192 - 2 ** 64 - 1,
    2 ** 224 - 2 ** 96 + 1,
    2 ** 256 - 2 ** 32 - 977,
    2 ** 384 - 2 ** 128 - 2 ** 96 + 2 ** 32 - 1,
    2 ** 521 - 1,
]


def test_xgcd() -> None:
    for a, b in ((240, 46), (46, 240), (17, 5), (0, 7), (7, 0), (12, 18)):
        g, x, y = xgcd(a, b)
        assert a * x + b * y == g
        assert g >= 0
        if a or b:
            assert a % g == 0 and b % g == 0


def test_mod_inv_prime() -> None:
    for p in primes:
        with pytest.raises(BlindSigValueError, match="No inverse for 0 mod"):
            mod_inv(0, p)
        assert mod_inverse(0, p) == (0, False)
        for a in range(1, min(p, 500)):  # exhausted only for small p
            inv = mod_inv(a, p)
            assert a * inv % p == 1
            inv = mod_inv(a + p, p)
            assert a * inv % p == 1


def test_mod_inverse() -> None:
    max_m = 100
    for m in range(2, max_m):
        nums = list(range(m))
        for a in nums:
            mult = [a * i % m for i in nums]
            inv, ok = mod_inverse(a, m)
            if 1 in mult:
                assert ok
                assert 0 < inv < m
                assert a * inv % m == 1
                assert mod_inverse(a + m, m) == (inv, True)
                assert mod_inv(a, m) == inv
            else:
                assert not ok
                assert inv == 0
                with pytest.raises(BlindSigValueError, match="No inverse for "):
                    mod_inv(a, m)


def test_mod_inverse_negative_coefficient() -> None:
    # xgcd(3, 7) returns x = -2: the inverse must be normalized
    g, x, _ = xgcd(3, 7)
    assert g == 1 and x < 0
    assert mod_inverse(3, 7) == (5, True)


def test_mod_inverse_rsa_modulus() -> None:
    prv_key = load_prv_key("prv_key_2048.json")
    n = prv_key.n
    p, q = prv_key.primes

    for a in (2, 65537, n - 1, n // 3, 2 ** 2047 + 1):
        inv, ok = mod_inverse(a, n)
        assert ok
        assert 0 < inv < n
        assert a * inv % n == 1

    # values sharing a prime factor with n are not invertible
    for a in (p, q, 2 * p, p * (q - 1), n, 0):
        assert mod_inverse(a, n) == (0, False)
    err_msg = "No inverse for "
    with pytest.raises(BlindSigValueError, match=err_msg):
        mod_inv(p, n)


def test_mod_inverse_invalid_modulus() -> None:
    for n in (0, -7):
        with pytest.raises(BlindSigValueError, match="invalid modulus: "):
            mod_inverse(3, n)
