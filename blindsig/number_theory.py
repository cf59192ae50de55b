#!/usr/bin/env python3

# Copyright (C) 2024 The blindsig developers
#
# This file is part of blindsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of blindsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Number theory and modular arithmetic functions.

Implementation originally from
https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm
with the following modifications:

* type annotated python3
* non-raising variant for moduli that are not prime (RSA moduli)
* added extensive unit test
"""

from typing import Tuple

from blindsig.exceptions import BlindSigValueError
from blindsig.utils import hex_string


def xgcd(a: int, b: int) -> Tuple[int, int, int]:
    """Return (g, x, y) such that a*x + b*y = g = gcd(a, b).

    based on Extended Euclidean Algorithm, see
    https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm
    """

    x0, x1, y0, y1 = 0, 1, 1, 0
    while a != 0:
        q, b, a = b // a, a, b % a
        y0, y1 = y1, y0 - q * y1
        x0, x1 = x1, x0 - q * x1
    return b, x0, y0


def mod_inverse(a: int, n: int) -> Tuple[int, bool]:
    """Return (inverse, ok) with inverse of a (mod n).

    n does not have to be a prime: for an RSA modulus n,
    a might share one of the prime factors of n.
    In that case a is not invertible, and (0, False) is returned:
    the caller is expected to discard a and try another value.

    On success the inverse is in [1, n-1].
    """

    if n < 1:
        raise BlindSigValueError(f"invalid modulus: {n}")

    g, x, _ = xgcd(a % n, n)
    if g != 1:
        return 0, False

    # the Euclidean algorithm might return a negative coefficient
    return x % n, True


def mod_inv(a: int, m: int) -> int:
    """Return the inverse of a (mod m). m does not have to be a prime.

    Unlike mod_inverse, it raises BlindSigValueError
    if a and m are not coprime.
    """

    inv, ok = mod_inverse(a, m)
    if ok:
        return inv
    a %= m
    err_msg = "No inverse for "
    err_msg += f"{hex_string(a)}" if a > 0xFFFFFFFF else f"{a}"
    err_msg += " mod "
    err_msg += f"{hex_string(m)}" if m > 0xFFFFFFFF else f"{m}"
    raise BlindSigValueError(err_msg)
