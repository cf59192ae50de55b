#!/usr/bin/env python3

# Copyright (C) 2024 The blindsig developers
#
# This file is part of blindsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of blindsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""RSA primitives: public (encrypt) and private (decrypt) key operations.

The private key operation is the signature primitive too:
RSASP1 in RFC 8017 (PKCS #1 v2.2) section 5.2.1.

Two independent techniques are used:

* exponentiation blinding: the ciphertext c is multiplied
  by r^e for a fresh random r before the exponentiation,
  the result is then multiplied by r^-1.
  The exponentiation so operates on a value unknown to an attacker
  timing it, while the returned value is unaffected.
  See Kocher, "Timing Attacks on Implementations of
  Diffie-Hellman, RSA, DSS, and Other Systems".
* Chinese Remainder Theorem: if the private key carries the
  precomputed CRT values, the exponentiation is performed modulo
  each prime and the result is recombined with Garner's algorithm,
  generalized to any number of primes.
  https://www.rfc-editor.org/rfc/rfc8017#section-5.1.2
"""

import secrets
from typing import List, Optional, Tuple

from blindsig.alias import Octets, RandBelow
from blindsig.exceptions import BlindSigRuntimeError, DecryptionError
from blindsig.number_theory import mod_inverse
from blindsig.rsa_key import Precomputed, PrvKey, PubKey
from blindsig.utils import bytes_from_int, hex_string, int_from_octets

# see blindsig.blinding.MAX_DRAWS
_MAX_DRAWS = 128


def encrypt(m: int, pub_key: PubKey) -> int:
    "Return m^e mod n (RSAEP/RSAVP1)."
    return pow(m, pub_key.e, pub_key.n)


def _exp_blinding(prv_key: PrvKey, randbelow: RandBelow) -> Tuple[int, int]:
    # private helper: not to be confused with blindsig.blinding.blinding_factor
    n = prv_key.n
    for _ in range(_MAX_DRAWS):
        r = randbelow(n)
        if r == 0:
            r = 1
        ir, ok = mod_inverse(r, n)
        if ok:
            return pow(r, prv_key.e, n), ir
    raise BlindSigRuntimeError(
        f"no invertible exponentiation blinding in {_MAX_DRAWS} draws"
    )


def _crt_exp(c: int, primes: List[int], precomputed: Precomputed) -> int:
    p, q = primes[0], primes[1]

    m = pow(c, precomputed.dp, p)
    m2 = pow(c, precomputed.dq, q)
    # h in [0, p-1]
    h = (m - m2) * precomputed.qinv % p
    m = m2 + h * q

    # Garner's fold over the additional (prime, exp, coeff) triples,
    # r being the product of the primes already accounted for
    r = p * q
    for prime, crt_value in zip(primes[2:], precomputed.crt_values):
        m_i = pow(c, crt_value.exp, prime)
        h = (m_i - m) * crt_value.coeff % prime
        m += r * h
        r *= prime

    return m


def decrypt(
    c: int, prv_key: PrvKey, randbelow: Optional[RandBelow] = secrets.randbelow
) -> int:
    """Return c^d mod n (RSADP/RSASP1).

    c must be in [0, n-1], otherwise DecryptionError is raised.

    If a random source is given (default), exponentiation blinding is used;
    randbelow=None disables it.
    """

    if not 0 <= c < prv_key.n:
        err_msg = "ciphertext not in 0..n-1: "
        err_msg += f"'{hex_string(c)}'" if c > 0xFFFFFFFF else f"{c}"
        raise DecryptionError(err_msg)

    ir = None
    if randbelow is not None:
        r_pow_e, ir = _exp_blinding(prv_key, randbelow)
        c = c * r_pow_e % prv_key.n

    if prv_key.precomputed is None:
        m = pow(c, prv_key.d, prv_key.n)
    else:
        m = _crt_exp(c, prv_key.primes, prv_key.precomputed)

    if ir is not None:
        m = m * ir % prv_key.n

    return m


def decrypt_bytes(
    c: Octets, prv_key: PrvKey, randbelow: Optional[RandBelow] = secrets.randbelow
) -> bytes:
    "Return c^d mod n, as big-endian bytes with the length of the modulus."
    m = decrypt(int_from_octets(c), prv_key, randbelow)
    return bytes_from_int(m, prv_key.size)
