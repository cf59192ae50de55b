#!/usr/bin/env python3

# Copyright (C) 2024 The blindsig developers
#
# This file is part of blindsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of blindsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""RSA public and private keys.

Keys are immutable value objects, validated at construction:
parsing them from (and packing them to) a storage format
is left to the caller.

The private key can carry the values precomputed
for Chinese Remainder Theorem (CRT) decryption,
laid out as in RFC 8017 (PKCS #1 v2.2) section 3.2:

* dp = d mod (p-1), for the first prime p
* dq = d mod (q-1), for the second prime q
* qinv = q^-1 mod p
* for every additional prime r_i (multi-prime RSA):

  - exp = d mod (r_i-1)
  - coeff = (p * q * ... * r_(i-1))^-1 mod r_i

https://www.rfc-editor.org/rfc/rfc8017#section-3.2
"""

from dataclasses import InitVar, dataclass, field, replace
from math import prod
from typing import List, Optional, TypeVar

from dataclasses_json import DataClassJsonMixin, config

from blindsig.exceptions import BlindSigValueError
from blindsig.number_theory import mod_inverse
from blindsig.utils import hex_string, int_from_integer


def _hex_list(values: List[int]) -> List[str]:
    return [hex(v) for v in values]


def _int_list(values: List[str]) -> List[int]:
    return [int_from_integer(v) for v in values]


_HEX_INT = config(encoder=hex, decoder=int_from_integer)
_HEX_INT_LIST = config(encoder=_hex_list, decoder=_int_list)


def _short(i: int) -> str:
    return f"'{hex_string(i)}'" if i > 0xFFFFFFFF else f"{i}"


@dataclass(frozen=True)
class PubKey(DataClassJsonMixin):
    n: int = field(metadata=_HEX_INT)
    e: int = 65537
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            self.assert_valid()

    @property
    def size(self) -> int:
        "Return the byte length of the modulus."
        return (self.n.bit_length() + 7) // 8

    def assert_valid(self) -> None:
        # the smallest odd composite
        if self.n < 9:
            raise BlindSigValueError(f"invalid modulus: {_short(self.n)}")
        if self.n % 2 == 0:
            raise BlindSigValueError(f"even modulus: {_short(self.n)}")
        if self.e < 3 or self.e % 2 == 0:
            raise BlindSigValueError(f"invalid public exponent: {self.e}")
        if self.e >= self.n:
            raise BlindSigValueError(f"public exponent too large: {self.e}")


@dataclass(frozen=True)
class CRTValue(DataClassJsonMixin):
    "CRT values for a prime beyond the first two (multi-prime RSA)."

    # d mod (prime - 1)
    exp: int = field(metadata=_HEX_INT)
    # inverse of the product of the previous primes, mod prime
    coeff: int = field(metadata=_HEX_INT)


@dataclass(frozen=True)
class Precomputed(DataClassJsonMixin):
    dp: int = field(metadata=_HEX_INT)
    dq: int = field(metadata=_HEX_INT)
    qinv: int = field(metadata=_HEX_INT)
    crt_values: List[CRTValue] = field(default_factory=list)

    @classmethod
    def from_primes(cls, d: int, primes: List[int]) -> "Precomputed":
        p, q = primes[0], primes[1]
        qinv, ok = mod_inverse(q, p)
        if not ok:
            raise BlindSigValueError("first two primes are not coprime")

        crt_values = []
        r = p * q
        for prime in primes[2:]:
            coeff, ok = mod_inverse(r, prime)
            if not ok:
                raise BlindSigValueError(f"prime not coprime: {_short(prime)}")
            crt_values.append(CRTValue(d % (prime - 1), coeff))
            r *= prime

        return cls(d % (p - 1), d % (q - 1), qinv, crt_values)


_PrvKey = TypeVar("_PrvKey", bound="PrvKey")


@dataclass(frozen=True)
class PrvKey(DataClassJsonMixin):
    """RSA private key, possibly with more than two prime factors.

    The precomputed CRT values are an optimization only:
    without them the private exponent d is used with the full modulus.
    """

    n: int = field(metadata=_HEX_INT)
    e: int
    d: int = field(metadata=_HEX_INT, repr=False)
    primes: List[int] = field(metadata=_HEX_INT_LIST, repr=False)
    precomputed: Optional[Precomputed] = field(default=None, repr=False)
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            self.assert_valid()

    @property
    def size(self) -> int:
        "Return the byte length of the modulus."
        return (self.n.bit_length() + 7) // 8

    @property
    def pub_key(self) -> PubKey:
        return PubKey(self.n, self.e)

    def assert_valid(self) -> None:
        self.pub_key.assert_valid()

        if len(self.primes) < 2:
            raise BlindSigValueError(f"not enough primes: {len(self.primes)}")
        for prime in self.primes:
            if prime < 2:
                raise BlindSigValueError(f"invalid prime: {_short(prime)}")
        if prod(self.primes) != self.n:
            raise BlindSigValueError("modulus is not the product of the primes")

        if not 0 < self.d < self.n:
            raise BlindSigValueError("private exponent not in 1..n-1")
        # e*d = 1 mod (p-1) for all primes, as in Go's rsa.Validate
        for prime in self.primes:
            if (self.d * self.e - 1) % (prime - 1) != 0:
                raise BlindSigValueError("invalid private exponent")

        if self.precomputed is not None:
            self._assert_valid_precomputed(self.precomputed)

    def _assert_valid_precomputed(self, precomputed: Precomputed) -> None:
        p, q = self.primes[0], self.primes[1]
        if precomputed.dp != self.d % (p - 1):
            raise BlindSigValueError("invalid CRT exponent dp")
        if precomputed.dq != self.d % (q - 1):
            raise BlindSigValueError("invalid CRT exponent dq")
        if precomputed.qinv * q % p != 1:
            raise BlindSigValueError("invalid CRT coefficient qinv")

        if len(precomputed.crt_values) != len(self.primes) - 2:
            err_msg = f"invalid number of CRT values: {len(precomputed.crt_values)}"
            err_msg += f" instead of {len(self.primes) - 2}"
            raise BlindSigValueError(err_msg)
        r = p * q
        for prime, crt_value in zip(self.primes[2:], precomputed.crt_values):
            if crt_value.exp != self.d % (prime - 1):
                raise BlindSigValueError(f"invalid CRT exponent for {_short(prime)}")
            if crt_value.coeff * r % prime != 1:
                raise BlindSigValueError(
                    f"invalid CRT coefficient for {_short(prime)}"
                )
            r *= prime

    def precompute(self: _PrvKey) -> _PrvKey:
        "Return the same key, with the CRT values."
        if self.precomputed is not None:
            return self
        precomputed = Precomputed.from_primes(self.d, self.primes)
        return replace(self, precomputed=precomputed)

    def without_precomputed(self: _PrvKey) -> _PrvKey:
        "Return the same key, without the CRT values."
        return replace(self, precomputed=None)
