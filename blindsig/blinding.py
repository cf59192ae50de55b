#!/usr/bin/env python3

# Copyright (C) 2024 The blindsig developers
#
# This file is part of blindsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of blindsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""RSA blinding and unblinding of a message (Chaum blind signature).

The requester blinds the message m with a random factor r:

    blinded_msg = m * r^e mod n

The signer, unaware of m, performs the private key operation:

    blinded_sig = blinded_msg^d = m^d * r^(e*d) = m^d * r mod n

and the requester, the only one knowing the unblinder r^-1 mod n,
recovers a plain RSA signature on m:

    sig = blinded_sig * r^-1 = m^d mod n

The blinding factor must be fresh for every blinded message:
reusing it would allow the signer to link the blinded request
to the unblinded signature.

This is unrelated to the exponentiation blinding
used inside blindsig.decrypt against timing attacks.

https://en.wikipedia.org/wiki/Blind_signature#Blind_RSA_signatures
"""

import secrets
from typing import Tuple

from blindsig.alias import Octets, RandBelow
from blindsig.exceptions import BlindSigRuntimeError, BlindSigValueError
from blindsig.number_theory import mod_inverse
from blindsig.rsa_key import PubKey
from blindsig.utils import bytes_from_int, hex_string, int_from_octets

# for a sane random source the expected number of draws is one:
# a draw is discarded only if it shares a prime factor with n
MAX_DRAWS = 128


def blinding_factor(
    pub_key: PubKey, randbelow: RandBelow = secrets.randbelow
) -> Tuple[int, int]:
    """Return (r^e mod n, r^-1 mod n) for a fresh random r in [1, n-1].

    r itself is not returned.
    """

    n = pub_key.n
    for _ in range(MAX_DRAWS):
        r = randbelow(n)
        if r == 0:
            r = 1
        unblinder, ok = mod_inverse(r, n)
        if ok:
            return pow(r, pub_key.e, n), unblinder
    raise BlindSigRuntimeError(f"no invertible blinding factor in {MAX_DRAWS} draws")


def blind(
    msg: Octets, pub_key: PubKey, randbelow: RandBelow = secrets.randbelow
) -> Tuple[bytes, bytes]:
    """Return the blinded message and the unblinder.

    The message is the big-endian encoding of an integer in [0, n-1]:
    it is not hashed, hash it beforehand if needed.
    The unblinder must be kept secret by the requester,
    to be used by unblind once the blinded message has been signed.
    """

    m = int_from_octets(msg)
    if m >= pub_key.n:
        err_msg = "message not in 0..n-1: "
        err_msg += f"'{hex_string(m)}'" if m > 0xFFFFFFFF else f"{m}"
        raise BlindSigValueError(err_msg)

    r_pow_e, unblinder = blinding_factor(pub_key, randbelow)
    blinded_msg = m * r_pow_e % pub_key.n
    size = pub_key.size
    return bytes_from_int(blinded_msg, size), bytes_from_int(unblinder, size)


def unblind(blinded_sig: Octets, unblinder: Octets, pub_key: PubKey) -> bytes:
    """Return the signature of the message from its blinded signature.

    Only the public modulus is needed,
    no interaction with the signer is required.
    """

    sig = int_from_octets(blinded_sig) * int_from_octets(unblinder) % pub_key.n
    return bytes_from_int(sig, pub_key.size)
