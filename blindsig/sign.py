#!/usr/bin/env python3

# Copyright (C) 2024 The blindsig developers
#
# This file is part of blindsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of blindsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""RSA ordinary and blind signatures.

Ordinary signatures are RSASSA-PKCS1-v1_5 (RFC 8017 section 8.2):
the message is hashed with hf, the digest is padded
according to EMSA-PKCS1-v1_5, then signed with the private key.

Blind signatures are raw RSA signatures of a blinded message
(see blindsig.blinding): no hashing, no padding.
The signer learns nothing about the message;
once unblinded, the signature verifies as

    sig^e mod n == msg

A typical flow (e.g. anonymous ballots):

    blinded_msg, unblinder = blinding.blind(msg, signer_pub_key)
    # the requester sends blinded_msg to the signer
    blinded_sig = sign.blind_sign(blinded_msg, signer_prv_key)
    # the signer sends blinded_sig back to the requester
    assert sign.check_blind_sig(blinded_msg, signer_pub_key, blinded_sig)
    sig = blinding.unblind(blinded_sig, unblinder, signer_pub_key)
    assert sign.check_blind_sig(msg, signer_pub_key, sig)

https://www.rfc-editor.org/rfc/rfc8017#section-8.2
"""

import hmac
import secrets
from hashlib import sha256
from typing import Optional

from blindsig.alias import HashF, Octets, RandBelow
from blindsig.decrypt import decrypt, decrypt_bytes, encrypt
from blindsig.exceptions import BlindSigRuntimeError, BlindSigValueError
from blindsig.hashes import digest
from blindsig.pkcs1 import emsa_pkcs1_v15_encode
from blindsig.rsa_key import PrvKey, PubKey
from blindsig.utils import bytes_from_int, bytes_from_octets, int_from_octets


def sign_(
    msg_hash: Octets,
    prv_key: PrvKey,
    hf: HashF = sha256,
    randbelow: Optional[RandBelow] = secrets.randbelow,
) -> bytes:
    """Sign a hf_len bytes message digest according to RSASSA-PKCS1-v1_5.

    The signature has the byte length of the modulus.
    """

    k = prv_key.size
    em = emsa_pkcs1_v15_encode(msg_hash, k, hf)
    s = decrypt(int_from_octets(em), prv_key, randbelow)
    return bytes_from_int(s, k)


def sign(
    msg: Octets,
    prv_key: PrvKey,
    hf: HashF = sha256,
    randbelow: Optional[RandBelow] = secrets.randbelow,
) -> bytes:
    """RSASSA-PKCS1-v1_5 signature.

    The message msg is first processed by hf, yielding the value

        msg_hash = hf(msg),

    which is then padded and signed.
    """

    msg_hash = digest(msg, hf)
    return sign_(msg_hash, prv_key, hf, randbelow)


def assert_as_valid_(
    msg_hash: Octets, pub_key: PubKey, sig: Octets, hf: HashF = sha256
) -> None:
    # Private function for test/dev purposes
    # It raises Errors, while check_sig_ should always return True or False

    k = pub_key.size
    # length checking, RFC 8017 section 8.2.2 step 1
    sig = bytes_from_octets(sig, k)

    s = int_from_octets(sig)
    if s >= pub_key.n:
        raise BlindSigValueError("signature representative out of range")
    em = bytes_from_int(encrypt(s, pub_key), k)

    em2 = emsa_pkcs1_v15_encode(msg_hash, k, hf)
    if not hmac.compare_digest(em, em2):
        raise BlindSigRuntimeError("signature verification failed")


def assert_as_valid(
    msg: Octets, pub_key: PubKey, sig: Octets, hf: HashF = sha256
) -> None:
    # Private function for test/dev purposes
    # It raises Errors, while check_sig should always return True or False
    msg_hash = digest(msg, hf)
    assert_as_valid_(msg_hash, pub_key, sig, hf)


def check_sig_(
    msg_hash: Octets, pub_key: PubKey, sig: Octets, hf: HashF = sha256
) -> bool:
    "RSASSA-PKCS1-v1_5 verification of a message digest."
    # all kind of Exceptions are catched because
    # check_sig_ must always return a bool
    try:
        assert_as_valid_(msg_hash, pub_key, sig, hf)
    except Exception:  # pylint: disable=broad-except
        return False

    return True


def check_sig(msg: Octets, pub_key: PubKey, sig: Octets, hf: HashF = sha256) -> bool:
    "RSASSA-PKCS1-v1_5 signature verification (RFC 8017 section 8.2.2)."
    # all kind of Exceptions are catched because
    # check_sig must always return a bool
    try:
        assert_as_valid(msg, pub_key, sig, hf)
    except Exception:  # pylint: disable=broad-except
        return False

    return True


def blind_sign(
    blinded_msg: Octets,
    prv_key: PrvKey,
    randbelow: Optional[RandBelow] = secrets.randbelow,
) -> bytes:
    """Return the raw RSA signature of the blinded message.

    No hashing nor padding is applied:
    the blinded message must be in [0, n-1],
    otherwise DecryptionError is raised.
    """

    return decrypt_bytes(blinded_msg, prv_key, randbelow)


def assert_blind_sig_as_valid(msg: Octets, pub_key: PubKey, sig: Octets) -> None:
    # Private function for test/dev purposes
    # It raises Errors, while check_blind_sig should always return True or False

    s = int_from_octets(sig)
    if s >= pub_key.n:
        raise BlindSigValueError("signature not in 0..n-1")

    if encrypt(s, pub_key) != int_from_octets(msg):
        raise BlindSigRuntimeError("blind signature verification failed")


def check_blind_sig(msg: Octets, pub_key: PubKey, sig: Octets) -> bool:
    """Return True if sig^e mod n equals msg.

    It applies to a blinded message and its blinded signature,
    as well as to a message and its unblinded signature.
    Neither the private key nor the blinding factor are needed.
    """

    # all kind of Exceptions are catched because
    # check_blind_sig must always return a bool
    try:
        assert_blind_sig_as_valid(msg, pub_key, sig)
    except Exception:  # pylint: disable=broad-except
        return False

    return True
