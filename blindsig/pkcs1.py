#!/usr/bin/env python3

# Copyright (C) 2024 The blindsig developers
#
# This file is part of blindsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of blindsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""EMSA-PKCS1-v1_5 deterministic signature padding.

Implementation according to RFC 8017 (PKCS #1 v2.2) section 9.2:

https://www.rfc-editor.org/rfc/rfc8017#section-9.2

The encoded message is

    EM = 0x00 || 0x01 || PS || 0x00 || T

where T is the DER encoding of the DigestInfo
(hash algorithm identifier and digest),
and PS is a sequence of 0xFF bytes, at least eight of them,
filling the byte length of the modulus.

This is the padding of ordinary signatures only:
blind signatures operate on the raw message.
"""

from blindsig.alias import HashF, Octets
from blindsig.exceptions import BlindSigValueError
from blindsig.utils import bytes_from_octets

# DER encoding of the DigestInfo up to the digest itself,
# see RFC 8017 section 9.2 note 1
DIGEST_INFO_PREFIXES = {
    "sha1": bytes.fromhex("3021300906052b0e03021a05000414"),
    "sha224": bytes.fromhex("302d300d06096086480165030402040500041c"),
    "sha256": bytes.fromhex("3031300d060960864801650304020105000420"),
    "sha384": bytes.fromhex("3041300d060960864801650304020205000430"),
    "sha512": bytes.fromhex("3051300d060960864801650304020305000440"),
    "sha3_224": bytes.fromhex("302d300d06096086480165030402070500041c"),
    "sha3_256": bytes.fromhex("3031300d060960864801650304020805000420"),
    "sha3_384": bytes.fromhex("3041300d060960864801650304020905000430"),
    "sha3_512": bytes.fromhex("3051300d060960864801650304020a05000440"),
}

# at least eight 0xFF padding bytes, plus 0x00 0x01 and 0x00
_MIN_PADDING = 11


def digest_info_prefix(hf: HashF) -> bytes:
    "Return the DER DigestInfo prefix of the hash function."
    name = hf().name
    try:
        return DIGEST_INFO_PREFIXES[name]
    except KeyError:
        raise BlindSigValueError(f"unsupported hash function: {name}") from None


def emsa_pkcs1_v15_encode(msg_hash: Octets, k: int, hf: HashF) -> bytes:
    """Return the k bytes EMSA-PKCS1-v1_5 encoding of the digest.

    The message has already been hashed with hf;
    k is the byte length of the RSA modulus.
    """

    hf_len = hf().digest_size
    msg_hash = bytes_from_octets(msg_hash, hf_len)
    t = digest_info_prefix(hf) + msg_hash
    if k < len(t) + _MIN_PADDING:
        err_msg = f"intended encoded message length too short: {k} bytes"
        raise BlindSigValueError(err_msg)

    ps = b"\xff" * (k - len(t) - 3)
    return b"\x00\x01" + ps + b"\x00" + t
