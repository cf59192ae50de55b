#!/usr/bin/env python3

# Copyright (C) 2024 The blindsig developers
#
# This file is part of blindsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of blindsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Hash based helper functions.

Ordinary signatures are computed on the digest of the message;
blind signatures are not: whoever blinds a message
is responsible for hashing it beforehand, if needed.
"""

import hashlib

from blindsig.alias import HashF, Octets
from blindsig.utils import bytes_from_octets


def sha256(octets: Octets) -> bytes:
    """Return the SHA256(*) of the input octet sequence."""
    octets = bytes_from_octets(octets)
    return hashlib.sha256(octets).digest()


def digest(msg: Octets, hf: HashF = hashlib.sha256) -> bytes:
    "Return the hf digest of the input octet sequence."
    msg = bytes_from_octets(msg)
    h = hf()
    h.update(msg)
    return bytes(h.digest())


def digest_size(hf: HashF = hashlib.sha256) -> int:
    return hf().digest_size
