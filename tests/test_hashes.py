#!/usr/bin/env python3

# Copyright (C) 2024 The blindsig developers
#
# This file is part of blindsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of blindsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `blindsig.hashes` module."

import hashlib

from blindsig.hashes import digest, digest_size, sha256


def test_sha256() -> None:
    # https://www.di-mgt.com.au/sha_testvectors.html
    msg = b"abc"
    exp = "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    assert sha256(msg).hex() == exp
    assert sha256(msg.hex()).hex() == exp
    assert len(sha256(b"")) == 32
    assert sha256(b"").hex() == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


def test_digest() -> None:
    msg = b"ballot!!"
    assert digest(msg) == sha256(msg)
    assert digest(msg, hashlib.sha256) == hashlib.sha256(msg).digest()
    assert digest(msg, hashlib.sha512) == hashlib.sha512(msg).digest()
    assert digest(msg, hashlib.sha1) == hashlib.sha1(msg).digest()
    assert digest(msg) != digest(b"ballot!?")


def test_digest_size() -> None:
    assert digest_size() == 32
    assert digest_size(hashlib.sha256) == 32
    assert digest_size(hashlib.sha512) == 64
    assert digest_size(hashlib.sha1) == 20
