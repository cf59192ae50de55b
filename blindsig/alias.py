#!/usr/bin/env python3

# Copyright (C) 2024 The blindsig developers
#
# This file is part of blindsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of blindsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Any, Callable, Union

# Octets are a sequence of eight-bit bytes or a hex-string (not text string)
#
# hex-strings are strings that can be converted to bytes using bytes.fromhex,
# e.g.:
# "deadbeef"
# "dead beef"
#
# use blindsig.utils.bytes_from_octets to convert Octets to bytes
#
# Octets are used for messages, blinded messages, unblinders,
# and signatures: all of them big-endian unsigned integers
Octets = Union[bytes, str]

# hex-string or bytes representation of an int
Integer = Union[bytes, str, int]

# Hash digest constructor, e.g. hashlib.sha256
HashF = Callable[[], Any]

# Random source returning a uniform integer in [0, n-1],
# e.g. secrets.randbelow
RandBelow = Callable[[int], int]
