#!/usr/bin/env python3

# Copyright (C) 2024 The blindsig developers
#
# This file is part of blindsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of blindsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

These are only meant to discriminate between Exceptions being raised
by blindsig from those raised by other codebase.

Users are usually better off just dealing with the regular
ValueError, TypeError, and RuntimeError
from which the blindsig versions are derived.
"""


class BlindSigValueError(ValueError):
    pass


class BlindSigTypeError(TypeError):
    pass


class BlindSigRuntimeError(RuntimeError):
    pass


class DecryptionError(BlindSigValueError):
    """Ciphertext (or blinded message) not in [0, n-1].

    It is a caller error: the private key operation is not attempted.
    """
