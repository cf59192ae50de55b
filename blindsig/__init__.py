#!/usr/bin/env python3

# Copyright (C) 2024 The blindsig developers
#
# This file is part of blindsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of blindsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the blindsig package."

name = "blindsig"
__version__ = "2024.10.1"
__author__ = "The blindsig developers"
__author_email__ = "devs@blindsig.org"
__copyright__ = "Copyright (C) 2024 The blindsig developers"
__license__ = "MIT License"
