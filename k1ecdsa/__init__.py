#!/usr/bin/env python3

# Copyright (C) The k1ecdsa developers
#
# This file is part of k1ecdsa. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of k1ecdsa including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the k1ecdsa package."

name = "k1ecdsa"
__version__ = "2024.3.1"
__author__ = "The k1ecdsa developers"
__author_email__ = "devs@k1ecdsa.org"
__copyright__ = "Copyright (C) The k1ecdsa developers"
__license__ = "MIT License"
