#!/usr/bin/env python3

# Copyright (C) 2026 The ctlib developers
#
# This file is part of ctlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ctlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Tuple, Union

# int, decimal string, hex-string with 0x prefix, or big-endian bytes
# e.g.:
# 2305843009213693951
# "2305843009213693951"
# "0x1FFFFFFFFFFFFFFF"
# b"\x1f\xff\xff\xff\xff\xff\xff\xff"
#
# use ctlib.utils.int_from_integer to convert Integer to int
Integer = Union[bytes, str, int]

# integer conceptually in [0, p), p being the group modulus
Scalar = int

# public scalar C = (v*G + r*H) mod p
Commitment = int

# public scalar bound to exactly one Commitment (see ctlib.range_proof)
# it is not reduced mod p
RangeProof = int

# secret (value, blinding) pair: it must never be published
# value is signed, blinding is a Scalar
Opening = Tuple[int, int]
