#!/usr/bin/env python3

# Copyright (C) 2026 The ctlib developers
#
# This file is part of ctlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ctlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Modular arithmetic functions.

Based on the Extended Euclidean Algorithm, see
https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm
"""

from typing import Tuple

from ctlib.exceptions import CTlibValueError
from ctlib.utils import int_repr


def xgcd(a: int, b: int) -> Tuple[int, int, int]:
    "Return (g, x, y) such that a*x + b*y = g = gcd(a, b)."

    x0, x1, y0, y1 = 0, 1, 1, 0
    while a != 0:
        q, b, a = b // a, a, b % a
        y0, y1 = y1, y0 - q * y1
        x0, x1 = x1, x0 - q * x1
    return b, x0, y0


def mod_inv(a: int, m: int) -> int:
    "Return the inverse of a (mod m). m does not have to be a prime."

    a %= m
    g, x, _ = xgcd(a, m)
    if g == 1:
        return x % m
    raise CTlibValueError(f"no inverse for {int_repr(a)} mod {int_repr(m)}")
