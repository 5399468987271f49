#!/usr/bin/env python3

# Copyright (C) 2026 The ctlib developers
#
# This file is part of ctlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ctlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Prime field class.

Arithmetic over Fp, p being a prime:
every operation returns its result canonicalized into [0, p),
so that callers never observe negative or out-of-range scalars.

Python ints have arbitrary precision, hence products
like value*G + blinding*H can never overflow before reduction.
"""

from math import ceil
from typing import Iterable

from ctlib.alias import Integer, Scalar
from ctlib.exceptions import CTlibValueError
from ctlib.number_theory import mod_inv
from ctlib.utils import int_from_integer, int_repr


class PrimeField:
    "Finite field of integers modulo a prime p."

    def __init__(self, p: Integer) -> None:

        p = int_from_integer(p)

        # Fermat test will do as _probabilistic_ primality test...
        if p < 3 or p % 2 == 0 or pow(2, p - 1, p) != 1:
            raise CTlibValueError(f"p is not an odd prime: {int_repr(p)}")

        self.p = p
        self.p_size = ceil(p.bit_length() / 8)

    def __str__(self) -> str:
        return f"PrimeField\n p   = {int_repr(self.p)}"

    def __repr__(self) -> str:
        return f"PrimeField({int_repr(self.p)})"

    def reduce(self, x: int) -> Scalar:
        """Return x reduced into [0, p).

        Python % already has floored semantics,
        i.e. it is equivalent to ((x % p) + p) % p
        and negative inputs are mapped to [0, p) too.
        """
        return x % self.p

    def add(self, a: int, b: int) -> Scalar:
        return self.reduce(a + b)

    def sub(self, a: int, b: int) -> Scalar:
        return self.reduce(a - b)

    def neg(self, a: int) -> Scalar:
        return self.reduce(-a)

    def mul(self, a: int, b: int) -> Scalar:
        return self.reduce(a * b)

    def inv(self, a: int) -> Scalar:
        "Return the multiplicative inverse of a; a must not be 0 (mod p)."
        return mod_inv(a, self.p)

    def sum(self, terms: Iterable[int]) -> Scalar:
        # reduce once at the end: python ints do not overflow
        return self.reduce(sum(terms))
