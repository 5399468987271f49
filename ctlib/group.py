#!/usr/bin/env python3

# Copyright (C) 2026 The ctlib developers
#
# This file is part of ctlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ctlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Public commitment parameters.

A Group is a prime field Fp supplemented with two public
generators: G for the value dimension and H for the blinding one.
Scalar multiplication v*G is plain modular multiplication,
standing in for elliptic curve point multiplication:
in a real system G and H would be curve points and
the discrete logarithm of H with respect to G would be unknown.
Here it is not: H/G is trivially computable (see pedersen.equivocate).

Named parameter sets are read from data/groups.json;
toy61 is the default one for every operation.
"""

import json
from os import path
from typing import Dict

from ctlib.alias import Integer
from ctlib.exceptions import CTlibValueError
from ctlib.field import PrimeField
from ctlib.utils import int_from_integer, int_repr


class Group(PrimeField):
    "Prime field with the two public generators G and H."

    def __init__(self, p: Integer, G: Integer, H: Integer) -> None:

        super().__init__(p)

        G = int_from_integer(G)
        if not 0 < G < self.p:
            raise CTlibValueError(f"G not in 1..p-1: {int_repr(G)}")
        H = int_from_integer(H)
        if not 0 < H < self.p:
            raise CTlibValueError(f"H not in 1..p-1: {int_repr(H)}")
        if G == H:
            raise CTlibValueError(f"G and H must be different: {int_repr(G)}")

        self.G = G
        self.H = H

    def __str__(self) -> str:
        result = "Group"
        result += f"\n p   = {int_repr(self.p)}"
        result += f"\n G   = {int_repr(self.G)}"
        result += f"\n H   = {int_repr(self.H)}"
        return result

    def __repr__(self) -> str:
        return f"Group({int_repr(self.p)}, {int_repr(self.G)}, {int_repr(self.H)})"


datadir = path.join(path.dirname(__file__), "data")

filename = path.join(datadir, "groups.json")
with open(filename, "r", encoding="ascii") as file_:
    _params = json.load(file_)
GROUPS: Dict[str, Group] = {
    grp_name: Group(*grp_params) for grp_name, grp_params in _params.items()
}

toy61 = GROUPS["toy61"]


def group_from_name(grp_name: str) -> Group:
    "Return the named Group, raising CTlibValueError if unknown."

    try:
        return GROUPS[grp_name]
    except KeyError as e:
        raise CTlibValueError(f"unknown group: {grp_name}") from e
