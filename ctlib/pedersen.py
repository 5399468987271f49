#!/usr/bin/env python3

# Copyright (C) 2026 The ctlib developers
#
# This file is part of ctlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ctlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Pedersen commitment functions.

In a commitment scheme the committer:

* decides (or is given) a secret value v
* decides a random secret blinding factor r
* *commits* to v by applying the public commitment
  scheme algorithm and producing a commitment C=Commit(v,r)
* makes C public

Later, when he reveals v and r, the verifier *opens* the
commitment checking if indeed C=Commit(v,r).

Here the commitment algorithm is Commit(v,r) = v*G + r*H (mod p),
G and H being the public generators of the Group.

Pedersen commitments are additively homomorphic:
Commit(v1,r1) + Commit(v2,r2) = Commit(v1+v2, r1+r2),
which allows to check that input and output amounts balance
without knowing any of them (see ctlib.balance).

Note that the value v is not range checked at all:
a commitment to a negative value is as good as any other one.
Pedersen commitments alone provide no range guarantee,
that is the job of ctlib.range_proof.
"""

from typing import Iterable

from ctlib.alias import Commitment, Scalar
from ctlib.group import Group, toy61


def commit(value: int, blinding: int, grp: Group = toy61) -> Commitment:
    "Commit to value, returning value*G + blinding*H (mod p)."

    return grp.reduce(value * grp.G + blinding * grp.H)


def aggregate(commitments: Iterable[Commitment], grp: Group = toy61) -> Commitment:
    """Return the sum of the commitments (mod p).

    The result does not depend on the commitment order;
    the aggregate of no commitment is 0.
    """

    return grp.sum(commitments)


def verify(value: int, blinding: int, commitment: Commitment, grp: Group = toy61) -> bool:
    "Open the commitment and return True if valid."

    # all kind of Exceptions are catched because
    # verify must always return a bool
    try:
        Q = commit(value, blinding, grp)
    except Exception:  # pylint: disable=broad-except
        return False
    return commitment == Q


def equivocate(value: int, blinding: int, new_value: int, grp: Group = toy61) -> Scalar:
    """Return the blinding that opens the same commitment to new_value.

    Given C = v*G + r*H, it returns r' such that C = v'*G + r'*H,
    i.e. r' = r + (v - v')*G/H (mod p).

    Any commitment can be opened to any value: C alone does not
    determine (v, r), that is why commitments are hiding.
    It also shows that the toy Group is not binding,
    as the discrete logarithm of H with respect to G is known
    to everybody; with elliptic curve generators it would not be.
    """

    delta = grp.mul(value - new_value, grp.G)
    return grp.add(blinding, grp.mul(delta, grp.inv(grp.H)))
