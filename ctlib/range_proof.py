#!/usr/bin/env python3

# Copyright (C) 2026 The ctlib developers
#
# This file is part of ctlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ctlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Toy range proof, standing in for a zero-knowledge one.

A real range proof (e.g. Bulletproofs) proves that a commitment
C = v*G + r*H commits to a value 0 <= v < 2^n,
without revealing v or r; it is a ~700 bytes string bound to C.

Here the proof is a single public scalar:

    proof = 2*C + b

with b = 1 if the prover's value is non-negative, 0 otherwise,
so that it is bound to one specific commitment and
can be displayed and transmitted like C.

WARNING: this is NOT cryptographically sound.
Anyone knowing the encoding can forge a valid proof for any
commitment (2*C + 1), and the validity bit is in plain sight.
It only preserves the two-operation protocol shape, so that a real
zero-knowledge range proof can replace it behind the same interface.

The proof is not reduced mod p: python ints do not wrap,
so 2*C + 1 cannot alias another commitment's encoding.
In a fixed-width reduced encoding it could, for C near p.
"""

from ctlib.alias import Commitment, RangeProof
from ctlib.exceptions import CTlibRuntimeError, CTlibTypeError, CTlibValueError
from ctlib.utils import int_repr

VALID_BIT = 1


def is_in_range(value: int) -> bool:
    "Return True if value is a valid (i.e. non-negative) amount."

    return value >= 0


def create_proof(value: int, commitment: Commitment) -> RangeProof:
    "Return the proof that the value committed to in commitment is in range."

    valid_bit = VALID_BIT if is_in_range(value) else 0
    return commitment * 2 + valid_bit


def assert_as_valid(commitment: Commitment, proof: RangeProof) -> None:
    # It raises Errors, while verify_proof should always return True or False
    # Errors discriminate a proof for another commitment
    # from a well-bound proof of an out-of-range value

    for name, scalar in (("commitment", commitment), ("proof", proof)):
        if isinstance(scalar, bool) or not isinstance(scalar, int):
            raise CTlibTypeError(f"{name} is not an int: {scalar!r}")

    if proof >> 1 != commitment:
        err_msg = "proof not bound to commitment: "
        err_msg += f"{int_repr(proof)} for {int_repr(commitment)}"
        raise CTlibValueError(err_msg)

    if proof & 1 != VALID_BIT:
        raise CTlibRuntimeError("committed value out of range")


def verify_proof(commitment: Commitment, proof: RangeProof) -> bool:
    """Return True if proof is a valid range proof for commitment.

    It is equivalent to proof == 2*commitment + 1.
    The verifier never needs (or learns) the committed value.
    """

    # all kind of Exceptions are catched because
    # verify_proof must always return a bool
    try:
        assert_as_valid(commitment, proof)
    except Exception:  # pylint: disable=broad-except
        return False

    return True
