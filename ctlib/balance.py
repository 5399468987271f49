#!/usr/bin/env python3

# Copyright (C) 2026 The ctlib developers
#
# This file is part of ctlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ctlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Homomorphic balance check.

If the prover picks the blinding factors so that
r_input = sum(r_outputs), then

    Commit(v_input, r_input) = sum(Commit(v_i, r_i))

holds exactly when v_input = sum(v_i):
the verifier checks that input and output amounts balance
using only the public commitments.

The check is equally satisfied by amounts such as 10 = 15 + (-5):
it cannot detect a negative output, which would create value
out of thin air. Each commitment needs a range proof too.
"""

from typing import Iterable

from ctlib.alias import Commitment, Scalar
from ctlib.group import Group, toy61
from ctlib.pedersen import aggregate


def verify_balance(
    input_commitment: Commitment,
    output_commitments: Iterable[Commitment],
    grp: Group = toy61,
) -> bool:
    "Return True if the input commitment is the sum of the output ones."

    return input_commitment == aggregate(output_commitments, grp)


def balancing_blinding(
    input_blinding: int, output_blindings: Iterable[int], grp: Group = toy61
) -> Scalar:
    """Return the blinding factor for the last (e.g. change) output.

    It is the prover-side counterpart of verify_balance:
    given the input blinding and the blindings of all other outputs,
    it returns the one restoring r_input = sum(r_outputs) (mod p).
    """

    return grp.sub(input_blinding, sum(output_blindings))
