#!/usr/bin/env python3

# Copyright (C) 2026 The ctlib developers
#
# This file is part of ctlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ctlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Confidential transaction with one input and many outputs.

Only the public (commitment, range proof) pairs are part of a
Transaction: values and blinding factors stay with the prover.
A verifier accepts the transaction if:

* the input commitment is the sum of the output commitments
  (the amounts balance, see ctlib.balance)
* every range proof verifies
  (no amount is negative, see ctlib.range_proof)

Neither check alone is enough.
Scalars are serialized as decimal text.
"""

import logging
from dataclasses import InitVar, dataclass, field
from typing import List, Sequence, Type, TypeVar

from dataclasses_json import DataClassJsonMixin, config

from ctlib import range_proof
from ctlib.alias import Opening
from ctlib.balance import verify_balance
from ctlib.exceptions import CTlibRuntimeError, CTlibTypeError, CTlibValueError
from ctlib.group import Group, group_from_name
from ctlib.pedersen import commit
from ctlib.utils import int_from_integer, int_repr

_log = logging.getLogger(__name__)

_DECIMAL = config(encoder=str, decoder=int_from_integer)

_CommittedValue = TypeVar("_CommittedValue", bound="CommittedValue")
_Transaction = TypeVar("_Transaction", bound="Transaction")


@dataclass(frozen=True)
class CommittedValue(DataClassJsonMixin):
    "Public (commitment, range proof) pair for a secret amount."

    commitment: int = field(default=0, metadata=_DECIMAL)
    # valid proof for the zero commitment
    proof: int = field(default=1, metadata=_DECIMAL)
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        for name in ("commitment", "proof"):
            scalar = getattr(self, name)
            if isinstance(scalar, bool) or not isinstance(scalar, int):
                raise CTlibTypeError(f"{name} is not an int: {scalar!r}")
            if scalar < 0:
                raise CTlibValueError(f"negative {name}: {scalar}")

    @classmethod
    def from_opening(
        cls: Type[_CommittedValue], opening: Opening, grp: Group
    ) -> _CommittedValue:
        "Return the public pair for the secret (value, blinding) opening."
        value, blinding = opening
        commitment = commit(value, blinding, grp)
        return cls(commitment, range_proof.create_proof(value, commitment))

    def verify_proof(self) -> bool:
        return range_proof.verify_proof(self.commitment, self.proof)


@dataclass(frozen=True)
class Transaction(DataClassJsonMixin):
    tx_input: CommittedValue = field(
        default_factory=CommittedValue, metadata=config(field_name="input")
    )
    outputs: List[CommittedValue] = field(default_factory=list)
    group: str = "toy61"
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            self.assert_valid()

    @property
    def grp(self) -> Group:
        "Return the Group of the public parameters."
        return group_from_name(self.group)

    def assert_valid(self) -> None:
        "Raise if the transaction is not well-formed."

        grp = self.grp
        if not self.outputs:
            raise CTlibValueError("no outputs")
        for i, committed in enumerate([self.tx_input] + self.outputs):
            committed.assert_valid()
            if committed.commitment >= grp.p:
                err_msg = f"commitment #{i} not in 0..p-1: "
                err_msg += int_repr(committed.commitment)
                raise CTlibValueError(err_msg)

    def assert_verified(self) -> None:
        "Raise if the verifier must reject the transaction."

        output_commitments = [out.commitment for out in self.outputs]
        if not verify_balance(self.tx_input.commitment, output_commitments, self.grp):
            err_msg = "unbalanced transaction: "
            err_msg += "input commitment is not the sum of the output ones"
            raise CTlibRuntimeError(err_msg)

        for committed in [self.tx_input] + self.outputs:
            range_proof.assert_as_valid(committed.commitment, committed.proof)

    def verify(self) -> bool:
        "Return True if the transaction is accepted."

        # all kind of Exceptions are catched because
        # verify must always return a bool
        try:
            self.assert_valid()
            self.assert_verified()
        except Exception as e:  # pylint: disable=broad-except
            _log.debug("transaction rejected: %s", e)
            return False

        return True

    @classmethod
    def create(
        cls: Type[_Transaction],
        tx_input: Opening,
        outputs: Sequence[Opening],
        group: str = "toy61",
        check_validity: bool = True,
    ) -> _Transaction:
        """Return the transaction for the secret (value, blinding) openings.

        Commitments and range proofs are computed honestly,
        but the openings are not checked to balance nor to be in range:
        the verifier is the one expected to reject a bad transaction.
        """

        grp = group_from_name(group)
        return cls(
            CommittedValue.from_opening(tx_input, grp),
            [CommittedValue.from_opening(opening, grp) for opening in outputs],
            group,
            check_validity,
        )
