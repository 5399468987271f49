#!/usr/bin/env python3

# Copyright (C) 2026 The ctlib developers
#
# This file is part of ctlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ctlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

from ctlib.balance import balancing_blinding, verify_balance
from ctlib.group import toy61 as grp
from ctlib.pedersen import commit
from ctlib.range_proof import create_proof, verify_proof
from ctlib.transaction import Transaction

print("\n*** Public parameters:")
print(grp)

print("\n1. Alice's input commitment")
value_input = 10
r_input = 12345
c_input = commit(value_input, r_input)
pi_input = create_proof(value_input, c_input)
print(f"  C_input = {c_input}")
print(f"  pi_input = {pi_input}")

print("2. Output commitments: 5 to Bob, 5 as change")
value_bob, r_bob = 5, 11111
value_change = 5
r_change = balancing_blinding(r_input, [r_bob])
c_bob = commit(value_bob, r_bob)
c_change = commit(value_change, r_change)
pi_bob = create_proof(value_bob, c_bob)
pi_change = create_proof(value_change, c_change)
print(f"  C_bob    = {c_bob}   pi_bob    = {pi_bob}")
print(f"  C_change = {c_change}   pi_change = {pi_change}")

print("3. Public verification (no values revealed)")
print(f"  C_input ?= C_bob + C_change: {verify_balance(c_input, [c_bob, c_change])}")
print(f"  verify(C_input, pi_input):   {verify_proof(c_input, pi_input)}")
print(f"  verify(C_bob, pi_bob):       {verify_proof(c_bob, pi_bob)}")
print(f"  verify(C_change, pi_change): {verify_proof(c_change, pi_change)}")

print("\n** Negative value attack: 10 = 15 + (-5)")
r_input = 99999
r_bob = 11111
tx = Transaction.create(
    (10, r_input), [(15, r_bob), (-5, balancing_blinding(r_input, [r_bob]))]
)
print(tx.to_json(indent=2))
c_outputs = [out.commitment for out in tx.outputs]
print(f"  C_input ?= C_bob + C_change: {verify_balance(tx.tx_input.commitment, c_outputs)}")
print(f"  verify(C_change, pi_change): {tx.outputs[1].verify_proof()}")
print(f"  transaction accepted:        {tx.verify()}")
