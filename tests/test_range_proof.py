#!/usr/bin/env python3

# Copyright (C) 2026 The ctlib developers
#
# This file is part of ctlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ctlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.


"Tests for the `ctlib.range_proof` module."

import pytest

from ctlib import range_proof
from ctlib.exceptions import CTlibRuntimeError, CTlibTypeError, CTlibValueError
from ctlib.group import GROUPS
from ctlib.pedersen import commit
from ctlib.range_proof import assert_as_valid, create_proof, is_in_range, verify_proof


def test_is_in_range() -> None:

    assert is_in_range(0)
    assert is_in_range(5)
    assert is_in_range(2**64)
    assert not is_in_range(-1)
    assert not is_in_range(-(2**64))


def test_range_proof() -> None:

    C = commit(10, 12345)
    proof = create_proof(10, C)
    # 2*C + 1
    assert proof == 172891
    assert verify_proof(C, proof)

    C = commit(-5, 88888)
    proof = create_proof(-5, C)
    # 2*C + 0
    assert proof == 1244402
    assert not verify_proof(C, proof)

    assert create_proof(0, 0) == range_proof.VALID_BIT
    assert verify_proof(0, 1)


@pytest.mark.parametrize("grp_name", sorted(GROUPS))
def test_range_proof_binding(grp_name: str) -> None:

    grp = GROUPS[grp_name]
    for v in (-(2**40), -5, -1, 0, 1, 5, 2**40):
        for r in (0, 1, 11111, grp.p - 1):
            C = commit(v, r, grp)
            assert verify_proof(C, create_proof(v, C)) == (v >= 0)


def test_non_transferability() -> None:

    C1 = commit(5, 11111)
    C2 = commit(5, 1234)
    assert C1 != C2
    proof1 = create_proof(5, C1)
    assert verify_proof(C1, proof1)
    assert not verify_proof(C2, proof1)
    assert not verify_proof(C1 + 1, proof1)
    assert not verify_proof(C1 - 1, proof1)


def test_assert_as_valid() -> None:

    C = commit(5, 11111)
    assert_as_valid(C, create_proof(5, C))

    err_msg = "committed value out of range"
    with pytest.raises(CTlibRuntimeError, match=err_msg):
        assert_as_valid(C, create_proof(-5, C))

    err_msg = "proof not bound to commitment: "
    with pytest.raises(CTlibValueError, match=err_msg):
        assert_as_valid(C + 1, create_proof(5, C))
    with pytest.raises(CTlibValueError, match=err_msg):
        assert_as_valid(C, create_proof(5, C) + 2)
    with pytest.raises(CTlibValueError, match=err_msg):
        assert_as_valid(C, -1)

    with pytest.raises(CTlibTypeError, match="proof is not an int: "):
        assert_as_valid(C, str(create_proof(5, C)))  # type: ignore
    with pytest.raises(CTlibTypeError, match="commitment is not an int: "):
        assert_as_valid(None, 1)  # type: ignore
    with pytest.raises(CTlibTypeError, match="proof is not an int: "):
        assert_as_valid(0, True)

    # verify_proof always returns a bool
    assert not verify_proof(C, str(create_proof(5, C)))  # type: ignore
    assert not verify_proof(None, 1)  # type: ignore


def test_verify_proof_encoding() -> None:

    # verify_proof is exactly proof == 2*C + 1 over ints
    for C in (-3, -1, 0, 1, 86445, 2**61 - 2, 2**200):
        for proof in range(2 * C - 3, 2 * C + 5):
            assert verify_proof(C, proof) == (proof == 2 * C + 1)


def test_forgery() -> None:

    # the toy proof is not sound: knowing the encoding is enough
    # to forge a valid proof for a negative value commitment
    C = commit(-5, 88888)
    assert not verify_proof(C, create_proof(-5, C))
    forged = 2 * C + 1
    assert verify_proof(C, forged)
