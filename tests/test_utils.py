#!/usr/bin/env python3

# Copyright (C) 2026 The ctlib developers
#
# This file is part of ctlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ctlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ctlib.utils` module."

import pytest

from ctlib.exceptions import CTlibTypeError, CTlibValueError
from ctlib.utils import hex_string, int_from_integer, int_repr


def test_int_from_integer() -> None:

    i = 2**61 - 1
    for int_ in (
        i,
        str(i),
        f" {i} ",
        hex(i),
        hex(i).upper(),
        "0x1FFFFFFFFFFFFFFF",
        i.to_bytes(8, byteorder="big"),
    ):
        assert i == int_from_integer(int_)

    assert -3735928559 == int_from_integer("-3735928559")
    assert -3735928559 == int_from_integer("-0xdeadbeef")
    assert 0 == int_from_integer(b"")

    with pytest.raises(CTlibValueError, match="invalid integer string: "):
        int_from_integer("deadbeef")
    with pytest.raises(CTlibTypeError, match="not an integer: "):
        int_from_integer(1.5)  # type: ignore
    with pytest.raises(CTlibTypeError, match="not an integer: "):
        int_from_integer(True)


def test_hex_string() -> None:

    assert hex_string(0xFF) == "FF"
    assert hex_string(0x123) == "0123"
    assert hex_string(2**61 - 1) == "1FFFFFFF FFFFFFFF"
    assert hex_string("0xdeadbeef") == "DEADBEEF"
    assert hex_string(2**127 - 1) == "7FFFFFFF FFFFFFFF FFFFFFFF FFFFFFFF"

    with pytest.raises(CTlibValueError, match="negative integer: "):
        hex_string(-1)


def test_int_repr() -> None:

    assert int_repr(5) == "5"
    assert int_repr(-5) == "-5"
    assert int_repr(0xFFFFFFFF) == "4294967295"
    assert int_repr(2**61 - 1) == "'1FFFFFFF FFFFFFFF'"
