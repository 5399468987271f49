#!/usr/bin/env python3

# Copyright (C) 2026 The ctlib developers
#
# This file is part of ctlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ctlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Integer conversion and display functions.

Scalars are plain python ints: they are displayed and serialized
as decimal text, while large public parameters are more readable
as hex-strings.
"""

from ctlib.alias import Integer
from ctlib.exceptions import CTlibTypeError, CTlibValueError

HEX_THRESHOLD = 0xFFFFFFFF


def int_from_integer(i: Integer) -> int:
    """Return an int from many possible integer representations.

    Allowed integer representations are:

    * 3735928559
    * -3735928559
    * "3735928559"
    * "-3735928559"
    * "0xdeadbeef"
    * "-0xdeadbeef"
    * b'\xde\xad\xbe\xef'

    Strings without the 0x prefix are decimal text.
    """

    # bool is an int subclass, but it is not an integer representation
    if isinstance(i, bool):
        raise CTlibTypeError(f"not an integer: {i!r}")

    if isinstance(i, int):
        return i

    if isinstance(i, str):
        i = i.strip().lower()
        try:
            if i.startswith("0x") or i.startswith("-0x"):
                return int(i, 16)
            return int(i, 10)
        except ValueError as e:
            raise CTlibValueError(f"invalid integer string: '{i}'") from e

    if isinstance(i, bytes):
        return int.from_bytes(i, byteorder="big", signed=False)

    raise CTlibTypeError(f"not an integer: {i!r}")


def hex_string(i: Integer) -> str:
    """Return a hex-string from many positive integer representations.

    Negative integers are not allowed.

    The resulting hex-string has an even number of hex-digits and
    includes a space every four bytes (i.e. every eight hex-digits).
    """

    int_ = int_from_integer(i)
    if int_ < 0:
        raise CTlibValueError(f"negative integer: {int_}")
    a_str = f"{int_:X}"
    if len(a_str) % 2 != 0:
        a_str = "0" + a_str

    chunks = [a_str[max(0, j - 8) : j] for j in range(len(a_str), 0, -8)]
    return " ".join(reversed(chunks))


def int_repr(i: int) -> str:
    "Return a short representation of i for messages: hex if large."

    return f"'{hex_string(i)}'" if i > HEX_THRESHOLD else f"{i}"
