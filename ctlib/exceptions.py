#!/usr/bin/env python3

# Copyright (C) 2026 The ctlib developers
#
# This file is part of ctlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ctlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

These are only meant to discriminate between Exceptions being raised
by ctlib from those raised by other codebase.

Note that a failed balance or range-proof verification is not an error:
the verify functions return False.
Only the assert_as_valid variants raise.
"""


class CTlibValueError(ValueError):
    pass


class CTlibTypeError(TypeError):
    pass


class CTlibRuntimeError(RuntimeError):
    pass
