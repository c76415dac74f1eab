# Copyright 2026 The numtour contributors
#
# This file is part of numtour.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

from __future__ import division

import numpy as np
import pytest

from numtour.util.exceptions import BufferSizeError
from numtour.util.numerics import (
    as_vector, check_stride, max_count, resolve_count, strided_slice)
from numtour.util.testutils import all_equal, simple_fixture

# --- pytest fixtures --- #


size = simple_fixture('size', [0, 1, 2, 7, 10])
inc = simple_fixture('inc', [1, 2, 3])


# --- Tests --- #


def test_as_vector():
    arr = np.arange(3)
    assert as_vector(arr) is arr
    assert all_equal(as_vector([1, 2]), [1, 2])

    with pytest.raises(ValueError):
        as_vector(1.0)

    with pytest.raises(ValueError):
        as_vector(np.zeros((2, 2)), 'a')


def test_check_stride():
    assert check_stride(3) == 3
    assert check_stride(np.int64(2)) == 2
    assert type(check_stride(np.int64(2))) is int

    for bad in (0, -1):
        with pytest.raises(ValueError):
            check_stride(bad)

    for bad in (1.0, '1', True, None):
        with pytest.raises(TypeError):
            check_stride(bad)


def test_max_count(size, inc):
    # Same number of elements as a strided slice of the full buffer
    assert max_count(size, inc) == len(range(0, size, inc))


def test_strided_slice(size, inc):
    arr = np.arange(size * inc)
    assert all_equal(arr[strided_slice(size, inc)], np.arange(size) * inc)


def test_resolve_count():
    assert resolve_count(None, ('x', 3, 1), ('y', 5, 1)) == 3
    assert resolve_count(None, ('x', 5, 2), ('y', 5, 1)) == 3
    assert resolve_count(None) == 0
    assert resolve_count(3, ('x', 5, 2)) == 3
    assert resolve_count(0, ('x', 0, 1)) == 0


def test_resolve_count_raise():
    with pytest.raises(BufferSizeError):
        resolve_count(4, ('x', 3, 1))

    with pytest.raises(BufferSizeError) as excinfo:
        resolve_count(3, ('x', 5, 1), ('y', 4, 2))
    assert '`y`' in str(excinfo.value)

    with pytest.raises(ValueError):
        resolve_count(-1, ('x', 3, 1))

    with pytest.raises(TypeError):
        resolve_count(1.5, ('x', 3, 1))


if __name__ == '__main__':
    pytest.main([str(__file__.replace('\\', '/')), '-v'])
