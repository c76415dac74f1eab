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

from numtour import lapack
from numtour.util.exceptions import SingularMatrixError
from numtour.util.testutils import all_almost_equal, all_equal, dtype_tol

# --- column_major --- #


def test_column_major():
    a = lapack.column_major([7, 3, 5, 5, -5, 3, -3, 2, -7], 3)
    assert all_equal(a, [[7, 5, -3],
                         [3, -5, 2],
                         [5, 3, -7]])

    a = lapack.column_major(range(6), 3, 2)
    assert a.shape == (3, 2)
    assert all_equal(a[:, 1], [3, 4, 5])


def test_column_major_raise():
    with pytest.raises(ValueError):
        lapack.column_major(range(5), 2)

    with pytest.raises(ValueError):
        lapack.column_major(range(6), 2, 2)

    with pytest.raises(ValueError):
        lapack.column_major(range(6), 0)


# --- gesv --- #


def test_gesv_worked_example(numtour_real_floating_dtype):
    """7x + 5y - 3z = 16, 3x - 5y + 2z = -8, 5x + 3y - 7z = 0."""
    dtype = numtour_real_floating_dtype
    a = lapack.column_major([7, 3, 5, 5, -5, 3, -3, 2, -7], 3).astype(dtype)
    b = np.array([16, -8, 0], dtype=dtype)
    a_orig, b_orig = a.copy(), b.copy()

    result = lapack.gesv(a, b)
    assert result.info == 0
    assert result.x.shape == (3,)
    assert result.x.dtype == dtype
    assert np.allclose(result.x, [1, 3, 2], atol=dtype_tol(dtype))

    # Inputs are left untouched
    assert all_equal(a, a_orig)
    assert all_equal(b, b_orig)


def test_gesv_factors():
    a = np.array([[1.0, 2.0], [3.0, 4.0]])
    result = lapack.gesv(a, [1.0, 1.0])

    # Rebuild P * A = L * U from the factors
    n = a.shape[0]
    lower = np.tril(result.lu, -1) + np.eye(n)
    upper = np.triu(result.lu)
    permuted = a.copy()
    for i, p in enumerate(result.piv):
        permuted[[i, p]] = permuted[[p, i]]
    assert all_almost_equal(lower.dot(upper), permuted)


def test_gesv_multiple_rhs():
    a = np.array([[4.0, 1.0], [2.0, 3.0]])
    b = np.array([[1.0, 0.0], [0.0, 1.0]])
    result = lapack.gesv(a, b)
    assert result.info == 0
    assert all_almost_equal(result.x, np.linalg.inv(a))


def test_gesv_singular():
    result = lapack.gesv([[1.0, 2.0], [2.0, 4.0]], [1.0, 1.0])
    assert result.info == 2


def test_gesv_integer_input():
    result = lapack.gesv([[2, 0], [0, 4]], [2, 2])
    assert result.info == 0
    assert all_almost_equal(result.x, [1.0, 0.5])


def test_gesv_empty():
    result = lapack.gesv(np.zeros((0, 0)), np.zeros(0))
    assert result.info == 0
    assert result.x.shape == (0,)


def test_gesv_raise():
    with pytest.raises(ValueError):
        lapack.gesv(np.ones((2, 3)), np.ones(2))

    with pytest.raises(ValueError):
        lapack.gesv(np.eye(3), np.ones(2))

    with pytest.raises(ValueError):
        lapack.gesv(np.eye(2), np.ones((2, 2, 1)))

    with pytest.raises(ValueError):
        lapack.gesv(np.eye(2), [1.0, np.nan])

    # Without the check, non-finite input is passed on
    result = lapack.gesv(np.eye(2), [1.0, np.inf], check_finite=False)
    assert result.info == 0


# --- solve --- #


def test_solve():
    a = np.array([[3.0, 1.0], [1.0, 2.0]])
    b = np.array([9.0, 8.0])
    x = lapack.solve(a, b)
    assert all_almost_equal(a.dot(x), b)


def test_solve_singular():
    with pytest.raises(SingularMatrixError) as excinfo:
        lapack.solve([[1.0, 2.0], [2.0, 4.0]], [1.0, 1.0])
    assert excinfo.value.info == 2
    assert isinstance(excinfo.value, np.linalg.LinAlgError)


if __name__ == '__main__':
    pytest.main([str(__file__.replace('\\', '/')), '-v'])
