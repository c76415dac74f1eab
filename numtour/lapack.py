# Copyright 2026 The numtour contributors
#
# This file is part of numtour.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""LAPACK general linear system solver.

`gesv` exposes the LAPACK driver routine of the same name, including its
integer status code ``info``, without raising on singular systems. `solve`
is the checked variant that turns a nonzero status into an exception.

LAPACK stores matrices column by column. `column_major` builds a matrix
from values listed in that order, which is how coefficient tables are
usually written down for a LAPACK call.
"""

from __future__ import absolute_import, division, print_function

import logging
from collections import namedtuple

import numpy as np
import scipy.linalg

from numtour.util.exceptions import LapackArgumentError, SingularMatrixError

__all__ = ('GesvResult', 'column_major', 'gesv', 'solve')


_LOGGER = logging.getLogger(__name__)


GesvResult = namedtuple('GesvResult', ['lu', 'piv', 'x', 'info'])
GesvResult.__doc__ = """Result of `gesv`.

Attributes
----------
lu : `numpy.ndarray`
    The factors ``L`` and ``U`` of ``P * A = L * U``; the unit diagonal
    of ``L`` is not stored.
piv : `numpy.ndarray`
    Pivot indices (0-based): row ``i`` was interchanged with row
    ``piv[i]``.
x : `numpy.ndarray`
    Solution, same shape as the right-hand side. Only meaningful if
    ``info == 0``.
info : int
    ``0``: success. ``< 0``: argument ``-info`` had an illegal value.
    ``> 0``: ``U[info - 1, info - 1]`` is exactly zero, the system is
    singular and no solution was computed.
"""


def column_major(values, n_rows, n_cols=None):
    """Return the matrix whose entries are ``values`` in column order.

    Parameters
    ----------
    values : `array-like`
        Flat sequence of matrix entries, first column first.
    n_rows : positive int
        Number of rows of the matrix.
    n_cols : positive int, optional
        Number of columns. Default: ``len(values) // n_rows``.

    Examples
    --------
    >>> column_major([1, 2, 3, 4, 5, 6], 2).tolist()
    [[1, 3, 5], [2, 4, 6]]
    """
    values = np.asarray(values).ravel()
    if n_rows <= 0:
        raise ValueError('`n_rows` must be positive, got {}'.format(n_rows))
    if n_cols is None:
        n_cols, remainder = divmod(values.size, n_rows)
        if remainder:
            raise ValueError('{} values cannot fill a matrix with {} rows'
                             ''.format(values.size, n_rows))
    if values.size != n_rows * n_cols:
        raise ValueError('expected {} values for a {}x{} matrix, got {}'
                         ''.format(n_rows * n_cols, n_rows, n_cols,
                                   values.size))
    return values.reshape((n_rows, n_cols), order='F')


def _validate_system(a, b, check_finite):
    """Return ``a`` and ``b`` as arrays after checking their shapes."""
    if check_finite:
        a = np.asarray_chkfinite(a)
        b = np.asarray_chkfinite(b)
    else:
        a = np.asarray(a)
        b = np.asarray(b)

    if a.ndim != 2 or a.shape[0] != a.shape[1]:
        raise ValueError('`a` must be a square matrix, got array with '
                         'shape {}'.format(a.shape))
    if b.ndim not in (1, 2):
        raise ValueError('`b` must be one- or two-dimensional, got array '
                         'with shape {}'.format(b.shape))
    if b.shape[0] != a.shape[0]:
        raise ValueError('`b` has {} rows, expected {} to match `a`'
                         ''.format(b.shape[0], a.shape[0]))
    return a, b


def gesv(a, b, check_finite=True):
    """Solve ``a @ x = b`` by LU decomposition with partial pivoting.

    The inputs are not modified. A singular system does not raise, it is
    reported through the ``info`` field of the result instead.

    Parameters
    ----------
    a : `array-like`
        Square coefficient matrix of shape ``(n, n)``.
    b : `array-like`
        Right-hand side(s) of shape ``(n,)`` or ``(n, nrhs)``.
    check_finite : bool, optional
        If ``True``, raise ``ValueError`` for input containing ``inf`` or
        ``nan``.

    Returns
    -------
    result : `GesvResult`
        Named tuple ``(lu, piv, x, info)``.

    Examples
    --------
    >>> a = column_major([7, 3, 5, 5, -5, 3, -3, 2, -7], 3)
    >>> res = gesv(a, [16, -8, 0])
    >>> res.info
    0
    >>> np.round(res.x, 4).tolist()
    [1.0, 3.0, 2.0]

    A singular system is reported, not raised:

    >>> gesv([[1.0, 2.0], [2.0, 4.0]], [1.0, 1.0]).info
    2
    """
    a, b = _validate_system(a, b, check_finite)
    n = a.shape[0]

    b_was_1d = (b.ndim == 1)
    b2 = b.reshape((n, 1)) if b_was_1d else b

    if n == 0:
        dtype = np.result_type(a, b, np.float32)
        return GesvResult(lu=np.empty((0, 0), dtype=dtype),
                          piv=np.empty(0, dtype='int32'),
                          x=np.empty(b.shape, dtype=dtype),
                          info=0)

    lapack_gesv, = scipy.linalg.lapack.get_lapack_funcs(('gesv',), (a, b2))
    lu, piv, x, info = lapack_gesv(a, b2, overwrite_a=False,
                                   overwrite_b=False)
    info = int(info)

    if info == 0:
        _LOGGER.debug('%sgesv: solved %dx%d system with %d right-hand '
                      'side(s)', lapack_gesv.typecode, n, n, b2.shape[1])
    else:
        _LOGGER.debug('%sgesv: status info=%d', lapack_gesv.typecode, info)

    if b_was_1d:
        x = x.reshape(n)
    return GesvResult(lu=lu, piv=piv, x=x, info=info)


def solve(a, b, check_finite=True):
    """Return the solution ``x`` of ``a @ x = b``.

    This is `gesv` with the status checked.

    Raises
    ------
    SingularMatrixError
        If ``a`` is exactly singular (``info > 0``).
    LapackArgumentError
        If LAPACK rejected an argument (``info < 0``).

    Examples
    --------
    >>> np.round(solve([[2.0, 0.0], [0.0, 4.0]], [2.0, 2.0]), 4).tolist()
    [1.0, 0.5]
    """
    result = gesv(a, b, check_finite=check_finite)
    if result.info > 0:
        raise SingularMatrixError(result.info)
    elif result.info < 0:
        raise LapackArgumentError(result.info)
    return result.x


if __name__ == '__main__':
    from numtour.util.testutils import run_doctests
    run_doctests()
