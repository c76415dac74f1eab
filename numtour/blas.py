# Copyright 2026 The numtour contributors
#
# This file is part of numtour.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Level-1 BLAS routines with the counted, strided C calling convention.

Each routine works on one-dimensional buffers. Like ``cblas_saxpy`` and
friends, it takes an element count ``n`` and strides ``incx``, ``incy``:
element ``i`` of a buffer is ``x[i * incx]``. Omitting ``n`` processes as
many elements as all buffers allow.

For single and double precision float or complex data in contiguous
buffers, the routines call the BLAS library that SciPy links against.
Small problems and all other data types are computed with NumPy.
"""

from __future__ import absolute_import, division, print_function

import logging

import numpy as np
import scipy.linalg

from numtour.util.numerics import (
    as_vector, check_stride, resolve_count, strided_slice)
from numtour.util.utility import is_complex_floating_dtype, writable_array

__all__ = ('axpy', 'dot', 'scal', 'nrm2', 'lincomb')


_LOGGER = logging.getLogger(__name__)

_BLAS_DTYPES = (np.dtype('float32'), np.dtype('float64'),
                np.dtype('complex64'), np.dtype('complex128'))

# Below this size, plain NumPy expressions are faster than BLAS calls
THRESHOLD_SMALL = 100
# Below this size, `lincomb` avoids the BLAS copy overhead
THRESHOLD_MEDIUM = 50000


def _blas_is_applicable(*args):
    """Whether BLAS routines can be applied or not.

    BLAS routines are available for single and double precision
    float or complex data only. If the arrays are non-contiguous,
    BLAS methods are usually slower, and array-writing routines do
    not work at all. Hence, only contiguous arrays are allowed.

    Parameters
    ----------
    x1,...,xN : `numpy.ndarray`
        The arrays to be tested for BLAS conformity.

    Returns
    -------
    blas_is_applicable : bool
        ``True`` if all mentioned requirements are met, ``False`` otherwise.
    """
    if any(x.dtype != args[0].dtype for x in args[1:]):
        return False
    elif any(x.dtype not in _BLAS_DTYPES for x in args):
        return False
    elif not all(x.flags.c_contiguous for x in args):
        return False
    elif any(x.size > np.iinfo('int32').max for x in args):
        # BLAS counts are 32 bit integers
        return False
    else:
        return True


def _check_scalar(a, arr, name='a'):
    """Raise if scalar ``a`` cannot scale elements of ``arr`` in place."""
    if np.iscomplexobj(a) and not is_complex_floating_dtype(arr.dtype):
        raise TypeError('cannot scale real array of dtype {} by complex '
                        '`{}` {!r}'.format(arr.dtype, name, a))


def axpy(a, x, y, n=None, incx=1, incy=1):
    """Compute ``y <- a * x + y`` in place.

    Parameters
    ----------
    a : scalar
        Scale factor for ``x``.
    x : `array-like`
        One-dimensional input buffer.
    y : `numpy.ndarray` or mutable sequence
        One-dimensional accumulator. It is overwritten with the result.
    n : int, optional
        Number of elements to process. Default: as many as ``x`` and ``y``
        allow.
    incx, incy : positive int, optional
        Strides in ``x`` and ``y``.

    Returns
    -------
    y : same type as the ``y`` argument
        The updated accumulator (the same object as the input).

    Examples
    --------
    >>> x = np.array([1, 2, 3], dtype='float32')
    >>> y = np.array([3, 4, 5], dtype='float32')
    >>> axpy(10, x, y).tolist()
    [13.0, 24.0, 35.0]

    The accumulator is modified, as in the C interface:

    >>> y.tolist()
    [13.0, 24.0, 35.0]

    Only every second element of ``y``:

    >>> y = np.zeros(5)
    >>> axpy(2, [1, 1, 1], y, incy=2).tolist()
    [2.0, 0.0, 2.0, 0.0, 2.0]
    """
    x = as_vector(x, 'x')
    incx = check_stride(incx, 'incx')
    incy = check_stride(incy, 'incy')

    if isinstance(y, np.ndarray):
        kwargs = {}
    else:
        # Sequences take the type of the result, e.g. ints become floats
        kwargs = {'dtype': np.result_type(np.asarray(y), x, a)}

    with writable_array(y, **kwargs) as y_arr:
        if y_arr.ndim != 1:
            raise ValueError('`y` must be one-dimensional, got array with '
                             'shape {}'.format(y_arr.shape))
        n = resolve_count(n, ('x', x.size, incx), ('y', y_arr.size, incy))
        if n == 0 or a == 0:
            return y
        _check_scalar(a, y_arr)
        result_dtype = np.result_type(y_arr, x, a)
        if not np.can_cast(result_dtype, y_arr.dtype, casting='same_kind'):
            raise TypeError('`y` of dtype {} cannot hold results of dtype {}'
                            ''.format(y_arr.dtype, result_dtype))

        if n >= THRESHOLD_SMALL and _blas_is_applicable(x, y_arr):
            _LOGGER.debug('axpy: BLAS with n=%d, dtype=%s', n, x.dtype)
            blas_axpy = scipy.linalg.blas.get_blas_funcs(
                'axpy', arrays=(x, y_arr))
            result = blas_axpy(x, y_arr, n=n, a=a, incx=incx, incy=incy)
            if result is not y_arr:
                y_arr[...] = result
        else:
            _LOGGER.debug('axpy: NumPy with n=%d, dtype=%s', n, y_arr.dtype)
            y_arr[strided_slice(n, incy)] += a * x[strided_slice(n, incx)]

    return y


def dot(x, y, n=None, incx=1, incy=1):
    """Return the dot product ``sum(x[i] * y[i])``.

    Complex input is not conjugated.

    Parameters
    ----------
    x, y : `array-like`
        One-dimensional input buffers.
    n : int, optional
        Number of elements to process. Default: as many as ``x`` and ``y``
        allow.
    incx, incy : positive int, optional
        Strides in ``x`` and ``y``.

    Returns
    -------
    dot : scalar

    Examples
    --------
    >>> float(dot([1, 2, 3], [3, 4, 5]))
    26.0
    >>> float(dot([1, 2, 3, 4], [1, 1], incx=2))
    4.0
    """
    x = as_vector(x, 'x')
    y = as_vector(y, 'y')
    incx = check_stride(incx, 'incx')
    incy = check_stride(incy, 'incy')
    n = resolve_count(n, ('x', x.size, incx), ('y', y.size, incy))

    if n == 0:
        return np.result_type(x, y).type(0)

    if n >= THRESHOLD_SMALL and _blas_is_applicable(x, y):
        _LOGGER.debug('dot: BLAS with n=%d, dtype=%s', n, x.dtype)
        name = 'dotu' if is_complex_floating_dtype(x.dtype) else 'dot'
        blas_dot = scipy.linalg.blas.get_blas_funcs(name, arrays=(x, y))
        return blas_dot(x, y, n=n, incx=incx, incy=incy)
    else:
        _LOGGER.debug('dot: NumPy with n=%d, dtype=%s', n, x.dtype)
        return np.dot(x[strided_slice(n, incx)], y[strided_slice(n, incy)])


def scal(a, x, n=None, incx=1):
    """Compute ``x <- a * x`` in place.

    Examples
    --------
    >>> x = np.array([1.0, 2.0, 3.0])
    >>> scal(0.5, x).tolist()
    [0.5, 1.0, 1.5]
    """
    incx = check_stride(incx, 'incx')

    with writable_array(x) as x_arr:
        if x_arr.ndim != 1:
            raise ValueError('`x` must be one-dimensional, got array with '
                             'shape {}'.format(x_arr.shape))
        n = resolve_count(n, ('x', x_arr.size, incx))
        if n == 0:
            return x
        _check_scalar(a, x_arr)

        if n >= THRESHOLD_SMALL and _blas_is_applicable(x_arr):
            _LOGGER.debug('scal: BLAS with n=%d, dtype=%s', n, x_arr.dtype)
            blas_scal = scipy.linalg.blas.get_blas_funcs(
                'scal', arrays=(x_arr,))
            result = blas_scal(a, x_arr, n=n, incx=incx)
            if result is not x_arr:
                x_arr[...] = result
        else:
            _LOGGER.debug('scal: NumPy with n=%d, dtype=%s', n, x_arr.dtype)
            x_arr[strided_slice(n, incx)] *= a

    return x


def nrm2(x, n=None, incx=1):
    """Return the Euclidean norm ``sqrt(sum(|x[i]|^2))``.

    Examples
    --------
    >>> float(nrm2([3, 4]))
    5.0
    """
    x = as_vector(x, 'x')
    incx = check_stride(incx, 'incx')
    n = resolve_count(n, ('x', x.size, incx))

    if n == 0:
        return 0.0

    if n >= THRESHOLD_SMALL and _blas_is_applicable(x):
        _LOGGER.debug('nrm2: BLAS with n=%d, dtype=%s', n, x.dtype)
        blas_nrm2 = scipy.linalg.blas.get_blas_funcs('nrm2', arrays=(x,))
        return blas_nrm2(x, n=n, incx=incx)
    else:
        _LOGGER.debug('nrm2: NumPy with n=%d, dtype=%s', n, x.dtype)
        return np.linalg.norm(x[strided_slice(n, incx)])


def lincomb(a, x1, b, x2, out):
    """Compute ``out[:] = a * x1 + b * x2`` in place.

    Any of ``x1``, ``x2`` and ``out`` may be the same array.

    Parameters
    ----------
    a, b : scalar
        Coefficients of the linear combination.
    x1, x2 : `numpy.ndarray`
        One-dimensional input arrays of equal size.
    out : `numpy.ndarray`
        One-dimensional array of the same size as ``x1`` and ``x2``.

    Returns
    -------
    out : `numpy.ndarray`
        The ``out`` argument.

    Examples
    --------
    >>> x = np.array([1.0, 2.0, 3.0])
    >>> y = np.array([3.0, 4.0, 5.0])
    >>> out = np.empty(3)
    >>> lincomb(10, x, 1, y, out).tolist()
    [13.0, 24.0, 35.0]
    >>> lincomb(2, out, -1, out, out).tolist()
    [13.0, 24.0, 35.0]
    """
    for name, arr in (('x1', x1), ('x2', x2), ('out', out)):
        if not isinstance(arr, np.ndarray):
            raise TypeError('`{}` {!r} not a `numpy.ndarray` instance'
                            ''.format(name, arr))
        if arr.ndim != 1:
            raise ValueError('`{}` must be one-dimensional, got array with '
                             'shape {}'.format(name, arr.shape))
    if not x1.size == x2.size == out.size:
        raise ValueError('sizes of `x1`, `x2` and `out` differ: {}, {}, {}'
                         ''.format(x1.size, x2.size, out.size))
    _check_scalar(a, out, 'a')
    _check_scalar(b, out, 'b')

    _lincomb_impl(a, x1, b, x2, out)
    return out


def _lincomb_impl(a, x1, b, x2, out):
    """Optimized implementation of ``out[:] = a * x1 + b * x2``."""
    size = int(x1.size)

    if size < THRESHOLD_SMALL:
        # Faster for small arrays
        out[:] = a * x1 + b * x2
        return

    elif (size < THRESHOLD_MEDIUM or
          not _blas_is_applicable(x1, x2, out)):

        def axpy(x, y, n, a):
            y += a * x
            return y

        def scal(a, x, n):
            x *= a
            return x

        def copy(x, y, n):
            y[...] = x
            return y

    else:
        axpy, scal, copy = scipy.linalg.blas.get_blas_funcs(
            ['axpy', 'scal', 'copy'], arrays=(x1, x2, out))

    if x1 is x2 and b != 0:
        # x1 is aligned with x2 -> out = (a+b)*x1
        _lincomb_impl(a + b, x1, 0, x1, out)
    elif out is x1 and out is x2:
        # All the vectors are aligned -> out = (a+b)*out
        if (a + b) != 0:
            scal(a + b, out, size)
        else:
            out[:] = 0
    elif out is x1:
        # out is aligned with x1 -> out = a*out + b*x2
        if a != 1:
            scal(a, out, size)
        if b != 0:
            axpy(x2, out, size, b)
    elif out is x2:
        # out is aligned with x2 -> out = a*x1 + b*out
        if b != 1:
            scal(b, out, size)
        if a != 0:
            axpy(x1, out, size, a)
    else:
        # x1, x2 and out are pairwise distinct
        if b == 0:
            if a == 0:  # Zero assignment -> out = 0
                out[:] = 0
            else:  # Scaled copy -> out = a*x1
                copy(x1, out, size)
                if a != 1:
                    scal(a, out, size)

        else:  # b != 0
            if a == 0:  # Scaled copy -> out = b*x2
                copy(x2, out, size)
                if b != 1:
                    scal(b, out, size)

            elif a == 1:  # No scaling in x1 -> out = x1 + b*x2
                copy(x1, out, size)
                axpy(x2, out, size, b)
            else:  # Generic case -> out = a*x1 + b*x2
                copy(x2, out, size)
                if b != 1:
                    scal(b, out, size)
                axpy(x1, out, size, a)


if __name__ == '__main__':
    from numtour.util.testutils import run_doctests
    run_doctests()
