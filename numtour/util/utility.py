# Copyright 2026 The numtour contributors
#
# This file is part of numtour.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Utilities mainly for internal use."""

from __future__ import absolute_import, division, print_function

from contextlib import contextmanager
from functools import lru_cache

import numpy as np

__all__ = (
    'npy_printoptions',
    'array_str',
    'dtype_repr',
    'is_numeric_dtype',
    'is_int_dtype',
    'is_real_floating_dtype',
    'is_complex_floating_dtype',
    'is_string',
    'writable_array',
)


REPR_PRECISION = 4  # For printing scalars and array entries


@contextmanager
def npy_printoptions(**extra_opts):
    """Context manager to temporarily set NumPy print options.

    See Also
    --------
    numpy.get_printoptions
    numpy.set_printoptions
    """
    orig_opts = np.get_printoptions()

    try:
        new_opts = orig_opts.copy()
        new_opts.update(extra_opts)
        np.set_printoptions(**new_opts)
        yield

    finally:
        np.set_printoptions(**orig_opts)


def array_str(a, nprint=6):
    """Stringification of an array.

    Parameters
    ----------
    a : `array-like`
        The array to print.
    nprint : int, optional
        Maximum number of elements to print per axis in ``a``. For larger
        arrays, a summary is printed, with ``nprint // 2`` elements on
        each side and ``...`` in the middle (per axis).

    Examples
    --------
    >>> print(array_str(np.arange(4)))
    [0, 1, 2, 3]
    >>> print(array_str(np.arange(10)))
    [0, 1, 2, ..., 7, 8, 9]
    """
    a = np.asarray(a)

    max_shape = tuple(n if n < nprint else nprint for n in a.shape)
    with npy_printoptions(threshold=int(np.prod(max_shape)),
                          edgeitems=nprint // 2,
                          precision=REPR_PRECISION,
                          suppress=True):
        a_str = np.array2string(a, separator=', ')
    return a_str


def dtype_repr(dtype):
    """Stringify ``dtype`` for ``repr`` with default for int and float."""
    dtype = np.dtype(dtype)
    if dtype == np.dtype(int):
        return "'int'"
    elif dtype == np.dtype(float):
        return "'float'"
    elif dtype == np.dtype(complex):
        return "'complex'"
    else:
        return "'{}'".format(dtype)


@lru_cache()
def is_numeric_dtype(dtype):
    """Return ``True`` if ``dtype`` is a numeric type."""
    return np.issubdtype(np.dtype(dtype), np.number)


@lru_cache()
def is_int_dtype(dtype):
    """Return ``True`` if ``dtype`` is an integer type."""
    return np.issubdtype(np.dtype(dtype), np.integer)


@lru_cache()
def is_real_floating_dtype(dtype):
    """Return ``True`` if ``dtype`` is a real floating point type."""
    return np.issubdtype(np.dtype(dtype), np.floating)


@lru_cache()
def is_complex_floating_dtype(dtype):
    """Return ``True`` if ``dtype`` is a complex floating point type."""
    return np.issubdtype(np.dtype(dtype), np.complexfloating)


def is_string(obj):
    """Return ``True`` if ``obj`` behaves like a string, ``False`` else."""
    try:
        obj + ''
    except TypeError:
        return False
    else:
        return True


@contextmanager
def writable_array(obj, **kwargs):
    """Context manager that casts obj to a `numpy.array` and saves changes.

    Parameters
    ----------
    obj : `array-like`
        Object that should be made available as writable array.
        It must be valid as input to `numpy.asarray` and needs to
        support the syntax ``obj[:] = arr``.
    kwargs :
        Keyword arguments that should be passed to `numpy.asarray`.

    Examples
    --------
    Convert list to array and use with numpy:

    >>> lst = [1, 2, 3]
    >>> with writable_array(lst) as arr:
    ...    arr *= 2
    >>> lst
    [2, 4, 6]

    Arrays are used directly, so changes are visible immediately:

    >>> a = np.zeros(2)
    >>> with writable_array(a) as arr:
    ...     print(arr is a)
    True
    """
    arr = np.asarray(obj, **kwargs)
    if arr is obj:
        yield arr
        return

    try:
        yield arr
    finally:
        obj[:] = arr.tolist()
