# Copyright 2026 The numtour contributors
#
# This file is part of numtour.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Numerical helpers for counted and strided buffers."""

from __future__ import absolute_import, division, print_function

from numbers import Integral

import numpy as np

from numtour.util.exceptions import BufferSizeError

__all__ = (
    'as_vector',
    'check_stride',
    'max_count',
    'resolve_count',
    'strided_slice',
)


def as_vector(x, name='x'):
    """Return ``x`` as a one-dimensional `numpy.ndarray`.

    Arrays are returned as-is (no copy). Other `array-like` input is
    converted with `numpy.asarray`.

    Raises
    ------
    ValueError
        If the result is not one-dimensional.
    """
    arr = np.asarray(x)
    if arr.ndim != 1:
        raise ValueError('`{}` must be one-dimensional, got array with '
                         'shape {}'.format(name, arr.shape))
    return arr


def check_stride(inc, name='inc'):
    """Return ``inc`` as `int` after checking that it is a positive stride."""
    if not isinstance(inc, Integral) or isinstance(inc, bool):
        raise TypeError('`{}` must be an integer, got {!r}'.format(name, inc))
    if inc <= 0:
        raise ValueError('`{}` must be positive, got {}'.format(name, inc))
    return int(inc)


def max_count(size, inc=1):
    """Return the largest count that fits into ``size`` elements.

    Examples
    --------
    >>> max_count(5)
    5
    >>> max_count(5, inc=2)
    3
    >>> max_count(0, inc=3)
    0
    """
    if size == 0:
        return 0
    return (size - 1) // inc + 1


def resolve_count(count, *buffers):
    """Return the number of elements to process.

    Parameters
    ----------
    count : int or None
        Requested count. ``None`` means the largest count that all
        buffers allow.
    buffer1, ..., bufferN : tuple
        Pairs ``(name, size, inc)`` describing the buffers taking part
        in the computation.

    Returns
    -------
    count : int

    Raises
    ------
    ValueError
        If ``count`` is negative.
    BufferSizeError
        If one of the buffers is too short for ``count``.

    Examples
    --------
    >>> resolve_count(None, ('x', 3, 1), ('y', 5, 1))
    3
    >>> resolve_count(2, ('x', 3, 1), ('y', 5, 2))
    2
    """
    limits = [max_count(size, inc) for _, size, inc in buffers]

    if count is None:
        return min(limits) if limits else 0

    if not isinstance(count, Integral) or isinstance(count, bool):
        raise TypeError('`count` must be an integer, got {!r}'.format(count))
    if count < 0:
        raise ValueError('`count` must be nonnegative, got {}'.format(count))

    for (name, size, inc), limit in zip(buffers, limits):
        if count > limit:
            raise BufferSizeError(
                '`{}` has {} elements, but count {} with stride {} needs '
                'at least {}'.format(name, size, count, inc,
                                     (count - 1) * inc + 1))
    return int(count)


def strided_slice(count, inc=1):
    """Return the `slice` selecting ``count`` elements with stride ``inc``.

    Examples
    --------
    >>> np.arange(10)[strided_slice(3, 2)].tolist()
    [0, 2, 4]
    >>> np.arange(10)[strided_slice(0)].tolist()
    []
    """
    if count == 0:
        return slice(0, 0)
    return slice(0, (count - 1) * inc + 1, inc)
