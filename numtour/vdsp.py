# Copyright 2026 The numtour contributors
#
# This file is part of numtour.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Vector distance routines.

`vdist` is the strided elementwise routine ``out[i] = sqrt(a[i]**2 +
b[i]**2)``: given the coordinates of points in two buffers, it computes
the distance of each point from the origin. The path functions work on a
sequence of points and measure the legs between consecutive points.
"""

from __future__ import absolute_import, division, print_function

import logging

import numpy as np
from scipy.spatial import distance as spatial_distance

from numtour.util.numerics import (
    as_vector, check_stride, resolve_count, strided_slice)

__all__ = ('vdist', 'sve', 'split_points', 'path_legs', 'path_length',
           'cumulative_distance', 'pairwise_distances')


_LOGGER = logging.getLogger(__name__)


def vdist(a, b, out=None, count=None, stride_a=1, stride_b=1,
          stride_out=1):
    """Return ``out[i] = sqrt(a[i]**2 + b[i]**2)``.

    Parameters
    ----------
    a, b : `array-like`
        One-dimensional input buffers, e.g. x and y coordinates.
    out : `numpy.ndarray`, optional
        Output buffer. If omitted, a new array of length ``count`` is
        returned.
    count : int, optional
        Number of elements to process. Default: as many as all buffers
        allow.
    stride_a, stride_b, stride_out : positive int, optional
        Strides in the respective buffers.

    Returns
    -------
    out : `numpy.ndarray`

    Examples
    --------
    >>> vdist([3, 0, 6], [4, 2, 8]).tolist()
    [5.0, 2.0, 10.0]
    """
    a = as_vector(a, 'a')
    b = as_vector(b, 'b')
    stride_a = check_stride(stride_a, 'stride_a')
    stride_b = check_stride(stride_b, 'stride_b')
    stride_out = check_stride(stride_out, 'stride_out')
    dtype = np.result_type(a, b, np.float32)

    buffers = [('a', a.size, stride_a), ('b', b.size, stride_b)]
    if out is not None:
        if not isinstance(out, np.ndarray):
            raise TypeError('`out` {!r} not a `numpy.ndarray` instance'
                            ''.format(out))
        if out.ndim != 1:
            raise ValueError('`out` must be one-dimensional, got array with '
                             'shape {}'.format(out.shape))
        if not np.can_cast(dtype, out.dtype, casting='same_kind'):
            raise TypeError('`out` {!r} cannot hold distances of dtype {}'
                            ''.format(out, dtype))
        buffers.append(('out', out.size, stride_out))
    count = resolve_count(count, *buffers)

    src_a = a[strided_slice(count, stride_a)]
    src_b = b[strided_slice(count, stride_b)]
    _LOGGER.debug('vdist: count=%d', count)

    if out is None:
        result = np.empty(count, dtype=dtype)
        np.hypot(src_a, src_b, out=result)
        return result
    else:
        np.hypot(src_a, src_b, out=out[strided_slice(count, stride_out)])
        return out


def sve(x, count=None, stride=1):
    """Return the sum of ``count`` elements of ``x``.

    Examples
    --------
    >>> float(sve([1, 2, 3, 4], stride=2))
    4.0
    """
    x = as_vector(x, 'x')
    stride = check_stride(stride, 'stride')
    count = resolve_count(count, ('x', x.size, stride))
    return np.sum(x[strided_slice(count, stride)], dtype=np.result_type(
        x, np.float32))


def split_points(points):
    """Return the coordinate arrays ``xs, ys`` of 2D points.

    Parameters
    ----------
    points : `array-like`
        Sequence of ``(x, y)`` pairs, shape ``(N, 2)``.

    Examples
    --------
    >>> xs, ys = split_points([(0, 1), (2, 3)])
    >>> xs.tolist(), ys.tolist()
    ([0.0, 2.0], [1.0, 3.0])
    """
    points = _as_points(points)
    if points.shape[1] != 2:
        raise ValueError('expected 2D points, got points of dimension {}'
                         ''.format(points.shape[1]))
    return points[:, 0].copy(), points[:, 1].copy()


def _as_points(points):
    """Return ``points`` as floating point array of shape ``(N, d)``."""
    points = np.asarray(points)
    if points.size == 0:
        return np.empty((0, 2), dtype=float)
    if points.ndim != 2:
        raise ValueError('`points` must have shape (N, d), got shape {}'
                         ''.format(points.shape))
    if not np.issubdtype(points.dtype, np.floating):
        points = points.astype(float)
    return points


def path_legs(points):
    """Return the length of each leg along a path through ``points``.

    Parameters
    ----------
    points : `array-like`
        Points visited in order, shape ``(N, d)``.

    Returns
    -------
    legs : `numpy.ndarray`
        Array of ``N - 1`` Euclidean distances between consecutive
        points; empty for fewer than two points.

    Examples
    --------
    >>> path_legs([(0, 0), (3, 4), (3, 10)]).tolist()
    [5.0, 6.0]
    """
    points = _as_points(points)
    if points.shape[0] < 2:
        return np.zeros(0, dtype=points.dtype)
    return np.linalg.norm(np.diff(points, axis=0), axis=1)


def path_length(points):
    """Return the total distance along a path through ``points``.

    Examples
    --------
    >>> path_length([(0, 10 * i) for i in range(9)])
    80.0
    """
    return float(np.sum(path_legs(points)))


def cumulative_distance(points):
    """Return the distance travelled when reaching each point.

    The first entry is 0 and the last one is `path_length`.

    Examples
    --------
    >>> cumulative_distance([(0, 0), (3, 4), (3, 10)]).tolist()
    [0.0, 5.0, 11.0]
    """
    legs = path_legs(points)
    n_points = _as_points(points).shape[0]
    result = np.zeros(n_points, dtype=legs.dtype)
    np.cumsum(legs, out=result[1:])
    return result


def pairwise_distances(points_a, points_b=None, metric='euclidean'):
    """Return the matrix of distances between two sets of points.

    Parameters
    ----------
    points_a : `array-like`
        Points of shape ``(M, d)``.
    points_b : `array-like`, optional
        Points of shape ``(N, d)``. Default: ``points_a``.
    metric : str, optional
        Any metric understood by `scipy.spatial.distance.cdist`.

    Returns
    -------
    distances : `numpy.ndarray`
        Array of shape ``(M, N)`` with entry ``[i, j]`` the distance
        between ``points_a[i]`` and ``points_b[j]``.

    Examples
    --------
    >>> pairwise_distances([(0, 0), (0, 10)]).tolist()
    [[0.0, 10.0], [10.0, 0.0]]
    """
    points_a = _as_points(points_a)
    points_b = points_a if points_b is None else _as_points(points_b)
    if points_a.shape[1] != points_b.shape[1]:
        raise ValueError('points have different dimensions {} and {}'
                         ''.format(points_a.shape[1], points_b.shape[1]))
    return spatial_distance.cdist(points_a, points_b, metric=metric)


if __name__ == '__main__':
    from numtour.util.testutils import run_doctests
    run_doctests()
