# Copyright 2026 The numtour contributors
#
# This file is part of numtour.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""A guided tour through the numerical kernels, one worked example each.

Run it with ``python -m numtour``. Every section is independent: it sets
up its own buffers, calls the kernels, prints the intermediate results
and returns them in a dictionary.
"""

from __future__ import absolute_import, division, print_function

import logging
import sys
from collections import OrderedDict

import numpy as np

from numtour import blas, lapack, simd, vdsp, veclib
from numtour.util.utility import array_str

__all__ = ('SECTIONS', 'blas_section', 'lapack_section', 'simd_section',
           'veclib_section', 'vdsp_section', 'run_tour')


_LOGGER = logging.getLogger(__name__)


def _heading(title, stream):
    print('', file=stream)
    print(title, file=stream)
    print('-' * len(title), file=stream)


def _show(label, value, stream):
    if isinstance(value, np.ndarray):
        value = array_str(value)
    print('{}: {}'.format(label, value), file=stream)


def blas_section(stream=None):
    """``axpy`` and ``dot`` on 3-element single precision vectors."""
    stream = sys.stdout if stream is None else stream
    _heading('BLAS (Basic Linear Algebra Subroutines)', stream)

    x = np.array([1, 2, 3], dtype='float32')
    y = np.array([3, 4, 5], dtype='float32')
    print('x = {}, y = {}'.format(array_str(x), array_str(y)), file=stream)

    # y is overwritten with the result
    blas.axpy(10, x, y, n=3)
    _show('axpy: 10 * x + y', y, stream)
    axpy_result = y.copy()

    # Reset y since axpy has mutated it
    y = np.array([3, 4, 5], dtype='float32')
    dot_result = blas.dot(x, y, n=3)
    _show('dot: (1 * 3) + (2 * 4) + (3 * 5)', dot_result, stream)

    return {'axpy': axpy_result, 'dot': dot_result}


def lapack_section(stream=None):
    """Solve a system of 3 simultaneous equations with ``gesv``.

    The equations are::

        7x + 5y - 3z = 16
        3x - 5y + 2z = -8
        5x + 3y - 7z = 0
    """
    stream = sys.stdout if stream is None else stream
    _heading('LAPACK (Linear Algebra Package)', stream)

    # Coefficients column by column, as LAPACK stores them
    a = lapack.column_major([7, 3, 5,
                             5, -5, 3,
                             -3, 2, -7], n_rows=3).astype('float32')
    b = np.array([16, -8, 0], dtype='float32')

    result = lapack.gesv(a, b)
    _show('status (0 means success)', result.info, stream)
    _show('solution [x, y, z]', result.x, stream)

    return {'info': result.info, 'solution': result.x}


def simd_section(stream=None):
    """``10 * p + q`` with 3-lane double precision vectors."""
    stream = sys.stdout if stream is None else stream
    _heading('SIMD (Single Instruction, Multiple Data)', stream)

    p = simd.double3(1, 2, 3)
    q = simd.double3(3, 4, 5)
    result = 10 * p + q
    _show('10 * p + q', result, stream)

    return {'axpy': result}


def veclib_section(stream=None):
    """Elementwise absolute value, truncation, square root, reciprocal."""
    stream = sys.stdout if stream is None else stream
    _heading('Elementwise vector routines', stream)
    results = OrderedDict()

    count = 4
    a = np.array([-3, -2, -5, -10], dtype='float32')
    results['abs'] = veclib.vabs(a, out=np.zeros(count, dtype='float32'),
                                 count=count)
    _show('absolute values', results['abs'], stream)

    count = 3
    f = np.array([3.3796, 1.8036, -2.1205], dtype='float32')
    results['int'] = veclib.vint(f, out=np.zeros(count, dtype='float32'),
                                 count=count)
    _show('integer parts', results['int'], stream)

    count = 4
    c = np.array([16, 9, 4, 1], dtype='float32')
    results['sqrt'] = veclib.vsqrt(c, out=np.zeros(count, dtype='float32'),
                                   count=count)
    _show('square roots', results['sqrt'], stream)

    count = 4
    d = np.array([1 / 3, 2 / 5, 1 / 8, -3 / 1], dtype='float32')
    results['rec'] = veclib.vrec(d, out=np.zeros(count, dtype='float32'),
                                 count=count)
    _show('reciprocals', results['rec'], stream)

    return dict(results)


def vdsp_section(stream=None):
    """Distances along a vertical path of 9 points, 10 units apart."""
    stream = sys.stdout if stream is None else stream
    _heading('Distances along a 2D path', stream)

    points = [(0, 10 * i) for i in range(9)]
    xs, ys = vdsp.split_points(points)

    from_origin = vdsp.vdist(xs.astype('float32'), ys.astype('float32'))
    _show('distance from the origin at each point', from_origin, stream)

    legs = vdsp.path_legs(points)
    _show('length of each leg', legs, stream)

    total = vdsp.path_length(points)
    _show('total distance', total, stream)

    return {'from_origin': from_origin, 'legs': legs, 'total': total}


SECTIONS = OrderedDict([
    ('blas', blas_section),
    ('lapack', lapack_section),
    ('simd', simd_section),
    ('veclib', veclib_section),
    ('vdsp', vdsp_section),
])


def run_tour(stream=None, sections=None):
    """Run the tour sections in order.

    Parameters
    ----------
    stream : file-like, optional
        Where to print the results. Default: ``sys.stdout``.
    sections : sequence of str, optional
        Names from `SECTIONS` to run. Default: all of them.

    Returns
    -------
    results : `collections.OrderedDict`
        Mapping from section name to the results of that section.
    """
    stream = sys.stdout if stream is None else stream
    if sections is None:
        sections = list(SECTIONS)

    unknown = [name for name in sections if name not in SECTIONS]
    if unknown:
        raise ValueError('unknown section(s) {}, expected names from {}'
                         ''.format(unknown, list(SECTIONS)))

    print('A tour of the numerical kernels', file=stream)
    print('===============================', file=stream)

    results = OrderedDict()
    for name in sections:
        _LOGGER.info('running section %r', name)
        results[name] = SECTIONS[name](stream=stream)
    return results
