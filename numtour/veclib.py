# Copyright 2026 The numtour contributors
#
# This file is part of numtour.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Elementwise vector routines over counted buffers.

Every routine applies one scalar function to the first ``count`` elements
of its input buffer(s) and writes the results to an output buffer::

    out = vsqrt(x, out=None, count=None)
    out = vdiv(x, y, out=None, count=None)

If ``out`` is omitted, a new array with ``count`` elements is returned.
Elements of a given ``out`` past ``count`` are left untouched. Floating
point input keeps its precision, all other real input is computed in
double precision.

Results follow IEEE arithmetic without warnings, e.g. ``vrec(0) == inf``
and ``vsqrt(-1)`` is ``nan``.

See `numpy.ufuncs <https://numpy.org/doc/stable/reference/ufuncs.html>`_
for the kernels doing the actual work.
"""

from __future__ import absolute_import, division, print_function

import logging

import numpy as np

from numtour.util.numerics import as_vector, resolve_count
from numtour.util.utility import (
    is_complex_floating_dtype, is_numeric_dtype, is_real_floating_dtype)

__all__ = ('ROUTINES',
           'vabs', 'vint', 'vnint', 'vfloor', 'vceil',
           'vsqrt', 'vrsqrt', 'vrec', 'vexp', 'vlog',
           'vsin', 'vcos', 'vtan', 'vdiv', 'vpow')


_LOGGER = logging.getLogger(__name__)


def _rsqrt(x, out):
    """Reciprocal square root ``1 / sqrt(x)``."""
    np.sqrt(x, out=out)
    return np.reciprocal(out, out=out)


def _result_dtype(*dtypes):
    """Return the floating point dtype to compute in."""
    for dtype in dtypes:
        if (not (is_numeric_dtype(dtype) or dtype == np.bool_) or
                is_complex_floating_dtype(dtype)):
            raise TypeError('elementwise routines need real input, got '
                            'dtype {}'.format(dtype))
    if all(is_real_floating_dtype(dtype) for dtype in dtypes):
        return np.result_type(*dtypes)
    return np.dtype('float64')


def _prepare_out(out, count, dtype):
    """Return the view of ``out`` that receives ``count`` results."""
    if out is None:
        return np.empty(count, dtype=dtype), None

    if not isinstance(out, np.ndarray):
        raise TypeError('`out` {!r} not a `numpy.ndarray` instance'
                        ''.format(out))
    if out.ndim != 1:
        raise ValueError('`out` must be one-dimensional, got array with '
                         'shape {}'.format(out.shape))
    if not np.can_cast(dtype, out.dtype, casting='same_kind'):
        raise TypeError('`out` {!r} cannot hold results of dtype {}'
                        ''.format(out, dtype))
    return out[:count], out


_DOC_TEMPLATE = """{descr}

Parameters
----------
{params}
out : `numpy.ndarray`, optional
    Buffer receiving the results in its first ``count`` elements.
count : int, optional
    Number of elements to process. Default: as many as all buffers allow.

Returns
-------
out : `numpy.ndarray`
    The ``out`` argument if given, otherwise a new array of length
    ``count``.

See Also
--------
{see_also}
"""


def _unary_routine(name, kernel, descr, see_also=None):
    """Return a counted elementwise routine applying ``kernel``."""

    def routine(x, out=None, count=None):
        x = as_vector(x, 'x')
        buffers = [('x', x.size, 1)]
        if out is not None:
            buffers.append(('out', np.size(out), 1))
        count = resolve_count(count, *buffers)

        dtype = _result_dtype(x.dtype)
        dst, full_out = _prepare_out(out, count, dtype)
        src = x[:count].astype(dtype, copy=False)

        _LOGGER.debug('%s: count=%d, dtype=%s', name, count, dtype)
        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            kernel(src, out=dst)
        return dst if full_out is None else full_out

    routine.__name__ = routine.__qualname__ = name
    routine.__doc__ = _DOC_TEMPLATE.format(
        descr=descr,
        params='x : `array-like`\n    One-dimensional input buffer.',
        see_also=see_also or 'numpy.' + kernel.__name__)
    return routine


def _binary_routine(name, kernel, descr, see_also=None):
    """Return a counted elementwise routine applying binary ``kernel``."""

    def routine(x, y, out=None, count=None):
        x = as_vector(x, 'x')
        y = as_vector(y, 'y')
        buffers = [('x', x.size, 1), ('y', y.size, 1)]
        if out is not None:
            buffers.append(('out', np.size(out), 1))
        count = resolve_count(count, *buffers)

        dtype = _result_dtype(x.dtype, y.dtype)
        dst, full_out = _prepare_out(out, count, dtype)
        src_x = x[:count].astype(dtype, copy=False)
        src_y = y[:count].astype(dtype, copy=False)

        _LOGGER.debug('%s: count=%d, dtype=%s', name, count, dtype)
        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            kernel(src_x, src_y, out=dst)
        return dst if full_out is None else full_out

    routine.__name__ = routine.__qualname__ = name
    routine.__doc__ = _DOC_TEMPLATE.format(
        descr=descr,
        params=('x, y : `array-like`\n'
                '    One-dimensional input buffers.'),
        see_also=see_also or 'numpy.' + kernel.__name__)
    return routine


vabs = _unary_routine(
    'vabs', np.absolute, 'Return the absolute value ``|x[i]|``.')
vint = _unary_routine(
    'vint', np.trunc,
    'Return the integer part of ``x[i]``, rounded toward zero.')
vnint = _unary_routine(
    'vnint', np.rint,
    'Return the nearest integer to ``x[i]``, ties rounded to even.')
vfloor = _unary_routine(
    'vfloor', np.floor, 'Return the largest integer ``<= x[i]``.')
vceil = _unary_routine(
    'vceil', np.ceil, 'Return the smallest integer ``>= x[i]``.')
vsqrt = _unary_routine(
    'vsqrt', np.sqrt, 'Return the square root ``sqrt(x[i])``.')
vrsqrt = _unary_routine(
    'vrsqrt', _rsqrt,
    'Return the reciprocal square root ``1 / sqrt(x[i])``.',
    see_also='numpy.sqrt\nnumpy.reciprocal')
vrec = _unary_routine(
    'vrec', np.reciprocal, 'Return the reciprocal ``1 / x[i]``.')
vexp = _unary_routine(
    'vexp', np.exp, 'Return the exponential ``e ** x[i]``.')
vlog = _unary_routine(
    'vlog', np.log, 'Return the natural logarithm ``log(x[i])``.')
vsin = _unary_routine(
    'vsin', np.sin, 'Return the sine of ``x[i]`` (radians).')
vcos = _unary_routine(
    'vcos', np.cos, 'Return the cosine of ``x[i]`` (radians).')
vtan = _unary_routine(
    'vtan', np.tan, 'Return the tangent of ``x[i]`` (radians).')
vdiv = _binary_routine(
    'vdiv', np.divide, 'Return the quotient ``x[i] / y[i]``.')
vpow = _binary_routine(
    'vpow', np.power, 'Return the power ``x[i] ** y[i]``.')


# Name -> (routine, number of input buffers)
ROUTINES = {
    'vabs': (vabs, 1),
    'vint': (vint, 1),
    'vnint': (vnint, 1),
    'vfloor': (vfloor, 1),
    'vceil': (vceil, 1),
    'vsqrt': (vsqrt, 1),
    'vrsqrt': (vrsqrt, 1),
    'vrec': (vrec, 1),
    'vexp': (vexp, 1),
    'vlog': (vlog, 1),
    'vsin': (vsin, 1),
    'vcos': (vcos, 1),
    'vtan': (vtan, 1),
    'vdiv': (vdiv, 2),
    'vpow': (vpow, 2),
}


if __name__ == '__main__':
    from numtour.util.testutils import run_doctests
    run_doctests()
